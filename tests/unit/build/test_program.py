"""Tests for ProgramDescriptor."""

from pathlib import Path

import pytest

from bpfbuild.build.errors import ErrorKind, InvalidSourceName
from bpfbuild.build.program import ProgramDescriptor


class TestProgramDescriptor:
    """Test the program descriptor model."""

    def test_output_path_uses_stem(self):
        """Object name is the source stem plus .o."""
        prog = ProgramDescriptor(Path("/proj/src/bpf/runqslower.bpf.c"), Path("/proj/target/bpf"))

        assert prog.file_name == "runqslower.bpf.c"
        assert prog.stem == "runqslower.bpf"
        assert prog.output_file_name == "runqslower.bpf.o"
        assert prog.output_path == Path("/proj/target/bpf/runqslower.bpf.o")

    def test_accepts_strings(self):
        """String paths are converted to Path."""
        prog = ProgramDescriptor("src/a.c", "out")

        assert isinstance(prog.source_path, Path)
        assert isinstance(prog.output_dir, Path)
        assert prog.output_path == Path("out") / "a.o"

    def test_root_path_has_no_stem(self):
        """A root path has neither file name nor stem."""
        prog = ProgramDescriptor(Path("/"), Path("/out"))

        assert prog.file_name is None
        assert prog.stem is None
        with pytest.raises(InvalidSourceName) as exc_info:
            _ = prog.output_path

        assert exc_info.value.kind is ErrorKind.INVALID_SOURCE_NAME
        assert "Could not calculate destination name" in str(exc_info.value)

    def test_str(self):
        """String form names source and output directory."""
        prog = ProgramDescriptor(Path("a.bpf.c"), Path("out"))

        text = str(prog)
        assert "a.bpf.c" in text
        assert "out" in text

    def test_frozen(self):
        """Descriptors are immutable."""
        prog = ProgramDescriptor(Path("a.c"), Path("out"))

        with pytest.raises(AttributeError):
            prog.output_dir = Path("elsewhere")  # type: ignore[misc]


@pytest.mark.parametrize(
    "name,stem,object_name",
    [
        ("foo.", "foo", "foo.o"),
        ("foo", "foo", "foo.o"),
        (".hidden", ".hidden", ".hidden.o"),
        (".hidden.c", ".hidden", ".hidden.o"),
        ("a.bpf.c", "a.bpf", "a.bpf.o"),
    ],
)
def test_stem_edge_cases(name, stem, object_name):
    prog = ProgramDescriptor(Path("src") / name, Path("out"))

    assert prog.stem == stem
    assert prog.output_file_name == object_name
