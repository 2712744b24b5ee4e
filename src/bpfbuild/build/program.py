"""Program descriptor model.

A ProgramDescriptor describes one compilation unit: a single BPF C source
file and the directory its object file is written to.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import InvalidSourceName

OBJECT_SUFFIX = ".o"


@dataclass(frozen=True)
class ProgramDescriptor:
    """A single BPF program to compile."""

    source_path: Path
    output_dir: Path

    def __post_init__(self):
        object.__setattr__(self, "source_path", Path(self.source_path))
        object.__setattr__(self, "output_dir", Path(self.output_dir))

    @property
    def file_name(self) -> Optional[str]:
        """Final path segment of the source, or None for root-like paths."""
        name = self.source_path.name
        if not name or name == "..":
            return None
        return name

    @property
    def stem(self) -> Optional[str]:
        """Source file name without its last extension.

        A leading dot does not start an extension (``.hidden`` keeps its
        name) and a trailing dot is dropped (``foo.`` -> ``foo``).
        """
        name = self.file_name
        if name is None:
            return None
        dot = name.rfind(".")
        if dot <= 0:
            return name
        return name[:dot]

    @property
    def output_file_name(self) -> str:
        """Object file name, e.g. ``runqslower.bpf.o``.

        Raises:
            InvalidSourceName: If the source path has no stem
        """
        stem = self.stem
        if stem is None:
            raise InvalidSourceName(self.source_path)
        return stem + OBJECT_SUFFIX

    @property
    def output_path(self) -> Path:
        """Full destination path of the compiled object."""
        return self.output_dir / self.output_file_name

    def __str__(self) -> str:
        return f"ProgramDescriptor(source={self.source_path}, out={self.output_dir})"
