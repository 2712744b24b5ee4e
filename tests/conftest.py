"""Shared fixtures for bpfbuild tests."""

import stat
import sys
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from bpfbuild.build.process_runner import IFileSystem, IProcessRunner, ProcessResult

FAKE_CLANG_SCRIPT = """#!/bin/sh
if [ "$1" = "--version" ]; then
    printf 'fakecc version {version}\\nTarget: bpf\\nThread model: posix\\n'
    exit 0
fi
out=""
while [ $# -gt 0 ]; do
    if [ "$1" = "-o" ]; then
        shift
        out="$1"
    fi
    shift
done
{compile_body}
"""

COMPILE_OK = 'printf "\\177ELF" > "$out"\nexit 0'
COMPILE_FAIL = 'echo "building $out"\necho "error: expected expression" >&2\nexit 1'


class FakeRunner(IProcessRunner):
    """Process runner that records commands and returns canned results."""

    def __init__(self, handler: Optional[Callable[[List[str]], ProcessResult]] = None):
        self.calls: List[List[str]] = []
        self.handler = handler or (lambda cmd: ProcessResult(0, b"", b""))

    def run(self, cmd):
        args = [str(arg) for arg in cmd]
        self.calls.append(args)
        return self.handler(args)


class FakeFileSystem(IFileSystem):
    """Filesystem that records created directories without touching disk."""

    def __init__(self, fail_on: Optional[Path] = None):
        self.created: List[Path] = []
        self.fail_on = fail_on

    def make_dirs(self, path):
        if self.fail_on is not None and Path(path) == self.fail_on:
            raise PermissionError(13, "Permission denied", str(path))
        self.created.append(Path(path))


def version_result(text: str, returncode: int = 0) -> ProcessResult:
    return ProcessResult(returncode, text.encode(), b"")


@pytest.fixture
def fake_runner():
    """Runner whose clang reports version 12.0.1 and always compiles."""

    def handler(cmd):
        if cmd[1:] == ["--version"]:
            return version_result("clang version 12.0.1\nTarget: x86_64-pc-linux-gnu\n")
        return ProcessResult(0, b"", b"")

    return FakeRunner(handler)


@pytest.fixture
def fake_fs():
    return FakeFileSystem()


@pytest.fixture
def make_fake_clang(tmp_path):
    """Factory writing an executable stub clang into tmp_path."""
    if sys.platform == "win32":
        pytest.skip("stub compiler is a POSIX shell script")

    def _make(version: str = "12.0.1", succeed: bool = True, name: str = "fakecc") -> Path:
        script = tmp_path / "bin" / name
        script.parent.mkdir(parents=True, exist_ok=True)
        script.write_text(
            FAKE_CLANG_SCRIPT.format(
                version=version,
                compile_body=COMPILE_OK if succeed else COMPILE_FAIL,
            )
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances with a custom handler."""
    return FakeRunner


@pytest.fixture
def make_fs():
    """Factory for FakeFileSystem instances."""
    return FakeFileSystem
