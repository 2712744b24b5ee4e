"""Process and filesystem capabilities.

The toolchain validator and the compilation executor never call subprocess
or create directories directly. They go through these interfaces so tests
can substitute fakes without spawning real binaries.

Design:
    - Wraps subprocess.run with fully captured stdout/stderr
    - No timeout: a hung compiler blocks the build
    - Output is kept as bytes and decoded lossily on demand
"""

import os
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union

# A user-supplied executable path, kept exactly as given (e.g. "./clang")
StrPath = Union[str, Path]


@dataclass
class ProcessResult:
    """Result of a finished subprocess."""

    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")

    @property
    def status(self) -> str:
        """Human-readable exit status."""
        if self.returncode < 0:
            return f"signal: {-self.returncode}"
        return f"exit status: {self.returncode}"


class IProcessRunner(ABC):
    """Interface for running external commands."""

    @abstractmethod
    def run(self, cmd: Sequence[StrPath]) -> ProcessResult:
        """Run a command to completion and capture its output.

        Args:
            cmd: Program followed by its arguments

        Returns:
            ProcessResult with exit code and captured output

        Raises:
            OSError: If the process cannot be spawned
        """
        pass


class IFileSystem(ABC):
    """Interface for the filesystem operations the build needs."""

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create a directory and any missing parents.

        Args:
            path: Directory to create

        Raises:
            OSError: If the directory cannot be created
        """
        pass


class SubprocessRunner(IProcessRunner):
    """Runs commands with subprocess.run."""

    def run(self, cmd: Sequence[StrPath]) -> ProcessResult:
        args: List[str] = [os.fspath(arg) for arg in cmd]
        result = subprocess.run(args, capture_output=True)
        return ProcessResult(
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )


class LocalFileSystem(IFileSystem):
    """Filesystem operations on the local disk."""

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)
