"""Compilation Executor.

This module compiles a validated batch of BPF programs, one clang
subprocess per program, strictly in batch order.

Design:
    - Creates each program's output directory before compiling it
    - Builds the clang command with FlagBuilder
    - Stops the batch at the first failure; later programs are not attempted
    - Keeps the full compiler stdout/stderr in the error
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import CompilationFailed, DirectoryCreationFailed
from .flag_builder import FlagBuilder
from .process_runner import (
    IFileSystem,
    IProcessRunner,
    LocalFileSystem,
    StrPath,
    SubprocessRunner,
)
from .program import ProgramDescriptor

logger = logging.getLogger(__name__)


class CompilationExecutor:
    """Compiles BPF programs with clang.

    This class handles:
    - Computing destination object paths
    - Creating output directories
    - Running clang for each program
    - Raising CompilationFailed with full diagnostics
    """

    def __init__(
        self,
        runner: Optional[IProcessRunner] = None,
        filesystem: Optional[IFileSystem] = None,
        debug: bool = False,
        arch: Optional[str] = None,
    ):
        """Initialize compilation executor.

        Args:
            runner: Process runner (defaults to SubprocessRunner)
            filesystem: Filesystem (defaults to LocalFileSystem)
            debug: Print each program as it is built
            arch: Runtime architecture override (defaults to the host)
        """
        self.runner = runner or SubprocessRunner()
        self.filesystem = filesystem or LocalFileSystem()
        self.debug = debug
        self.flag_builder = FlagBuilder(arch)

    def compile_programs(
        self, programs: Sequence[ProgramDescriptor], clang_path: StrPath
    ) -> List[Path]:
        """Compile every program in order.

        Args:
            programs: Validated batch of programs
            clang_path: Path to the clang binary

        Returns:
            Paths of the produced object files, in batch order

        Raises:
            InvalidSourceName: If a program has no usable file stem
            DirectoryCreationFailed: If an output directory cannot be created
            CompilationFailed: If clang fails for a program
        """
        outputs = []
        for program in programs:
            outputs.append(self.compile_program(program, clang_path))
        return outputs

    def compile_program(self, program: ProgramDescriptor, clang_path: StrPath) -> Path:
        """Compile a single program.

        Args:
            program: Program to compile
            clang_path: Path to the clang binary

        Returns:
            Path to the object file written by clang
        """
        dest_name = program.output_file_name
        dest_path = program.output_dir / dest_name

        try:
            self.filesystem.make_dirs(program.output_dir)
        except OSError as e:
            raise DirectoryCreationFailed(program.output_dir, str(e)) from e

        if self.debug:
            print(f"Building {program.source_path}")

        source = program.source_path.resolve()
        cmd = self.flag_builder.build_command(clang_path, source, dest_path)
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = self.runner.run(cmd)
        except OSError as e:
            raise CompilationFailed(dest_name, f"spawn error: {e}", "", "") from e

        if not result.success:
            raise CompilationFailed(
                dest_name, result.status, result.stdout_text, result.stderr_text
            )

        return dest_path
