"""
Build orchestration for bpfbuild projects.

This module drives the whole build and maps every outcome to a process
exit status:

1. Discover programs (external collaborator)
2. Reject batches with colliding output files
3. Validate the clang toolchain
4. Compile each program in order

Each stage short-circuits on failure. Nothing created before a failure is
cleaned up.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from .compilation_executor import CompilationExecutor
from .errors import BuildError, DiscoveryError, EmptyProgramSet
from .process_runner import (
    IFileSystem,
    IProcessRunner,
    LocalFileSystem,
    StrPath,
    SubprocessRunner,
)
from .program import ProgramDescriptor
from .program_checker import check_programs
from .program_scanner import discover_programs
from .toolchain_check import ToolchainValidator

logger = logging.getLogger(__name__)

Discovery = Callable[[bool, Optional[Path]], List[ProgramDescriptor]]

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass
class BuildConfig:
    """Settings for one build invocation."""

    debug: bool = False
    clang_path: StrPath = "clang"
    skip_version_check: bool = False
    manifest_path: Optional[Path] = None


class BuildOrchestrator:
    """
    Orchestrates a BPF build.

    Example usage:
        orchestrator = BuildOrchestrator()
        status = orchestrator.build(BuildConfig(debug=True))
        sys.exit(status)
    """

    def __init__(
        self,
        discovery: Optional[Discovery] = None,
        runner: Optional[IProcessRunner] = None,
        filesystem: Optional[IFileSystem] = None,
        arch: Optional[str] = None
    ):
        """
        Initialize build orchestrator.

        Args:
            discovery: Callable returning the programs to build
            runner: Process runner shared by validation and compilation
            filesystem: Filesystem used to create output directories
            arch: Runtime architecture override (defaults to the host)
        """
        self.discovery = discovery or discover_programs
        self.runner = runner or SubprocessRunner()
        self.filesystem = filesystem or LocalFileSystem()
        self.arch = arch

    def build(self, config: BuildConfig) -> int:
        """
        Run the build pipeline.

        Args:
            config: Build settings

        Returns:
            0 if every program compiled, 1 otherwise
        """
        try:
            programs = self._discover(config)
        except BuildError as e:
            print(e, file=sys.stderr)
            return EXIT_FAILURE

        try:
            check_programs(programs)
        except BuildError as e:
            print(e, file=sys.stderr)
            return EXIT_FAILURE

        validator = ToolchainValidator(self.runner, debug=config.debug)
        try:
            validator.validate(config.clang_path, config.skip_version_check)
        except BuildError as e:
            print(f"{config.clang_path} is invalid: {e}", file=sys.stderr)
            return EXIT_FAILURE

        executor = CompilationExecutor(
            self.runner, self.filesystem, debug=config.debug, arch=self.arch
        )
        try:
            outputs = executor.compile_programs(programs, config.clang_path)
        except BuildError as e:
            print(f"Failed to compile progs: {e}", file=sys.stderr)
            return EXIT_FAILURE

        logger.info(f"Compiled {len(outputs)} bpf progs")
        return EXIT_SUCCESS

    def _discover(self, config: BuildConfig) -> List[ProgramDescriptor]:
        """
        Ask the discovery collaborator for programs.

        Raises:
            DiscoveryError: If discovery fails
            EmptyProgramSet: If nothing was found
        """
        try:
            programs = list(self.discovery(config.debug, config.manifest_path))
        except DiscoveryError:
            raise
        except Exception as e:
            raise DiscoveryError(str(e) or type(e).__name__) from e

        if not programs:
            raise EmptyProgramSet()

        if config.debug:
            print("Found bpf progs to compile:")
            for program in programs:
                print(f"\t{program}")

        return programs
