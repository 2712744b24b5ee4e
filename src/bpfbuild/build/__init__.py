"""
Build system components for bpfbuild.

This module provides the build pipeline:
- Program discovery
- Duplicate output validation
- Clang toolchain validation
- Compilation (clang -target bpf)
- Build orchestration
"""

from .compilation_executor import CompilationExecutor
from .errors import (
    BuildError,
    CompilationFailed,
    DirectoryCreationFailed,
    DiscoveryError,
    DuplicateOutput,
    EmptyProgramSet,
    ErrorKind,
    InvalidSourceName,
    InvalidVersionFormat,
    ToolchainTooOld,
    ToolchainUnavailable,
)
from .flag_builder import FlagBuilder
from .orchestrator import BuildConfig, BuildOrchestrator
from .process_runner import (
    IFileSystem,
    IProcessRunner,
    LocalFileSystem,
    ProcessResult,
    SubprocessRunner,
)
from .program import ProgramDescriptor
from .program_checker import check_programs
from .program_scanner import ProgramScanner, discover_programs
from .toolchain_check import MIN_CLANG_VERSION, ToolchainInfo, ToolchainValidator

__all__ = [
    "BuildConfig",
    "BuildError",
    "BuildOrchestrator",
    "CompilationExecutor",
    "CompilationFailed",
    "DirectoryCreationFailed",
    "DiscoveryError",
    "DuplicateOutput",
    "EmptyProgramSet",
    "ErrorKind",
    "FlagBuilder",
    "IFileSystem",
    "IProcessRunner",
    "InvalidSourceName",
    "InvalidVersionFormat",
    "LocalFileSystem",
    "MIN_CLANG_VERSION",
    "ProcessResult",
    "ProgramDescriptor",
    "ProgramScanner",
    "SubprocessRunner",
    "ToolchainInfo",
    "ToolchainTooOld",
    "ToolchainUnavailable",
    "ToolchainValidator",
    "check_programs",
    "discover_programs",
]
