"""Build error taxonomy.

Every failure in the build pipeline is raised as a BuildError subclass.
Each error carries an ErrorKind tag plus the structured context needed to
render its diagnostic, and str(error) is the diagnostic text printed to the
user.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorKind(Enum):
    """Enumerated kinds of build failure."""

    DISCOVERY_ERROR = "discovery_error"
    EMPTY_PROGRAM_SET = "empty_program_set"
    DUPLICATE_OUTPUT = "duplicate_output"
    TOOLCHAIN_UNAVAILABLE = "toolchain_unavailable"
    INVALID_VERSION_FORMAT = "invalid_version_format"
    TOOLCHAIN_TOO_OLD = "toolchain_too_old"
    INVALID_SOURCE_NAME = "invalid_source_name"
    DIRECTORY_CREATION_FAILED = "directory_creation_failed"
    COMPILATION_FAILED = "compilation_failed"


class BuildError(Exception):
    """Base exception for all build pipeline errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DiscoveryError(BuildError):
    """Raised when the program discovery collaborator fails."""

    kind = ErrorKind.DISCOVERY_ERROR


class EmptyProgramSet(BuildError):
    """Raised when discovery found nothing to build."""

    kind = ErrorKind.EMPTY_PROGRAM_SET

    def __init__(self):
        super().__init__("Did not find any bpf progs to compile")


class DuplicateOutput(BuildError):
    """Raised when two programs would write the same output file."""

    kind = ErrorKind.DUPLICATE_OUTPUT

    def __init__(self, file_name: str, output_path: Path):
        self.file_name = file_name
        self.output_path = output_path
        super().__init__(f"Duplicate prog={file_name} detected")


class ToolchainUnavailable(BuildError):
    """Raised when the clang binary is missing or fails to execute."""

    kind = ErrorKind.TOOLCHAIN_UNAVAILABLE

    def __init__(self, clang_path: Union[str, Path], reason: Optional[str] = None):
        self.clang_path = clang_path
        self.reason = reason
        message = "Failed to execute clang binary"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidVersionFormat(BuildError):
    """Raised when clang's version report cannot be parsed."""

    kind = ErrorKind.INVALID_VERSION_FORMAT

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        message = "Invalid version format"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class ToolchainTooOld(BuildError):
    """Raised when clang is older than the supported minimum."""

    kind = ErrorKind.TOOLCHAIN_TOO_OLD

    def __init__(self, detected: str, required: str):
        self.detected = detected
        self.required = required
        super().__init__(
            f"version {detected} is too old (minimum required is {required}). "
            "Use --skip-clang-version-checks to skip version check"
        )


class InvalidSourceName(BuildError):
    """Raised when a program's source path has no usable file stem."""

    kind = ErrorKind.INVALID_SOURCE_NAME

    def __init__(self, source_path: Path):
        self.source_path = source_path
        super().__init__(
            f"Could not calculate destination name for prog={source_path}"
        )


class DirectoryCreationFailed(BuildError):
    """Raised when an output directory cannot be created."""

    kind = ErrorKind.DIRECTORY_CREATION_FAILED

    def __init__(self, directory: Path, reason: str):
        self.directory = directory
        self.reason = reason
        super().__init__(f"Failed to create directory {directory}: {reason}")


class CompilationFailed(BuildError):
    """Raised when clang exits non-zero for a program.

    The full captured stdout and stderr are kept in the message.
    """

    kind = ErrorKind.COMPILATION_FAILED

    def __init__(self, dest_name: str, status: str, stdout: str, stderr: str):
        self.dest_name = dest_name
        self.status = status
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"Failed to compile prog={dest_name} with status={status}\n"
            f" stdout=\n {stdout}\n"
            f" stderr=\n {stderr}\n"
        )
