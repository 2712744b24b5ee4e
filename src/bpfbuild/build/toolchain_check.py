"""Clang toolchain validation.

Checks that the clang binary runs and is new enough before any program is
compiled, so an unsuitable toolchain produces one clear diagnostic instead of
a compile failure per program.

Example ``clang --version`` output:

    clang version 10.0.0
    Target: x86_64-pc-linux-gnu
    Thread model: posix
    InstalledDir: /bin
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import semver

from .errors import InvalidVersionFormat, ToolchainTooOld, ToolchainUnavailable
from .process_runner import IProcessRunner, StrPath, SubprocessRunner

logger = logging.getLogger(__name__)

MIN_CLANG_VERSION = "10.0.0"


@dataclass
class ToolchainInfo:
    """Resolved toolchain for one build invocation."""

    path: StrPath
    version: Optional[semver.Version]


def parse_clang_version(output: str) -> semver.Version:
    """Extract the version from ``clang --version`` output.

    The third whitespace-delimited token of the first line is the version,
    e.g. ``clang version 12.0.1`` -> ``12.0.1``.

    Args:
        output: Captured stdout of ``clang --version``

    Returns:
        Parsed semantic version

    Raises:
        InvalidVersionFormat: If the line or token is missing or not semver
    """
    lines = output.split("\n")
    if not lines or not lines[0]:
        raise InvalidVersionFormat("no output")

    tokens = lines[0].split()
    if len(tokens) < 3:
        raise InvalidVersionFormat(f"unexpected first line {lines[0]!r}")

    version_str = tokens[2]
    try:
        return semver.Version.parse(version_str)
    except ValueError as e:
        raise InvalidVersionFormat(str(e)) from e


class ToolchainValidator:
    """Validates that a clang binary is usable for BPF builds."""

    def __init__(self, runner: Optional[IProcessRunner] = None, debug: bool = False):
        """Initialize toolchain validator.

        Args:
            runner: Process runner (defaults to SubprocessRunner)
            debug: Print the detected version
        """
        self.runner = runner or SubprocessRunner()
        self.debug = debug

    def validate(self, clang_path: StrPath, skip_version_check: bool = False) -> ToolchainInfo:
        """Run ``clang --version`` and check the version floor.

        Args:
            clang_path: Path or name of the clang binary, used as given
            skip_version_check: Accept any clang that runs successfully

        Returns:
            ToolchainInfo (version is None when the check is skipped)

        Raises:
            ToolchainUnavailable: If clang cannot be spawned or exits non-zero
            InvalidVersionFormat: If the version cannot be parsed
            ToolchainTooOld: If clang is older than MIN_CLANG_VERSION
        """
        try:
            result = self.runner.run([os.fspath(clang_path), "--version"])
        except OSError as e:
            raise ToolchainUnavailable(clang_path, str(e)) from e

        if not result.success:
            raise ToolchainUnavailable(clang_path)

        if skip_version_check:
            logger.debug(f"Skipping version check for {clang_path}")
            return ToolchainInfo(path=clang_path, version=None)

        version = parse_clang_version(result.stdout_text)
        if self.debug:
            print(f"{clang_path} is version {version}")

        if version < semver.Version.parse(MIN_CLANG_VERSION):
            raise ToolchainTooOld(str(version), MIN_CLANG_VERSION)

        return ToolchainInfo(path=clang_path, version=version)
