"""
Command-line interface for bpfbuild.

This module provides the `bpfbuild` CLI tool for compiling BPF programs.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from bpfbuild import __version__
from bpfbuild.build import BuildConfig, BuildOrchestrator
from bpfbuild.cli_utils import ErrorFormatter, setup_logging


@dataclass
class BuildArgs:
    """Arguments for the build command."""

    manifest_path: Optional[Path] = None
    clang_path: str = "clang"
    skip_clang_version_checks: bool = False
    debug: bool = False


def build_command(args: BuildArgs) -> None:
    """Compile BPF programs to object files.

    Examples:
        bpfbuild build                                 # Build programs in ./src/bpf
        bpfbuild build --manifest-path ../proj/Cargo.toml
        bpfbuild build --clang-path /usr/bin/clang-14
        bpfbuild build --skip-clang-version-checks
        bpfbuild build --debug                         # Verbose output
    """
    try:
        orchestrator = BuildOrchestrator()
        config = BuildConfig(
            debug=args.debug,
            clang_path=args.clang_path,
            skip_version_check=args.skip_clang_version_checks,
            manifest_path=args.manifest_path,
        )

        status = orchestrator.build(config)
        if status == 0:
            ErrorFormatter.print_success("Build successful!")
        sys.exit(status)

    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.debug)


def main(argv: Optional[List[str]] = None) -> None:
    """bpfbuild - compile BPF C programs with clang."""
    parser = argparse.ArgumentParser(
        prog="bpfbuild",
        description="bpfbuild - compile BPF C programs with clang",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"bpfbuild {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    build_parser = subparsers.add_parser(
        "build",
        help="Compile BPF programs to object files",
    )
    build_parser.add_argument(
        "--manifest-path",
        default=None,
        type=Path,
        help="Path to the project manifest (default: current directory)",
    )
    build_parser.add_argument(
        "--clang-path",
        default="clang",
        help="Path to clang binary (default: clang)",
    )
    build_parser.add_argument(
        "--skip-clang-version-checks",
        action="store_true",
        help="Skip clang version checks",
    )
    build_parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show debug output",
    )

    parsed_args = parser.parse_args(argv)

    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)

    if parsed_args.command == "build":
        setup_logging(parsed_args.debug)

        build_args = BuildArgs(
            manifest_path=parsed_args.manifest_path,
            clang_path=parsed_args.clang_path,
            skip_clang_version_checks=parsed_args.skip_clang_version_checks,
            debug=parsed_args.debug,
        )
        build_command(build_args)


if __name__ == "__main__":
    main()
