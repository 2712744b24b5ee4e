"""Compilation Flag Builder.

This module builds the clang command line used for every BPF program.
The argument order is fixed; downstream tooling depends on it.

We're essentially going to run:

    clang -g -O2 -target bpf -c -D__TARGET_ARCH_$(ARCH) prog.bpf.c -o prog.bpf.o

for each program.
"""

import os
from pathlib import Path
from typing import List, Optional

from ..platform_utils import PlatformDetector, target_arch
from .process_runner import StrPath

DEBUG_INFO_FLAG = "-g"
OPTIMIZATION_FLAG = "-O2"
TARGET_FLAGS = ["-target", "bpf"]
COMPILE_ONLY_FLAG = "-c"
OUTPUT_FLAG = "-o"


class FlagBuilder:
    """Builds clang command lines for BPF programs."""

    def __init__(self, arch: Optional[str] = None):
        """Initialize flag builder.

        Args:
            arch: Runtime architecture name (defaults to the host architecture)
        """
        self.arch = arch if arch is not None else PlatformDetector.detect_arch()

    @staticmethod
    def target_arch_define(arch: str) -> str:
        """Build the ``-D__TARGET_ARCH_<arch>`` preprocessor define.

        Example:
            >>> FlagBuilder.target_arch_define("x86_64")
            '-D__TARGET_ARCH_x86'
        """
        return f"-D__TARGET_ARCH_{target_arch(arch)}"

    def compile_flags(self) -> List[str]:
        """Flags that precede the source file."""
        return [
            DEBUG_INFO_FLAG,
            OPTIMIZATION_FLAG,
            *TARGET_FLAGS,
            COMPILE_ONLY_FLAG,
            self.target_arch_define(self.arch),
        ]

    def build_command(self, clang_path: StrPath, source: Path, dest: Path) -> List[str]:
        """Build the full clang command for one program.

        Args:
            clang_path: Path to the clang binary, used as given
            source: Absolute path of the source file
            dest: Destination object file path

        Returns:
            Argument list starting with the clang path
        """
        cmd = [os.fspath(clang_path)]
        cmd.extend(self.compile_flags())
        cmd.append(str(source))
        cmd.extend([OUTPUT_FLAG, str(dest)])
        return cmd
