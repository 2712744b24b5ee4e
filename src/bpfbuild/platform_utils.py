"""Platform Detection Utilities.

This module detects the host CPU architecture and translates it to the
name BPF headers expect in ``__TARGET_ARCH_<arch>``.

Architecture names follow the runtime naming used by the kernel tooling:
    - x86_64, x86, aarch64, arm, powerpc64, riscv64, s390x, mips, ...
"""

import platform
from typing import Dict, Optional

# Runtime architecture name -> BPF target architecture name
TARGET_ARCH_SUBSTITUTIONS: Dict[str, str] = {
    "x86_64": "x86",
}

# platform.machine() spellings -> runtime architecture name
_MACHINE_ALIASES: Dict[str, str] = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
    "ppc64le": "powerpc64",
    "ppc64": "powerpc64",
    "ppc": "powerpc",
}


class PlatformDetector:
    """Detects the host architecture for BPF compilation."""

    @staticmethod
    def detect_arch(machine: Optional[str] = None) -> str:
        """Detect the runtime architecture name of the host.

        Args:
            machine: Raw machine string (defaults to platform.machine())

        Returns:
            Normalized architecture name (e.g. 'x86_64', 'aarch64', 'arm')
        """
        if machine is None:
            machine = platform.machine()
        machine = machine.lower()
        return _MACHINE_ALIASES.get(machine, machine)


def target_arch(arch: str) -> str:
    """Translate a runtime architecture name to the BPF target name.

    Only ``x86_64`` is rewritten (to ``x86``); every other name passes
    through unchanged.
    """
    return TARGET_ARCH_SUBSTITUTIONS.get(arch, arch)
