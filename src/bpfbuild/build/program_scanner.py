"""
BPF program discovery.

This module provides the default discovery collaborator used by the
orchestrator. It does not read manifest contents: the manifest path only
locates the project root.

Layout:
    <project>/src/bpf/*.bpf.c   -> sources
    <project>/target/bpf/       -> object files
"""

from pathlib import Path
from typing import List, Optional

from .errors import DiscoveryError
from .program import ProgramDescriptor

BPF_SOURCE_PATTERN = "*.bpf.c"
PROG_DIR = Path("src") / "bpf"
TARGET_DIR = Path("target") / "bpf"


class ProgramScanner:
    """
    Scans a project directory for BPF C programs.

    Usage:
        scanner = ProgramScanner(Path("."))
        programs = scanner.scan()
    """

    def __init__(
        self,
        project_dir: Path,
        prog_dir: Optional[Path] = None,
        target_dir: Optional[Path] = None
    ):
        """
        Initialize program scanner.

        Args:
            project_dir: Project root directory
            prog_dir: Source directory (defaults to project_dir/src/bpf)
            target_dir: Output directory (defaults to project_dir/target/bpf)
        """
        self.project_dir = Path(project_dir)
        self.prog_dir = Path(prog_dir) if prog_dir else self.project_dir / PROG_DIR
        self.target_dir = Path(target_dir) if target_dir else self.project_dir / TARGET_DIR

    def scan(self) -> List[ProgramDescriptor]:
        """
        Find all BPF programs, sorted by file name.

        Returns:
            Program descriptors (empty if the source directory is missing)
        """
        if not self.prog_dir.is_dir():
            return []

        return [
            ProgramDescriptor(source_path=path, output_dir=self.target_dir)
            for path in sorted(self.prog_dir.glob(BPF_SOURCE_PATTERN))
            if path.is_file()
        ]


def discover_programs(debug: bool, manifest_path: Optional[Path] = None) -> List[ProgramDescriptor]:
    """Default discovery: scan the project that owns ``manifest_path``.

    Args:
        debug: Print the project directory being scanned
        manifest_path: Project manifest (defaults to the current directory)

    Returns:
        Discovered programs in name order

    Raises:
        DiscoveryError: If the manifest path does not exist
    """
    if manifest_path is not None:
        manifest_path = Path(manifest_path)
        if not manifest_path.exists():
            raise DiscoveryError(f"Manifest not found: {manifest_path}")
        project_dir = manifest_path.parent if manifest_path.is_file() else manifest_path
    else:
        project_dir = Path.cwd()

    project_dir = project_dir.resolve()
    if debug:
        print(f"Scanning {project_dir / PROG_DIR} for bpf progs")

    return ProgramScanner(project_dir).scan()
