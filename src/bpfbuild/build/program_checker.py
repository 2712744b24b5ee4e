"""Duplicate output validation for a batch of programs."""

import logging
from pathlib import Path
from typing import Sequence, Set

from .errors import DuplicateOutput
from .program import ProgramDescriptor

logger = logging.getLogger(__name__)


def check_programs(programs: Sequence[ProgramDescriptor]) -> None:
    """Reject a batch where two programs write the same object file.

    Programs are checked in batch order and the first collision is reported.
    Identical names under different output directories do not collide.

    Args:
        programs: Discovered programs in batch order

    Raises:
        DuplicateOutput: If two programs share an output path
    """
    seen: Set[Path] = set()
    for program in programs:
        dest = program.output_path
        if dest in seen:
            raise DuplicateOutput(program.file_name or str(program.source_path), dest)
        seen.add(dest)

    logger.debug(f"Checked {len(programs)} programs for duplicate outputs")
