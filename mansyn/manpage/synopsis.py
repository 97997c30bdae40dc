"""SYNOPSIS section extraction."""
from __future__ import annotations

import logging
from typing import Iterable, List

from .classifier import (
    has_recognized_macro,
    is_section_heading,
    is_synopsis_heading,
    starts_new_alternative,
)

logger = logging.getLogger(__name__)


def get_synopsis_lines(lines: Iterable[str]) -> List[List[str]]:
    """Group the macro lines below the SYNOPSIS heading by alternative.

    Args:
        lines: Raw lines of one manual page source.

    Returns:
        One list of markup lines per candidate syntax, in document order.
        Empty if there is no SYNOPSIS heading or nothing usable below it.
    """
    groups: List[List[str]] = []
    in_synopsis = False
    dropped = 0

    for line in lines:
        if is_synopsis_heading(line):
            in_synopsis = True
            continue

        if not in_synopsis:
            continue

        # Stop at the next section, whichever it is
        if is_section_heading(line):
            break

        if not has_recognized_macro(line):
            dropped += 1
            continue

        if starts_new_alternative(line, not groups):
            groups.append([])
        groups[-1].append(line)

    if in_synopsis:
        logger.debug("SYNOPSIS: %d groups, %d lines without macros dropped", len(groups), dropped)
    else:
        logger.debug("No SYNOPSIS heading found")
    return groups
