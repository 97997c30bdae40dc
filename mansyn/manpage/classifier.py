"""Line predicates for mdoc SYNOPSIS extraction."""
from __future__ import annotations

import re
from typing import Callable, Iterable, Tuple

from ..config import (
    KNOWN_MACROS,
    SECTION_HEADING_PREFIXES,
    SECTION_HEADING_TAG,
    SYNOPSIS_SECTION,
)

NAME_LINE_RE = re.compile(r'\.Nm( \w+)?')


def quote_string(s: str) -> str:
    return '"' + s + '"'


def as_written(s: str) -> str:
    return s


# Pages are inconsistent about quoting and capitalising headings, so the
# heading tag and the section name are each tried in every rendering.
HEADING_TRANSFORMS: Tuple[Callable[[str], str], ...] = (quote_string, as_written, str.upper)


def heading_variants(tag: str, section: str) -> Tuple[str, ...]:
    """All spellings of ``<tag> <section>`` under HEADING_TRANSFORMS."""
    return tuple(
        tag_fn(tag) + ' ' + section_fn(section)
        for tag_fn in HEADING_TRANSFORMS
        for section_fn in HEADING_TRANSFORMS
    )


SYNOPSIS_HEADINGS = heading_variants(SECTION_HEADING_TAG, SYNOPSIS_SECTION)


def is_synopsis_heading(line: str) -> bool:
    """Determine if this line opens the SYNOPSIS section."""
    return line.startswith(SYNOPSIS_HEADINGS)


def is_section_heading(line: str) -> bool:
    """Any section heading ends the SYNOPSIS section."""
    return line.startswith(SECTION_HEADING_PREFIXES)


def has_recognized_macro(line: str, macros: Iterable[str] = KNOWN_MACROS) -> bool:
    """Check whether a line uses any macro we understand.

    Many synopsis sections are written with bold/italic requests instead of
    macros; those lines are not parsed.
    """
    return any(macro in line for macro in macros)


def is_name_line(line: str) -> bool:
    return NAME_LINE_RE.match(line) is not None


def starts_new_alternative(line: str, first_compliant_line: bool) -> bool:
    """Check whether a line begins another invocation form.

    Each alternative usually restates the command name with ``.Nm``; a few
    pages skip it for the first one, so the first compliant line always
    starts a group.
    """
    return is_name_line(line) or first_compliant_line
