"""Build invocation grammars from mdoc SYNOPSIS macros."""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Sequence

from ..config import (
    ARGUMENT_MACRO,
    DEFAULT_ARGUMENT,
    DEFAULT_FLAG,
    FLAG_MACRO,
    MAX_NESTING_DEPTH,
    OPTIONAL_MACRO,
)
from ..errors import NoSyntaxesFound, ParameterBuildError
from .models import Command, Parameter, Syntax
from .synopsis import get_synopsis_lines

logger = logging.getLogger(__name__)

# Some man pages define their name once and use a bare .Nm as shorthand
DEFINED_NAME_RE = re.compile(r'\.Nm ([a-z]+)')


def get_defined_name(lines: Iterable[str]) -> str:
    """Return the word from the first exact ``.Nm <word>`` line, or ''."""
    for line in lines:
        match = DEFINED_NAME_RE.fullmatch(line.strip())
        if match:
            return match.group(1)
    return ''


def nested_start(index: int) -> int:
    """Token index a nested parameter is built from.

    The triggering macro is included again, so the nested node sees it as
    its own first sighting.
    """
    return index


def _value_after(tokens: Sequence[str], index: int, default: str) -> str:
    if len(tokens) > index + 1:
        return tokens[index + 1]
    return default


def build_parameter(tokens: Sequence[str], depth: int = 0) -> Parameter:
    """Fold a line's tokens into a single parameter tree.

    mdoc composes meaning by juxtaposition, so ``Op Fl x Ar file`` is an
    optional flag ``x`` taking an argument ``file``. The first ``Op``,
    ``Ar`` and ``Fl`` fill this node; a repeated one, while nothing is
    nested yet, builds the nested parameter from the remaining tokens.

    Raises:
        ParameterBuildError: if nesting goes past MAX_NESTING_DEPTH.
    """
    if depth > MAX_NESTING_DEPTH:
        raise ParameterBuildError(" ".join(tokens), "Macro nesting too deep")

    optional = False
    argument: Optional[str] = None
    flags: Optional[str] = None
    nested: Optional[Parameter] = None

    for i, raw_token in enumerate(tokens):
        token = raw_token.lstrip('.')

        if token == OPTIONAL_MACRO:
            if not optional:
                optional = True
                continue
        elif token == ARGUMENT_MACRO:
            if argument is None:
                argument = _value_after(tokens, i, DEFAULT_ARGUMENT)
                continue
        elif token == FLAG_MACRO:
            if flags is None:
                flags = _value_after(tokens, i, DEFAULT_FLAG)
                continue
        else:
            continue

        if nested is None:
            nested = build_parameter(tokens[nested_start(i):], depth + 1)

    return Parameter(optional=optional, argument=argument, flags=flags, nested=nested)


def parse_line(line: str) -> Parameter:
    """Build the parameter tree for one markup line."""
    try:
        return build_parameter(line.split())
    except ParameterBuildError as e:
        raise ParameterBuildError(line, e.reason) from e


def build_syntax(lines: Iterable[str], errors: Optional[List[ParameterBuildError]] = None) -> Syntax:
    """Build one syntax from a group of lines, dropping degenerate parameters.

    A line that fails to build is skipped; the error is logged and, if
    ``errors`` is given, appended to it.
    """
    parameters = []
    for line in lines:
        try:
            param = parse_line(line)
        except ParameterBuildError as e:
            logger.debug("Skipping line: %s", e)
            if errors is not None:
                errors.append(e)
            continue
        if param.is_valid():
            parameters.append(param)
    return Syntax(parameters=tuple(parameters))


def build_command(name: str, groups: Iterable[Sequence[str]]) -> Command:
    """Assemble a command from grouped synopsis lines.

    Raises:
        NoSyntaxesFound: if no group yields a valid syntax.
    """
    syntaxes = []
    errors: List[ParameterBuildError] = []
    for group in groups:
        syntax = build_syntax(group, errors)
        if syntax.is_valid():
            syntaxes.append(syntax)

    if errors:
        logger.debug("%s: %d lines failed to build, last: %s", name or '<unnamed>', len(errors), errors[-1])
    if not syntaxes:
        raise NoSyntaxesFound(name)
    return Command(name=name, syntaxes=tuple(syntaxes))


def parse_man_page(lines: Sequence[str]) -> Command:
    """Extract the invocation grammar from one manual page source.

    Args:
        lines: The page's lines, already split on line breaks.

    Raises:
        NoSyntaxesFound: if the page has no usable SYNOPSIS macros.
    """
    groups = get_synopsis_lines(lines)
    name = get_defined_name(lines)
    return build_command(name, groups)
