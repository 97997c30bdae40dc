"""Text and JSON rendering of command grammars.

The text form is for diagnostics only and cannot be parsed back into markup.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

from ..config import INDENT_MARKER
from ..manpage.models import Command, Parameter, Syntax


def prepend_marker(text: str) -> str:
    """Indent every non-blank line by one marker, dropping blank lines."""
    out = ''
    for line in text.split('\n'):
        if line.strip():
            out += INDENT_MARKER + line + '\n'
    return out


def render_parameter(param: Parameter) -> str:
    ret = ''
    if param.optional:
        ret += f"{INDENT_MARKER}optional\n"
    if param.nospace:
        ret += f"{INDENT_MARKER}nospace\n"
    if param.has_flags:
        ret += f"{INDENT_MARKER}flags: {param.flags}\n"
    if param.has_argument:
        ret += f"{INDENT_MARKER}has argument: {param.argument}\n"
    if param.has_nested:
        ret += f"{INDENT_MARKER}has nested parameter:\n" + prepend_marker(render_parameter(param.nested))
    if ret:
        ret = "Parameter:\n" + ret
    return ret


def render_syntax(syntax: Syntax) -> str:
    return ''.join(render_parameter(p) + '\n' for p in syntax.parameters)


def render_command(command: Command) -> str:
    """Render a command, one blank line after each syntax."""
    ret = f"Command: {command.name}\n"
    for syntax in command.syntaxes:
        ret += prepend_marker(render_syntax(syntax)) + '\n'
    return ret


def parameter_to_dict(param: Parameter) -> Dict[str, Any]:
    return {
        'optional': param.optional,
        'nospace': param.nospace,
        'argument': param.argument,
        'flags': param.flags,
        'nested': parameter_to_dict(param.nested) if param.nested else None,
    }


def command_to_dict(command: Command) -> Dict[str, Any]:
    return {
        'name': command.name,
        'syntaxes': [
            {'parameters': [parameter_to_dict(p) for p in syntax.parameters]}
            for syntax in command.syntaxes
        ],
    }


def render_json(results: Iterable[Tuple[Path, Command]], indent: Optional[int] = 2) -> str:
    """Render (path, command) pairs as a JSON array."""
    return json.dumps(
        [{'path': str(path), 'command': command_to_dict(command)} for path, command in results],
        indent=indent,
    )
