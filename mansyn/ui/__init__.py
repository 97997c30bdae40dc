"""Output rendering for parsed commands."""
from __future__ import annotations

from .render import render_parameter, render_syntax, render_command, command_to_dict, render_json

__all__ = [
    'render_parameter',
    'render_syntax',
    'render_command',
    'command_to_dict',
    'render_json',
]
