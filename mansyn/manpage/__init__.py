"""Man page processing utilities."""
from __future__ import annotations

from .models import Command, Syntax, Parameter
from .parser import build_parameter, build_syntax, build_command, get_defined_name, parse_man_page
from .synopsis import get_synopsis_lines
from .discovery import get_file_list, select_range, load_file_to_lines, man_file_to_command, parse_man_files

__all__ = [
    'Command',
    'Syntax',
    'Parameter',
    'build_parameter',
    'build_syntax',
    'build_command',
    'get_defined_name',
    'parse_man_page',
    'get_synopsis_lines',
    'get_file_list',
    'select_range',
    'load_file_to_lines',
    'man_file_to_command',
    'parse_man_files',
]
