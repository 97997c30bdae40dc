"""Extract invocation grammars from mdoc manual page SYNOPSIS sections."""
from __future__ import annotations

from .errors import ManSynError, NoSyntaxesFound, ParameterBuildError, ManPageReadError
from .manpage import Command, Syntax, Parameter, parse_man_page, parse_man_files

__version__ = '0.1.0'

__all__ = [
    'ManSynError',
    'NoSyntaxesFound',
    'ParameterBuildError',
    'ManPageReadError',
    'Command',
    'Syntax',
    'Parameter',
    'parse_man_page',
    'parse_man_files',
]
