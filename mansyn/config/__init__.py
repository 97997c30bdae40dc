"""Configuration and constants for mansyn."""
from __future__ import annotations

from pathlib import Path

# Macros we can handle and understand
KNOWN_MACROS = ('.Nm', '.Op', '.Ar', '.Fl')

# Bare macro names, compared after the leading dot is stripped
OPTIONAL_MACRO = 'Op'
ARGUMENT_MACRO = 'Ar'
FLAG_MACRO = 'Fl'

# Section headings
SECTION_HEADING_TAG = '.Sh'
SYNOPSIS_SECTION = 'synopsis'
SECTION_HEADING_PREFIXES = ('.Sh', '.SH')

# Values used when a macro has nothing following it
DEFAULT_ARGUMENT = 'files'  # unnamed arguments are file operands
DEFAULT_FLAG = '-'

# Deepest nested parameter a single line may produce
MAX_NESTING_DEPTH = 200

# Two-character marker, one per nesting level in rendered output
INDENT_MARKER = '--'

# Batch processing defaults
DEFAULT_MAN_DIR = Path('/usr/share/man/man1')
MAN_DIR_ENV_VAR = 'MANSYN_MAN_DIR'  # read by the CLI only
DEFAULT_WORKERS = 8
