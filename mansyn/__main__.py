"""Allow running mansyn with ``python -m mansyn``."""
from __future__ import annotations

import sys

from .cli import main

sys.exit(main())
