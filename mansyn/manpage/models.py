"""Invocation grammar types built from a SYNOPSIS section."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Parameter:
    """One markup line's worth of macro tokens, possibly nesting another.

    ``argument`` and ``flags`` are None when the corresponding macro was not
    seen. ``nested`` is exclusively owned by this node, so the structure is
    always a tree.
    """
    optional: bool = False
    nospace: bool = False  # never set by the recognized macros
    argument: Optional[str] = None
    flags: Optional[str] = None
    nested: Optional[Parameter] = None

    @property
    def has_argument(self) -> bool:
        return self.argument is not None

    @property
    def has_flags(self) -> bool:
        return self.flags is not None

    @property
    def has_nested(self) -> bool:
        return self.nested is not None

    def is_valid(self) -> bool:
        """A parameter with no field set is degenerate."""
        return (self.optional or self.nospace or self.has_flags
                or self.has_argument or self.has_nested)


@dataclass(frozen=True)
class Syntax:
    """One alternative way to invoke a command."""
    parameters: Tuple[Parameter, ...] = ()

    def is_valid(self) -> bool:
        return len(self.parameters) > 0


@dataclass(frozen=True)
class Command:
    """The invocation grammar of one manual page."""
    name: str = ''
    syntaxes: Tuple[Syntax, ...] = ()
