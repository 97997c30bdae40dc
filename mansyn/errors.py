"""Exception hierarchy for mansyn."""
from __future__ import annotations


class ManSynError(Exception):
    """Base exception for mansyn failures."""


class NoSyntaxesFound(ManSynError):
    """A document carries no extractable invocation grammar."""

    def __init__(self, name: str = ''):
        self.name = name
        label = name or '<unnamed>'
        super().__init__(f"No syntaxes found for {label}")


class ParameterBuildError(ManSynError):
    """A single markup line could not be folded into a parameter tree."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line[:60]!r}")


class ManPageReadError(ManSynError):
    """A man page file could not be read."""
