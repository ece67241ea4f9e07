"""Exception types raised by the upcase engine."""

from __future__ import annotations


class UpcaseEngineError(RuntimeError):
    """Base class for engine errors that callers may want to catch."""


class ScanError(UpcaseEngineError):
    """Raised by the delimiter scanner when a fragment is not balanced.

    This is the *expected* failure of a balance check; the balance layer
    converts it into a verdict and never lets it escape.
    """

    def __init__(self, reason: str, *, position: int) -> None:
        super().__init__(f"{reason} at offset {position}")
        self.reason = reason
        self.position = position


class UnknownSyntaxError(UpcaseEngineError, KeyError):
    """Raised when a syntax preset name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown syntax '{name}'")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownCaseTableError(UpcaseEngineError, KeyError):
    """Raised when a case table name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown case table '{name}'")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


__all__ = [
    "UpcaseEngineError",
    "ScanError",
    "UnknownSyntaxError",
    "UnknownCaseTableError",
]
