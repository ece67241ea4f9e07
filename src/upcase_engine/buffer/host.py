"""Boundary types describing what the engine needs from a host buffer."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .state import Position


@runtime_checkable
class TextHost(Protocol):
    """Read/write surface the engine uses on an externally owned buffer.

    Positions are 0-based offsets in ``[0, length()]``. ``version`` must
    change on every mutation and ``last_change_offset`` must report the
    lowest offset touched by the most recent one.
    """

    version: int
    last_change_offset: Position

    def length(self) -> int:
        ...

    def char_at(self, position: Position) -> str:
        ...

    def get_text(self, begin: Position, end: Position) -> str:
        ...

    def replace_range(self, begin: Position, end: Position, text: str) -> object:
        """Substitute ``[begin, end)`` with ``text``."""
        ...

    def insert_at(self, position: Position, text: str) -> object:
        """Insert ``text`` before ``position``."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when callers hand the buffer out-of-bounds positions."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position
