"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .host import BufferValidationError, TextHost
from .state import Position, Range


def ensure_position(host: TextHost, position: Position) -> Position:
    if position < 0 or position > host.length():
        raise BufferValidationError("Position out of range", position=position)
    return position


def ensure_range(host: TextHost, begin: Position, end: Position) -> Range:
    """Validate both ends and return them in ascending order."""

    ensure_position(host, begin)
    ensure_position(host, end)
    if begin > end:
        begin, end = end, begin
    return begin, end
