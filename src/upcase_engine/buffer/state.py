"""Point, mark, and change tracking state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Position = int
Range = Tuple[Position, Position]  # half-open [begin, end)


@dataclass(slots=True)
class BufferState:
    """Mutable point + mark info tied to a BufferDocument version."""

    point: Position = 0
    mark: Optional[Position] = None
    last_change_tick: int = 0
    last_change_offset: Position = 0

    def set_point(self, position: Position) -> None:
        self.point = position

    def set_mark(self, position: Optional[Position]) -> None:
        self.mark = position

    def region(self) -> Optional[Range]:
        if self.mark is None:
            return None
        return (min(self.mark, self.point), max(self.mark, self.point))

    def shift_after_edit(self, begin: Position, end: Position, new_len: int) -> None:
        """Move point and mark so they stay anchored to the same text."""

        self.point = _shift(self.point, begin, end, new_len)
        if self.mark is not None:
            self.mark = _shift(self.mark, begin, end, new_len)


def _shift(position: Position, begin: Position, end: Position, new_len: int) -> Position:
    if position >= end:
        return position + new_len - (end - begin)
    if position > begin:
        return min(position, begin + new_len)
    return position
