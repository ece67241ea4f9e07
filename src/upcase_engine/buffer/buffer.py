"""In-memory host buffer combining document, point state, and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from upcase_engine.runtime import telemetry

from .document import BufferDocument
from .state import BufferState, Position, Range
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_position, ensure_range


@dataclass(slots=True)
class BufferDelta:
    version: int
    begin: Position
    end: Position
    text: str
    point: Position
    label: str


class Buffer:
    """Reference implementation of :class:`~upcase_engine.buffer.host.TextHost`."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.undo_timeline = undo or UndoTimeline()

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    def __str__(self) -> str:
        return self.document.text

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def version(self) -> int:
        return self.document.version

    @property
    def last_change_offset(self) -> Position:
        return self.state.last_change_offset

    @property
    def point(self) -> Position:
        return self.state.point

    def goto(self, position: Position) -> None:
        self.state.set_point(ensure_position(self, position))

    def set_mark(self, position: Optional[Position] = None) -> None:
        if position is not None:
            ensure_position(self, position)
        self.state.set_mark(self.point if position is None else position)

    def region(self) -> Optional[Range]:
        return self.state.region()

    def cursor(self) -> tuple[int, int]:
        """Point as a ``(row, column)`` pair for line-oriented hosts."""

        return self.document.row_col_for(self.point)

    def length(self) -> int:
        return self.document.length

    def char_at(self, position: Position) -> str:
        if position < 0 or position >= self.length():
            raise IndexError(f"No character at offset {position}")
        return self.document.text[position]

    def get_text(self, begin: Position, end: Position) -> str:
        begin, end = ensure_range(self, begin, end)
        return self.document.text[begin:end]

    def replace_range(
        self,
        begin: Position,
        end: Position,
        text: str,
        *,
        label: str = "replace_range",
    ) -> BufferDelta:
        begin, end = ensure_range(self, begin, end)
        with Transaction(self, label) as tx:
            before_text = self.document.text[begin:end]
            point_before = self.state.point
            self._splice(begin, end, text)
            tx.commit(begin, before_text, text, point_before, self.state.point)

        return BufferDelta(
            version=self.document.version,
            begin=begin,
            end=begin + len(text),
            text=text,
            point=self.state.point,
            label=label,
        )

    def insert_at(self, position: Position, text: str) -> BufferDelta:
        return self.replace_range(position, position, text, label="insert_text")

    def insert(self, text: str) -> BufferDelta:
        return self.insert_at(self.point, text)

    def delete_range(self, begin: Position, end: Position) -> BufferDelta:
        return self.replace_range(begin, end, "", label="delete_range")

    def undo(self) -> Optional[UndoEntry]:
        entry = self.undo_timeline.undo()
        if entry is not None:
            self._splice(entry.begin, entry.begin + len(entry.after_text), entry.before_text)
            self.state.set_point(entry.point_before)
        return entry

    def redo(self) -> Optional[UndoEntry]:
        entry = self.undo_timeline.redo()
        if entry is not None:
            self._splice(entry.begin, entry.begin + len(entry.before_text), entry.after_text)
            self.state.set_point(entry.point_after)
        return entry

    def _splice(self, begin: Position, end: Position, text: str) -> None:
        self.document = self.document.splice(begin, end, text)
        self.state.shift_after_edit(begin, end, len(text))
        self.state.last_change_tick = self.document.version
        self.state.last_change_offset = begin


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(
        self,
        begin: Position,
        before_text: str,
        after_text: str,
        point_before: Position,
        point_after: Position,
    ) -> None:
        self.buffer.undo_timeline.push(
            UndoEntry(
                label=self.label,
                begin=begin,
                before_text=before_text,
                after_text=after_text,
                point_before=point_before,
                point_after=point_after,
            )
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
