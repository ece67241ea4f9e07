"""Core document storage for upcase_engine buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class BufferDocument:
    """Versioned text storage kept as a single string.

    Every edit returns a new document with ``version`` bumped by one, so
    observers holding an older version can tell the text moved on. Rows and
    columns are derived on demand for line-oriented hosts.
    """

    _text: str = ""
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BufferDocument":
        return cls(_text=text, version=version, dirty=False)

    @property
    def text(self) -> str:
        return self._text

    @property
    def length(self) -> int:
        return len(self._text)

    def splice(self, start: int, end: int, text: str) -> "BufferDocument":
        """Return a document with offsets ``[start:end]`` replaced by ``text``."""

        updated = self._text[:start] + text + self._text[end:]
        return BufferDocument(_text=updated, version=self.version + 1, dirty=True)

    def row_col_for(self, offset: int) -> Tuple[int, int]:
        offset = max(0, min(offset, len(self._text)))
        row = self._text.count("\n", 0, offset)
        line_start = self._text.rfind("\n", 0, offset) + 1
        return (row, offset - line_start)
