"""Host buffer abstractions and undo/redo data structures."""

from .buffer import Buffer, BufferDelta, Transaction
from .document import BufferDocument
from .host import BufferValidationError, TextHost
from .state import BufferState, Position, Range
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_position, ensure_range

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferDocument",
    "BufferState",
    "BufferValidationError",
    "Position",
    "Range",
    "TextHost",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
    "ensure_position",
    "ensure_range",
]
