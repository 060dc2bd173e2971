"""Buffer abstractions and undo/redo data structures."""

from .buffer import Buffer, BufferDelta, BufferView, Transaction
from .document import BufferDocument
from .provider import BufferValidationError, LineBufferProvider
from .state import BufferState, Cursor
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_cursor, ensure_row

__all__ = [
    "BufferDocument",
    "BufferState",
    "Cursor",
    "UndoTimeline",
    "UndoEntry",
    "Buffer",
    "BufferDelta",
    "BufferView",
    "Transaction",
    "LineBufferProvider",
    "BufferValidationError",
    "ensure_cursor",
    "ensure_row",
]
