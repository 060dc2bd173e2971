"""High-level buffer façade combining document, state, and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from checkbox_sort.runtime import telemetry

from .document import BufferDocument
from .state import BufferState, Cursor
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_cursor, ensure_row


@dataclass(slots=True)
class BufferView:
    version: int
    text: str
    cursor: Cursor


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    cursor: Cursor
    label: str


class Buffer:
    """In-memory host buffer implementing ``LineBufferProvider``."""

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
        self.undo = undo or UndoTimeline()

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    @property
    def text(self) -> str:
        return self.document.to_text()

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            text=self.document.to_text(),
            cursor=self.state.cursor,
        )

    def line_count(self) -> int:
        return self.document.line_count

    def get_line(self, index: int) -> str:
        return self.document.get_line(ensure_row(self.document, index))

    def lines(self) -> tuple[str, ...]:
        return tuple(self.document.snapshot())

    def replace_range(
        self, start: Cursor, end: Cursor, text: str, *, label: str = "replace_range"
    ) -> BufferDelta:
        after_text = ""
        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        if start > end:
            start, end = end, start
        with Transaction(self, label) as tx:
            before_text = self.document.to_text()
            start_offset = _offset_for_cursor(self.document, start)
            end_offset = _offset_for_cursor(self.document, end)
            new_text = before_text[:start_offset] + text + before_text[end_offset:]
            document = BufferDocument.from_text(new_text)
            document.version = self.document.version + 1
            document.dirty = True
            self.document = document
            self.state.set_cursor(
                *_cursor_from_offset(self.document, start_offset + len(text))
            )
            self.state.last_change_tick = self.document.version
            after_text = new_text
            tx.commit(before_text, after_text, start, self.state.cursor)

        return BufferDelta(
            version=self.document.version,
            text=after_text,
            cursor=self.state.cursor,
            label=label,
        )

    def get_range(self, start: Cursor, end: Cursor) -> str:
        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        if start > end:
            start, end = end, start
        text = self.document.to_text()
        start_offset = _offset_for_cursor(self.document, start)
        end_offset = _offset_for_cursor(self.document, end)
        return text[start_offset:end_offset]

    def undo_last(self) -> Optional[UndoEntry]:
        """Restore the text from before the most recent replacement."""

        entry = self.undo.undo()
        if entry is None:
            return None
        self._restore(entry.before_text, entry.cursor_before)
        return entry

    def redo_last(self) -> Optional[UndoEntry]:
        entry = self.undo.redo()
        if entry is None:
            return None
        self._restore(entry.after_text, entry.cursor_after)
        return entry

    def _restore(self, text: str, cursor: Cursor) -> None:
        version = self.document.version + 1
        self.document = BufferDocument.from_text(text)
        self.document.version = version
        self.document.dirty = True
        self.state.set_cursor(*cursor)
        self.state.last_change_tick = version


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(
        self,
        before_text: str,
        after_text: str,
        cursor_before: Cursor,
        cursor_after: Cursor,
    ) -> None:
        entry = UndoEntry(
            label=self.label,
            before_text=before_text,
            after_text=after_text,
            cursor_before=cursor_before,
            cursor_after=cursor_after,
        )
        self.buffer.undo.push(entry)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def _offset_for_cursor(document: BufferDocument, cursor: Cursor) -> int:
    lines = document.snapshot()
    row, col = cursor
    offset = 0
    for i in range(row):
        offset += len(lines[i]) + 1  # newline
    offset += col
    return offset


def _cursor_from_offset(document: BufferDocument, offset: int) -> Cursor:
    lines = document.snapshot()
    running = 0
    for row, line in enumerate(lines):
        line_len = len(line)
        if offset <= running + line_len:
            return (row, offset - running)
        running += line_len + 1
    return (len(lines) - 1, len(lines[-1]))
