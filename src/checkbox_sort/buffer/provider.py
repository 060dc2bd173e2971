"""Boundary types between the sorting core and the host's text buffer."""

from __future__ import annotations

from typing import Any, Protocol

from .state import Cursor


class LineBufferProvider(Protocol):
    """Line-addressed view of a host buffer.

    Reads are snapshots valid for a single click. ``replace_range`` must apply
    the whole change atomically and raise when it cannot.
    """

    def line_count(self) -> int:
        ...

    def get_line(self, index: int) -> str:
        ...

    def get_range(self, start: Cursor, end: Cursor) -> str:
        ...

    def replace_range(
        self, start: Cursor, end: Cursor, text: str, *, label: str = ...
    ) -> Any:
        ...


class BufferValidationError(RuntimeError):
    """Raised when a line index or cursor falls outside the document."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor
