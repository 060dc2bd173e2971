"""Undo/redo history for buffer replacements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .state import Cursor


@dataclass(slots=True)
class UndoEntry:
    label: str
    before_text: str
    after_text: str
    cursor_before: Cursor
    cursor_after: Cursor


DEFAULT_MAX_ENTRIES = 200


class UndoTimeline:
    """Linear undo/redo history; pushing after an undo drops the redo tail.

    At most ``max_entries`` entries are kept; the oldest is discarded first.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._entries: List[UndoEntry] = []
        self._index: int = -1

    def push(self, entry: UndoEntry) -> None:
        if self._index < len(self._entries) - 1:
            self._entries = self._entries[: self._index + 1]
        self._entries.append(entry)
        if len(self._entries) > self.max_entries:
            del self._entries[: len(self._entries) - self.max_entries]
        self._index = len(self._entries) - 1

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Optional[UndoEntry]:
        if not self.can_undo():
            return None
        entry = self._entries[self._index]
        self._index -= 1
        return entry

    def redo(self) -> Optional[UndoEntry]:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]

    def __len__(self) -> int:
        return len(self._entries)
