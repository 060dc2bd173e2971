"""List-of-lines document storage backing every buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """Text stored as a list of lines without their terminators.

    A text ending in ``"\\n"`` yields a trailing empty line, the same way an
    editor shows an empty last row after a final newline.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=0, dirty=False)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def to_text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]
