"""Stable unchecked/checked partition and the splice that applies it."""

from __future__ import annotations

from dataclasses import dataclass

from checkbox_sort.buffer import BufferDelta, Cursor, LineBufferProvider
from checkbox_sort.grammar import is_checked, set_checkbox

from .scanner import PeerGroup

SORT_LABEL = "checkbox_sort"


@dataclass(frozen=True, slots=True)
class Replacement:
    """A single range replacement over ``[first_line, last_line]``."""

    start: Cursor
    end: Cursor
    text: str
    original: str
    first_line: int
    last_line: int

    @property
    def is_noop(self) -> bool:
        return _strip_newline(self.text) == _strip_newline(self.original)


def _strip_newline(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text


def partition_subtrees(
    buffer: LineBufferProvider, group: PeerGroup, *, now_checked: bool
) -> tuple[list[list[str]], list[list[str]]]:
    """Split peer subtrees into ``(unchecked, checked)`` buckets.

    The clicked peer is classified by ``now_checked`` and its first line gets
    the flipped marker; every other peer keeps its lines verbatim and is
    classified by its current state. Bucket order follows line order.
    """

    unchecked: list[list[str]] = []
    checked: list[list[str]] = []
    for subtree in group.subtrees:
        lines = [buffer.get_line(index) for index in subtree.line_range]
        if subtree.start == group.clicked_line:
            lines[0] = set_checkbox(lines[0], now_checked)
            bucket_checked = now_checked
        else:
            bucket_checked = is_checked(lines[0])
        (checked if bucket_checked else unchecked).append(lines)
    return unchecked, checked


def build_replacement(
    buffer: LineBufferProvider, group: PeerGroup, *, now_checked: bool
) -> Replacement:
    unchecked, checked = partition_subtrees(buffer, group, now_checked=now_checked)
    new_lines = [line for block in unchecked + checked for line in block]

    last_line = group.structure_end
    at_end = last_line == buffer.line_count() - 1
    start: Cursor = (group.block_start, 0)
    if at_end:
        end: Cursor = (last_line, len(buffer.get_line(last_line)))
        text = "\n".join(new_lines)
    else:
        end = (last_line + 1, 0)
        text = "\n".join(new_lines) + "\n"

    return Replacement(
        start=start,
        end=end,
        text=text,
        original=buffer.get_range(start, end),
        first_line=group.block_start,
        last_line=last_line,
    )


def apply_replacement(
    buffer: LineBufferProvider, replacement: Replacement
) -> BufferDelta:
    return buffer.replace_range(
        replacement.start, replacement.end, replacement.text, label=SORT_LABEL
    )


__all__ = [
    "SORT_LABEL",
    "Replacement",
    "apply_replacement",
    "build_replacement",
    "partition_subtrees",
]
