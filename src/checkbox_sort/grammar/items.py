"""Line-level grammar for bullet list items and their checkboxes.

A list item is ``<indent><bullet><whitespace>[<checkbox>]<text>`` where the
bullet is one of ``-``, ``*`` or ``+`` and the checkbox is ``[ ]`` or ``[x]``.
Every predicate here is a pure function of a single line's text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BULLETS = frozenset("-*+")
UNCHECKED_BOX = "[ ]"
CHECKED_BOX = "[x]"
UPPER_CHECKED_BOX = "[X]"


@dataclass(frozen=True, slots=True)
class ListItem:
    """Parsed view of one list line."""

    line_index: int
    indent_depth: int
    bullet: str
    checked: Optional[bool]
    text: str

    @property
    def has_checkbox(self) -> bool:
        return self.checked is not None


def indent_depth(line: str) -> int:
    """Count leading whitespace characters; a tab counts as one unit."""

    return len(line) - len(line.lstrip())


def _marker_offset(line: str) -> Optional[int]:
    """Offset of the first character after the bullet's whitespace run."""

    depth = indent_depth(line)
    if depth >= len(line) or line[depth] not in BULLETS:
        return None
    offset = depth + 1
    if offset >= len(line) or not line[offset].isspace():
        return None
    while offset < len(line) and line[offset].isspace():
        offset += 1
    return offset


def is_list_item(line: str) -> bool:
    return _marker_offset(line) is not None


def checkbox_state(line: str, *, accept_upper: bool = False) -> Optional[bool]:
    """``True``/``False`` for a checkbox list item, ``None`` otherwise.

    Only ``[x]`` sorts as checked. ``accept_upper`` also reads ``[X]`` as
    checked, which is what a plain host toggle needs.
    """

    offset = _marker_offset(line)
    if offset is None:
        return None
    token = line[offset : offset + len(CHECKED_BOX)]
    if token == CHECKED_BOX or (accept_upper and token == UPPER_CHECKED_BOX):
        return True
    if token == UNCHECKED_BOX:
        return False
    return None


def is_checked(line: str) -> bool:
    return checkbox_state(line) is True


def set_checkbox(line: str, checked: bool) -> str:
    """Return ``line`` with its checkbox marker set to ``checked``.

    Only the marker right after the bullet is touched; lines without one come
    back unchanged. An uppercase ``[X]`` is replaced like ``[x]``.
    """

    offset = _marker_offset(line)
    if offset is None or checkbox_state(line, accept_upper=True) is None:
        return line
    marker = CHECKED_BOX if checked else UNCHECKED_BOX
    return line[:offset] + marker + line[offset + len(marker) :]


def parse_list_item(line: str, line_index: int) -> Optional[ListItem]:
    offset = _marker_offset(line)
    if offset is None:
        return None
    checked = checkbox_state(line)
    body = line[offset + len(CHECKED_BOX) :] if checked is not None else line[offset:]
    return ListItem(
        line_index=line_index,
        indent_depth=indent_depth(line),
        bullet=line[indent_depth(line)],
        checked=checked,
        text=body.strip(),
    )


__all__ = [
    "BULLETS",
    "CHECKED_BOX",
    "UPPER_CHECKED_BOX",
    "UNCHECKED_BOX",
    "ListItem",
    "checkbox_state",
    "indent_depth",
    "is_checked",
    "is_list_item",
    "parse_list_item",
    "set_checkbox",
]
