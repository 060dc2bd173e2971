"""Peer-group and subtree boundary detection from raw indentation.

Two depth thresholds are in play and must stay separate: a peer owns the
following lines that are strictly deeper than the base depth
(``find_subtree_end``), while the outer replacement range extends over every
following list line at least as deep as the base depth
(``find_structure_end``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from checkbox_sort.buffer import LineBufferProvider
from checkbox_sort.grammar import indent_depth, is_list_item


@dataclass(frozen=True, slots=True)
class Subtree:
    """Inclusive line range ``[start, end]`` owned by the peer at ``start``."""

    start: int
    end: int

    @property
    def line_range(self) -> range:
        return range(self.start, self.end + 1)

    def __len__(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True, slots=True)
class PeerGroup:
    depth: int
    clicked_line: int
    block_start: int
    block_end: int
    subtrees: tuple[Subtree, ...]
    structure_end: int

    @property
    def peers(self) -> tuple[int, ...]:
        return tuple(subtree.start for subtree in self.subtrees)


def find_block_start(buffer: LineBufferProvider, clicked_line: int, depth: int) -> int:
    start = clicked_line
    for index in range(clicked_line - 1, -1, -1):
        line = buffer.get_line(index)
        if not is_list_item(line):
            break
        level = indent_depth(line)
        if level == depth:
            start = index
        elif level < depth:
            break
    return start


def find_block_end(buffer: LineBufferProvider, clicked_line: int, depth: int) -> int:
    """Index of the last peer line (not including its children)."""

    end = clicked_line
    for index in range(clicked_line + 1, buffer.line_count()):
        line = buffer.get_line(index)
        if not is_list_item(line):
            break
        level = indent_depth(line)
        if level == depth:
            end = index
        elif level < depth:
            break
    return end


def find_subtree_end(buffer: LineBufferProvider, peer_line: int, depth: int) -> int:
    end = peer_line
    for index in range(peer_line + 1, buffer.line_count()):
        line = buffer.get_line(index)
        if not is_list_item(line) or indent_depth(line) <= depth:
            break
        end = index
    return end


def find_structure_end(buffer: LineBufferProvider, block_end: int, depth: int) -> int:
    end = block_end
    for index in range(block_end + 1, buffer.line_count()):
        line = buffer.get_line(index)
        if not is_list_item(line) or indent_depth(line) < depth:
            break
        end = index
    return end


def scan_peer_group(
    buffer: LineBufferProvider, clicked_line: int
) -> Optional[PeerGroup]:
    """Collect the clicked line's peers and their subtrees.

    Returns ``None`` when the clicked line is not a list item.
    """

    clicked_text = buffer.get_line(clicked_line)
    if not is_list_item(clicked_text):
        return None
    depth = indent_depth(clicked_text)
    block_start = find_block_start(buffer, clicked_line, depth)
    block_end = find_block_end(buffer, clicked_line, depth)

    subtrees: list[Subtree] = []
    index = block_start
    while index <= block_end:
        line = buffer.get_line(index)
        if not is_list_item(line) or indent_depth(line) != depth:
            index += 1
            continue
        end = find_subtree_end(buffer, index, depth)
        subtrees.append(Subtree(start=index, end=end))
        index = end + 1

    return PeerGroup(
        depth=depth,
        clicked_line=clicked_line,
        block_start=block_start,
        block_end=block_end,
        subtrees=tuple(subtrees),
        structure_end=find_structure_end(buffer, block_end, depth),
    )


__all__ = [
    "PeerGroup",
    "Subtree",
    "find_block_end",
    "find_block_start",
    "find_structure_end",
    "find_subtree_end",
    "scan_peer_group",
]
