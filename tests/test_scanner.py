from __future__ import annotations

from checkbox_sort.buffer import Buffer
from checkbox_sort.engine import (
    Subtree,
    find_block_end,
    find_block_start,
    find_structure_end,
    find_subtree_end,
    scan_peer_group,
)


def make_buffer(*lines: str) -> Buffer:
    return Buffer.from_text("\n".join(lines))


NESTED = (
    "# Groceries",
    "- [ ] Parent 1",
    "  - [ ] Child 1",
    "    - [ ] Grandchild",
    "  - [ ] Child 2",
    "- [x] Parent 2",
    "  - [ ] Child 3",
    "- [ ] Parent 3",
    "",
    "Trailing paragraph",
)


def test_block_bounds_skip_deeper_lines() -> None:
    buffer = make_buffer(*NESTED)

    assert find_block_start(buffer, 7, 0) == 1
    assert find_block_end(buffer, 1, 0) == 7


def test_block_start_stops_at_shallower_line() -> None:
    buffer = make_buffer(*NESTED)

    assert find_block_start(buffer, 4, 2) == 2
    assert find_block_end(buffer, 2, 2) == 4


def test_block_stops_at_non_list_line() -> None:
    buffer = make_buffer("- [ ] a", "text", "- [ ] b", "- [ ] c")

    assert find_block_start(buffer, 3, 0) == 2
    assert find_block_end(buffer, 0, 0) == 0


def test_subtree_end_requires_strictly_deeper_lines() -> None:
    buffer = make_buffer(*NESTED)

    assert find_subtree_end(buffer, 1, 0) == 4
    assert find_subtree_end(buffer, 5, 0) == 6
    assert find_subtree_end(buffer, 7, 0) == 7
    assert find_subtree_end(buffer, 2, 2) == 3


def test_structure_end_accepts_equal_depth_lines() -> None:
    buffer = make_buffer("  - [ ] a", "  - [ ] b", "    - [ ] b1", "  - [ ] c", "- top")

    # Starting from a line that is not the last peer shows the threshold:
    # lines at the base depth extend the outer range but not a subtree.
    assert find_structure_end(buffer, 0, 2) == 3
    assert find_subtree_end(buffer, 0, 2) == 0


def test_structure_end_includes_children_of_last_peer() -> None:
    buffer = make_buffer(*NESTED)

    assert find_structure_end(buffer, 5, 0) == 7
    assert find_structure_end(buffer, 2, 2) == 4


def test_scan_peer_group_collects_subtrees() -> None:
    buffer = make_buffer(*NESTED)

    group = scan_peer_group(buffer, 5)

    assert group is not None
    assert group.depth == 0
    assert group.block_start == 1
    assert group.block_end == 7
    assert group.structure_end == 7
    assert group.peers == (1, 5, 7)
    assert group.subtrees == (
        Subtree(start=1, end=4),
        Subtree(start=5, end=6),
        Subtree(start=7, end=7),
    )


def test_scan_peer_group_subtrees_tile_the_block() -> None:
    buffer = make_buffer(*NESTED)

    group = scan_peer_group(buffer, 1)

    assert group is not None
    covered = [index for subtree in group.subtrees for index in subtree.line_range]
    assert covered == list(range(group.block_start, group.structure_end + 1))


def test_scan_peer_group_nested_level() -> None:
    buffer = make_buffer(*NESTED)

    group = scan_peer_group(buffer, 4)

    assert group is not None
    assert group.peers == (2, 4)
    assert group.subtrees[0] == Subtree(start=2, end=3)
    assert len(group.subtrees[0]) == 2


def test_scan_peer_group_rejects_non_list_line() -> None:
    buffer = make_buffer(*NESTED)

    assert scan_peer_group(buffer, 0) is None


def test_tabs_and_spaces_count_the_same() -> None:
    buffer = make_buffer("- [ ] a", "\t- [ ] tab child", " - [ ] space child")

    group = scan_peer_group(buffer, 1)

    assert group is not None
    assert group.peers == (1, 2)
