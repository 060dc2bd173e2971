"""Peer-group scanning, partitioning, and the per-click toggle pipeline."""

from .outcome import SortError, SortOutcome, SortStatus
from .pipeline import handle_toggle, toggle_in_place
from .rewrite import Replacement, apply_replacement, build_replacement, partition_subtrees
from .scanner import (
    PeerGroup,
    Subtree,
    find_block_end,
    find_block_start,
    find_structure_end,
    find_subtree_end,
    scan_peer_group,
)

__all__ = [
    "PeerGroup",
    "Replacement",
    "SortError",
    "SortOutcome",
    "SortStatus",
    "Subtree",
    "apply_replacement",
    "build_replacement",
    "find_block_end",
    "find_block_start",
    "find_structure_end",
    "find_subtree_end",
    "handle_toggle",
    "partition_subtrees",
    "scan_peer_group",
    "toggle_in_place",
]
