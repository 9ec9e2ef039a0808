"""Shared invariant-checking utilities.

This module provides tree invariant validation that can be used by both
the stats scripts and the test suite.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable, Optional

from avl_trees.logging_config import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from avl_trees.avl_tree_base import AVLTree
    from avl_trees.tree_stats import Stats

TREE_FLAGS = (
    "is_search_tree",
    "heights_consistent",
    "is_balanced",
    "empty_nodes_consistent",
)


class InvariantError(Exception):
    """Raised when an AVL tree invariant is violated."""


def max_avl_height(n: int) -> int:
    """Worst-case AVL height for ``n`` distinct keys: ceil(1.45 * log2(n + 2))."""
    return math.ceil(1.45 * math.log2(n + 2))


def assert_tree_invariants_raise(
    t: AVLTree,
    stats: Stats,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            raise InvariantError(f"Invariant failed: {flag} is False")

    if t.is_empty():
        if stats.node_count != 0:
            raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≠ 0 for empty tree")
        return

    if stats.node_count <= 0:
        raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree")
    if stats.leaf_count <= 0:
        raise InvariantError(f"Invariant failed: leaf_count={stats.leaf_count} ≤ 0 for non-empty tree")
    if stats.height != t.height:
        raise InvariantError(f"Invariant failed: stats.height={stats.height} ≠ t.height={t.height}")
    if stats.least_key is None or stats.greatest_key is None:
        raise InvariantError("Invariant failed: least/greatest key is None for non-empty tree")

    bound = max_avl_height(stats.node_count)
    if stats.height > bound:
        raise InvariantError(
            f"Invariant failed: height={stats.height} exceeds AVL bound {bound} for {stats.node_count} keys"
        )


def check_keys(
    tree: AVLTree,
    expected_keys: Optional[Iterable[int]] = None,
) -> tuple[list[int], bool, bool]:
    """Traverse the tree in order and validate its keys.

    Returns
    -------
    (keys, presence_ok, order_ok)
    """
    keys = list(tree)
    order_ok = all(a < b for a, b in zip(keys, keys[1:]))

    presence_ok = True
    if expected_keys is not None:
        presence_ok = set(keys) == set(expected_keys)
        if presence_ok and not all(tree.contains(k) for k in keys):
            presence_ok = False

    return keys, presence_ok, order_ok
