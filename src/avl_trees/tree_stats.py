"""Statistics and invariant checking for AVL tree structures."""

from __future__ import annotations

import collections
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from avl_trees.logging_config import get_logger

if TYPE_CHECKING:
    from avl_trees.avl_tree_base import AVLTree

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for an AVL tree."""

    height: int
    node_count: int
    leaf_count: int
    least_key: Optional[int]
    greatest_key: Optional[int]
    is_search_tree: bool
    heights_consistent: bool
    is_balanced: bool
    empty_nodes_consistent: bool


def _empty_stats(consistent: bool = True) -> Stats:
    return Stats(
        height=0,
        node_count=0,
        leaf_count=0,
        least_key=None,
        greatest_key=None,
        is_search_tree=True,
        heights_consistent=True,
        is_balanced=True,
        empty_nodes_consistent=consistent,
    )


def avl_tree_stats_(
    t: Optional[AVLTree],
    height_hist: dict[int, int] | None = None,
    _depth: int = 0,
) -> Stats:
    """
    Returns aggregated statistics for an AVL tree in **O(n)** time.

    ``height`` is the height recomputed from the structure, not the value
    stored at the root, so a stale root height shows up as
    ``heights_consistent=False``.

    The caller can supply an existing Counter / dict for ``height_hist``;
    it is filled with the number of populated nodes per depth (root = 0).
    """
    if height_hist is None:
        height_hist = collections.Counter()

    # ---------- empty tree return ---------------------------------
    if t is None:
        return _empty_stats()
    if t.is_empty():
        return _empty_stats(t.key is None and t.left is None and t.right is None)

    # ---------- populated node without two children ---------------
    if t.left is None or t.right is None:
        logger.warning("Populated node %s is missing a child", t.key)
        return Stats(
            height=t.height,
            node_count=1,
            leaf_count=0,
            least_key=t.key,
            greatest_key=t.key,
            is_search_tree=True,
            heights_consistent=False,
            is_balanced=False,
            empty_nodes_consistent=False,
        )

    height_hist[_depth] = height_hist.get(_depth, 0) + 1

    left_stats = avl_tree_stats_(t.left, height_hist, _depth + 1)
    right_stats = avl_tree_stats_(t.right, height_hist, _depth + 1)

    # ---------- aggregate ----------------------------------
    key = t.key
    is_search_tree = (
        left_stats.is_search_tree
        and right_stats.is_search_tree
        and (left_stats.greatest_key is None or left_stats.greatest_key < key)
        and (right_stats.least_key is None or right_stats.least_key > key)
    )

    height = 1 + max(left_stats.height, right_stats.height)
    heights_consistent = (
        left_stats.heights_consistent
        and right_stats.heights_consistent
        and t.height == height
    )
    is_balanced = (
        left_stats.is_balanced
        and right_stats.is_balanced
        and abs(left_stats.height - right_stats.height) <= 1
    )

    least_key = left_stats.least_key if left_stats.least_key is not None else key
    greatest_key = right_stats.greatest_key if right_stats.greatest_key is not None else key

    return Stats(
        height=height,
        node_count=1 + left_stats.node_count + right_stats.node_count,
        leaf_count=(
            1 if t.left.is_empty() and t.right.is_empty()
            else left_stats.leaf_count + right_stats.leaf_count
        ),
        least_key=least_key,
        greatest_key=greatest_key,
        is_search_tree=is_search_tree,
        heights_consistent=heights_consistent,
        is_balanced=is_balanced,
        empty_nodes_consistent=(
            left_stats.empty_nodes_consistent
            and right_stats.empty_nodes_consistent
            and t.key is not None
        ),
    )
