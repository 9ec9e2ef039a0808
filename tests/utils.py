"""Utility functions for testing AVL tree invariants."""

from typing import Optional

from avl_trees.avl_tree_base import AVLTree
from avl_trees.invariants import TREE_FLAGS, max_avl_height
from avl_trees.tree_stats import Stats


def assert_tree_invariants_tc(tc, t: AVLTree, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    tc.assertTrue(t.check_ordering(), f"check_ordering() is False\n\n{err_msg}")
    tc.assertTrue(t.check_balanced(), f"check_balanced() is False\n\n{err_msg}")

    if not t.is_empty():
        tc.assertGreater(
            stats.node_count, 0,
            f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertEqual(
            stats.height, t.height,
            f"Invariant failed: stats.height={stats.height} ≠ t.height={t.height}\n\n{err_msg}"
        )
        tc.assertLessEqual(
            stats.height, max_avl_height(stats.node_count),
            f"Invariant failed: height={stats.height} above AVL bound for {stats.node_count} keys\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.least_key,
            f"Invariant failed: least_key is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.greatest_key,
            f"Invariant failed: greatest_key is None for non-empty tree\n\n{err_msg}"
        )
    else:
        tc.assertEqual(stats.node_count, 0, f"Empty tree reports {stats.node_count} nodes\n\n{err_msg}")


def shape(t: AVLTree):
    """Nested ``(key, height, left, right)`` tuples; ``None`` for empty subtrees."""
    if t.is_empty():
        return None
    return (t.key, t.height, shape(t.left), shape(t.right))


def iter_nodes(t: AVLTree):
    """Yield every node object (populated and empty) in pre-order."""
    stack = [t]
    while stack:
        node = stack.pop()
        yield node
        if not node.is_empty():
            stack.append(node.right)
            stack.append(node.left)
