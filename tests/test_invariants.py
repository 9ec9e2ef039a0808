"""Tests for the invariant checkers, avl_tree_stats_ and InvariantError."""

import unittest

from avl_trees.avl_tree_base import AVLTree
from avl_trees.factory import create_avl_tree
from avl_trees.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_keys,
    max_avl_height,
)
from avl_trees.tree_stats import Stats, avl_tree_stats_


def _build(keys):
    return create_avl_tree(keys)


# ─── Checker predicates ────────────────────────────────────────────


class TestCheckOrdering(unittest.TestCase):

    def test_empty_tree(self):
        self.assertTrue(AVLTree().check_ordering())

    def test_valid_tree(self):
        self.assertTrue(_build(range(31)).check_ordering())

    def test_detects_left_violation(self):
        tree = _build([4, 2, 6, 1, 3, 5, 7])
        tree.left.right.key = 9
        self.assertFalse(tree.check_ordering())

    def test_detects_right_violation(self):
        tree = _build([4, 2, 6, 1, 3, 5, 7])
        tree.right.left.key = 4
        self.assertFalse(tree.check_ordering())

    def test_detects_deep_bound_violation(self):
        # 5 is locally fine below 6 but breaks the bound inherited from root 4.
        tree = _build([4, 2, 6, 1, 3, 5, 7])
        tree.left.right.key = 5
        self.assertFalse(tree.check_ordering())

    def test_detects_duplicate(self):
        tree = _build([2, 1, 3])
        tree.right.key = 2
        self.assertFalse(tree.check_ordering())

    def test_is_pure(self):
        tree = _build([3, 1, 2])
        keys = list(tree)
        tree.check_ordering()
        self.assertEqual(list(tree), keys)


class TestCheckBalanced(unittest.TestCase):

    def test_empty_tree(self):
        self.assertTrue(AVLTree().check_balanced())

    def test_valid_tree(self):
        self.assertTrue(_build(range(100)).check_balanced())

    def test_detects_stale_height(self):
        tree = _build([2, 1, 3])
        tree.height = 5
        self.assertFalse(tree.check_balanced())

    def test_detects_stale_child_height(self):
        tree = _build([4, 2, 6, 1, 3, 5, 7])
        tree.right.height = 3
        self.assertFalse(tree.check_balanced())

    def test_detects_imbalance(self):
        # Hand-built chain 1 -> 2 -> 3 with correct heights but no rotation.
        tree = AVLTree()
        tree._populate(1)
        tree.right._populate(2)
        tree.right.right._populate(3)
        tree.right.update_height()
        tree.update_height()
        self.assertTrue(tree.check_ordering())
        self.assertFalse(tree.check_balanced())


# ─── Stats ─────────────────────────────────────────────────────────


class TestStatsEmptyTree(unittest.TestCase):

    def test_none_input(self):
        self._assert_empty(avl_tree_stats_(None))

    def test_empty_tree(self):
        self._assert_empty(avl_tree_stats_(AVLTree()))

    def _assert_empty(self, stats: Stats):
        self.assertEqual(stats.height, 0)
        self.assertEqual(stats.node_count, 0)
        self.assertEqual(stats.leaf_count, 0)
        self.assertIsNone(stats.least_key)
        self.assertIsNone(stats.greatest_key)
        self.assertTrue(stats.is_search_tree)
        self.assertTrue(stats.heights_consistent)
        self.assertTrue(stats.is_balanced)
        self.assertTrue(stats.empty_nodes_consistent)


class TestStatsPopulated(unittest.TestCase):

    def setUp(self):
        self.tree = _build(range(10))

    def test_counts(self):
        stats = avl_tree_stats_(self.tree)
        self.assertEqual(stats.node_count, 10)
        self.assertEqual(stats.height, 4)
        # leaves of 3 [1 [0, 2], 7 [5 [4, 6], 8 [., 9]]]
        self.assertEqual(stats.leaf_count, 5)
        self.assertEqual(stats.least_key, 0)
        self.assertEqual(stats.greatest_key, 9)

    def test_flags_all_true(self):
        stats = avl_tree_stats_(self.tree)
        self.assertTrue(stats.is_search_tree)
        self.assertTrue(stats.heights_consistent)
        self.assertTrue(stats.is_balanced)
        self.assertTrue(stats.empty_nodes_consistent)

    def test_depth_histogram(self):
        hist = {}
        avl_tree_stats_(self.tree, height_hist=hist)
        self.assertEqual(hist, {0: 1, 1: 2, 2: 4, 3: 3})

    def test_detects_stale_height(self):
        self.tree.left.height = 3
        stats = avl_tree_stats_(self.tree)
        self.assertFalse(stats.heights_consistent)

    def test_detects_order_violation(self):
        self.tree.left.left.key = 100
        stats = avl_tree_stats_(self.tree)
        self.assertFalse(stats.is_search_tree)

    def test_detects_missing_child(self):
        self.tree.right.right.right = None
        stats = avl_tree_stats_(self.tree)
        self.assertFalse(stats.empty_nodes_consistent)


# ─── assert_tree_invariants_raise ──────────────────────────────────


class TestAssertInvariantsRaise(unittest.TestCase):

    def test_valid_trees_pass(self):
        for n in (0, 1, 2, 3, 17, 200):
            tree = _build(range(n))
            assert_tree_invariants_raise(tree, avl_tree_stats_(tree))

    def test_raises_on_order_violation(self):
        tree = _build([2, 1, 3])
        tree.left.key = 7
        with self.assertRaises(InvariantError) as cm:
            assert_tree_invariants_raise(tree, avl_tree_stats_(tree))
        self.assertIn("is_search_tree", str(cm.exception))

    def test_raises_on_imbalance(self):
        tree = AVLTree()
        tree._populate(1)
        tree.right._populate(2)
        tree.right.right._populate(3)
        tree.right.update_height()
        tree.update_height()
        with self.assertRaises(InvariantError) as cm:
            assert_tree_invariants_raise(tree, avl_tree_stats_(tree))
        self.assertIn("is_balanced", str(cm.exception))


class TestHelpers(unittest.TestCase):

    def test_max_avl_height(self):
        self.assertEqual(max_avl_height(0), 2)
        self.assertEqual(max_avl_height(10), 6)
        self.assertEqual(max_avl_height(1000), 15)

    def test_check_keys(self):
        tree = _build([3, 1, 2])
        keys, presence_ok, order_ok = check_keys(tree, [1, 2, 3])
        self.assertEqual(keys, [1, 2, 3])
        self.assertTrue(presence_ok)
        self.assertTrue(order_ok)

        _, presence_ok, _ = check_keys(tree, [1, 2])
        self.assertFalse(presence_ok)


if __name__ == "__main__":
    unittest.main()
