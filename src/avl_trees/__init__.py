"""
avl_trees: height-balanced ordered-set trees.

Quick-start imports::

    from avl_trees import AVLTree, create_avl_tree
"""

from avl_trees.avl_tree_base import AVLTree
from avl_trees.display import collect_keys, print_pretty, print_structure
from avl_trees.factory import create_avl_tree

# Stats & invariants
from avl_trees.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_keys,
    max_avl_height,
)
from avl_trees.tree_stats import Stats, avl_tree_stats_

__all__ = [
    "AVLTree",
    "InvariantError",
    # Stats & invariants
    "Stats",
    "assert_tree_invariants_raise",
    "avl_tree_stats_",
    "check_keys",
    "collect_keys",
    "create_avl_tree",
    "max_avl_height",
    "print_pretty",
    "print_structure",
]
