"""AVLTree factory module."""

from typing import Iterable

from avl_trees.avl_tree_base import AVLTree


def create_avl_tree(keys: Iterable[int] = ()) -> AVLTree:
    """
    Create a new AVL tree and insert ``keys`` in iteration order.

    Args:
        keys: Integer keys to insert. Duplicates are ignored.

    Returns:
        AVLTree: The populated tree (empty if no keys are given).
    """
    tree = AVLTree()
    tree_insert = tree.insert
    for key in keys:
        tree_insert(key)
    return tree
