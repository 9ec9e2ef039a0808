"""AVL tree base implementation"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Iterator, Optional

from avl_trees.logging_config import get_logger

logger = get_logger("AVLTree")


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)


def _check_key(key, op: str) -> int:
    if isinstance(key, bool) or not isinstance(key, Integral):
        raise TypeError(f"{op}(): key must be an int, got {type(key).__name__}")
    return int(key)


class AVLTree:
    """
    An AVL tree is a recursively defined structure that is either empty or
    holds a single key together with two AVL subtrees.

    Empty positions are materialized as empty trees of height 0, so every
    populated node owns exactly two children and no traversal has to check
    for ``None``.

    Attributes:
        key (Optional[int]): The key stored at this node. None if empty.
        height (int): 0 for an empty tree, 1 + max(child heights) otherwise.
        left (Optional[AVLTree]): Subtree of strictly smaller keys. None iff empty.
        right (Optional[AVLTree]): Subtree of strictly greater keys. None iff empty.
    """
    __slots__ = ("key", "height", "left", "right")

    def __init__(self) -> None:
        self.key: Optional[int] = None
        self.height: int = 0
        self.left: Optional[AVLTree] = None
        self.right: Optional[AVLTree] = None

    def is_empty(self) -> bool:
        return self.height == 0

    def get_height(self) -> int:
        return self.height

    def __str__(self):
        if self.is_empty():
            return "Empty AVLTree"
        return f"AVLTree(key={self.key}, height={self.height})"

    __repr__ = __str__

    def __contains__(self, key) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[int]:
        """Yield keys in ascending order."""
        stack = []
        cur = self
        while stack or not cur.is_empty():
            while not cur.is_empty():
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.key
            cur = cur.right

    # Public API
    def contains(self, key: int) -> bool:
        """
        Searches for ``key`` by iterative descent from this node in O(height).

        Args:
            key (int): The key to search for.

        Returns:
            bool: True if the key is stored in the tree.
        """
        key = _check_key(key, "contains")
        cur = self
        while not cur.is_empty():
            if key == cur.key:
                return True
            cur = cur.left if key < cur.key else cur.right
        return False

    def insert(self, key: int) -> AVLTree:
        """
        Public method (worst-case O(log n)): Insert a key into the AVL tree.
        Inserting a key that is already present leaves the tree unchanged.

        Heights are recomputed and rebalancing is applied on every node while
        the recursion unwinds, so the balance invariant holds for the whole
        tree once the top-level call returns.

        Args:
            key (int): The key to insert.

        Returns:
            AVLTree: The updated tree (this instance).

        Raises:
            TypeError: If key is not an int.
        """
        self._insert(_check_key(key, "insert"))
        return self

    def remove(self, key: int) -> bool:
        """
        Public method (worst-case O(log n)): Remove a key from the AVL tree.

        A node with two children takes over its in-order successor's key and
        the successor is removed from the right subtree instead. Every node on
        the path back up is re-heighted and rebalanced.

        Args:
            key (int): The key to remove.

        Returns:
            bool: True if the key was present and has been removed.

        Raises:
            TypeError: If key is not an int.
        """
        return self._remove(_check_key(key, "remove"))

    def min_key(self) -> Optional[int]:
        if self.is_empty():
            return None
        cur = self
        while not cur.left.is_empty():
            cur = cur.left
        return cur.key

    def max_key(self) -> Optional[int]:
        if self.is_empty():
            return None
        cur = self
        while not cur.right.is_empty():
            cur = cur.right
        return cur.key

    def update_height(self) -> None:
        self.height = 1 + max(self.left.height, self.right.height)

    def rebalance(self) -> None:
        """
        Restore the balance invariant at this node, assuming both subtrees are
        balanced and the node's height is up to date.

        When the heavy child's grandchildren have equal height the single
        rotation is chosen.
        """
        if self.is_empty() or abs(self.left.height - self.right.height) <= 1:
            return

        if self.left.height < self.right.height:
            if self.right.left.height <= self.right.right.height:
                debug_log("Rebalance at %s: single left rotation", self.key)
                self._rotate_left()
            else:
                debug_log("Rebalance at %s: right-left rotation", self.key)
                self._rotate_right_left()
        else:
            if self.left.left.height >= self.left.right.height:
                debug_log("Rebalance at %s: single right rotation", self.key)
                self._rotate_right()
            else:
                debug_log("Rebalance at %s: left-right rotation", self.key)
                self._rotate_left_right()
        self.update_height()

    def check_ordering(self, low: Optional[int] = None, high: Optional[int] = None) -> bool:
        """
        Verify that every key lies strictly between the bounds inherited from
        its ancestors. ``None`` stands for an unbounded side, so keys of any
        magnitude validate at the root.
        """
        if self.is_empty():
            return True
        if low is not None and self.key <= low:
            return False
        if high is not None and self.key >= high:
            return False
        return self.left.check_ordering(low, self.key) and self.right.check_ordering(self.key, high)

    def check_balanced(self) -> bool:
        """Verify height bookkeeping and the AVL balance condition at every node."""
        if self.is_empty():
            return True
        if self.height != 1 + max(self.left.height, self.right.height):
            return False
        if abs(self.left.height - self.right.height) > 1:
            return False
        return self.left.check_balanced() and self.right.check_balanced()

    def print_structure(self, max_depth: Optional[int] = None) -> str:
        from avl_trees.display import print_structure
        return print_structure(self, max_depth=max_depth)

    # Private Methods
    def _populate(self, key: int) -> None:
        self.key = key
        self.height = 1
        self.left = AVLTree()
        self.right = AVLTree()

    def _clear(self) -> None:
        self.key = None
        self.height = 0
        self.left = None
        self.right = None

    def _absorb(self, child: AVLTree) -> None:
        """Take over ``child``'s key and subtrees, dropping the child node."""
        self.key = child.key
        self.height = child.height
        self.left = child.left
        self.right = child.right

    def _insert(self, key: int) -> None:
        if self.is_empty():
            self._populate(key)
            return
        if key == self.key:
            return
        if key < self.key:
            self.left._insert(key)
        else:
            self.right._insert(key)
        self.update_height()
        self.rebalance()

    def _remove(self, key: int) -> bool:
        if self.is_empty():
            return False

        if key < self.key:
            removed = self.left._remove(key)
        elif key > self.key:
            removed = self.right._remove(key)
        else:
            removed = True
            if self.left.is_empty() and self.right.is_empty():
                self._clear()
                return True
            if self.left.is_empty():
                self._absorb(self.right)
            elif self.right.is_empty():
                self._absorb(self.left)
            else:
                successor = self.right.min_key()
                self.key = successor
                self.right._remove(successor)

        if removed:
            self.update_height()
            self.rebalance()
        return removed

    # Rotations re-link the existing nodes: keys are swapped between the
    # subtree root and the node that moves below it, so this instance stays
    # the root of the subtree.
    def _rotate_left(self) -> None:
        pivot = self.right
        self.key, pivot.key = pivot.key, self.key
        self.right = pivot.right
        pivot.right = pivot.left
        pivot.left = self.left
        self.left = pivot
        pivot.update_height()

    def _rotate_right(self) -> None:
        pivot = self.left
        self.key, pivot.key = pivot.key, self.key
        self.left = pivot.left
        pivot.left = pivot.right
        pivot.right = self.right
        self.right = pivot
        pivot.update_height()

    def _rotate_right_left(self) -> None:
        child = self.right
        grand = child.left
        self.key, grand.key = grand.key, self.key
        child.left = grand.right
        grand.right = grand.left
        grand.left = self.left
        self.left = grand
        grand.update_height()
        child.update_height()

    def _rotate_left_right(self) -> None:
        child = self.left
        grand = child.right
        self.key, grand.key = grand.key, self.key
        child.right = grand.left
        grand.left = grand.right
        grand.right = self.right
        self.right = grand
        grand.update_height()
        child.update_height()
