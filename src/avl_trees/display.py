"""Pretty-printing and display utilities for AVL tree structures."""

from __future__ import annotations

import collections
import math
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from avl_trees.avl_tree_base import AVLTree


# ANSI colour codes
PRIMARY = '\033[32m'    # green
SECONDARY = '\033[33m'  # yellow
RESET = '\033[0m'

EMPTY_MARK = "·"


def _require_tree(tree, fn: str) -> None:
    from avl_trees.avl_tree_base import AVLTree

    if not isinstance(tree, AVLTree):
        raise TypeError(f"{fn}() expects AVLTree, got {type(tree).__name__}")


def print_pretty(tree: Optional[AVLTree]) -> str:
    """
    Prints an AVL tree so:
      • Lines go from the root (depth 0) down to the deepest level.
      • Within a line, nodes appear left→right in traversal order; empty
        children of populated nodes are shown as ``·``.
      • All columns have the same width, so initial indent and
        inter-node spacing are uniform.
    """
    if tree is None:
        return f"{type(tree).__name__}: None"

    _require_tree(tree, "print_pretty")

    if tree.is_empty():
        return f"{type(tree).__name__}: Empty"

    # 1) First pass: collect each node's text and track max length
    layers_raw = collections.defaultdict(list)  # depth -> list of node-strings
    max_len = 0

    def collect(node, depth):
        nonlocal max_len
        if node.is_empty():
            layers_raw[depth].append(EMPTY_MARK)
            return
        text = str(node.key)
        layers_raw[depth].append(text)
        max_len = max(max_len, len(text))
        collect(node.left, depth + 1)
        collect(node.right, depth + 1)

    collect(tree, 0)

    # 2) Define a fixed column width: widest text + 1 space padding
    column_width = max_len + 1

    # 3) Accumulate with indent; every layer is centred under the previous one
    all_depths = sorted(layers_raw.keys())
    widest = max(len(v) for v in layers_raw.values())
    out_lines = []
    for depth in all_depths:
        texts = layers_raw[depth]
        missing = widest - len(texts)
        spaces = int(math.floor((column_width + 1) * missing / 2 + 0.5))
        prefix = "     " + spaces * " "
        line = " ".join(
            (f"{SECONDARY}{txt.center(column_width)}{RESET}" if txt == EMPTY_MARK
             else txt.center(column_width))
            for txt in texts
        )
        layer_id = f"{PRIMARY}Depth {depth}{RESET}"
        out_lines.append(f"{layer_id}:{prefix}{line}".rstrip())

    return f"{type(tree).__name__} (height={tree.height})\n" + "\n".join(out_lines) + "\n"


def collect_keys(tree: AVLTree) -> list[int]:
    """Collect all keys of an AVL tree in ascending order."""
    return list(tree)


def print_structure(
    tree: AVLTree,
    indent: int = 0,
    max_depth: Optional[int] = None,
) -> str:
    """Return a depth-indented dump of an AVL tree.

    One line per populated node in pre-order, formatted as
    ``"<key>  (<height>)"``, with two extra spaces of indentation per level.
    Levels below ``max_depth`` are elided.
    """
    _require_tree(tree, "print_structure")

    prefix = ' ' * indent
    if tree.is_empty():
        return f"{prefix}Empty {tree.__class__.__name__}"

    result = []

    def walk(node, pre, depth):
        if node.is_empty():
            return
        if max_depth is not None and depth > max_depth:
            result.append(f"{pre}... (max depth reached)")
            return
        result.append(f"{pre}{node.key}  ({node.height})")
        walk(node.left, pre + "  ", depth + 1)
        walk(node.right, pre + "  ", depth + 1)

    walk(tree, prefix, 0)
    return "\n".join(result)
