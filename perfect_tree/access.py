# perfect_tree/access.py
"""
Positional access by binary descent.

Leaf 0 is the bottom-left leaf, leaf 2**d - 1 the bottom-right one. At each
branch the index is compared against half the current leaf count: smaller
goes left, otherwise it goes right minus that half. Both lookup and update
touch O(depth) nodes; updates rebuild only the ancestors of the target and
share every other subtree with the input.
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable

from .core.tree import Branch, Leaf, PerfectTree
from .errors import IndexOutOfRange
from .validate import assert_tree

logger = logging.getLogger(__name__)


def _check_index(tree: PerfectTree, i: Any) -> int:
    # Anything with __index__ (witnesses, numpy ints) is an index; True is not.
    if isinstance(i, bool):
        raise TypeError("tree index must be an int, got bool")
    i = operator.index(i)
    size = 1 << tree.depth
    if not 0 <= i < size:
        logger.debug("index %d out of range for depth %d", i, tree.depth)
        raise IndexOutOfRange(f"index {i} is out of range [0, {size}) for depth {tree.depth}")
    return i


def index_tree(tree: PerfectTree, i: int) -> Any:
    """
    The i-th leaf of tree.

        >>> t = Branch(Branch(Leaf(1), Leaf(2)), Branch(Leaf(3), Leaf(4)))
        >>> index_tree(t, 2)
        3
    """
    assert_tree(tree, "tree")
    i = _check_index(tree, i)
    node = tree
    while isinstance(node, Branch):
        half = 1 << (node.depth - 1)
        if i < half:
            node = node.left
        else:
            node = node.right
            i -= half
    return node.value


def adjust_tree(tree: PerfectTree, i: int, fn: Callable[[Any], Any]) -> PerfectTree:
    """A new tree with the i-th leaf replaced by fn(old_value)."""
    assert_tree(tree, "tree")
    i = _check_index(tree, i)

    # Walk down recording which side was taken, then rebuild upwards.
    path: list[tuple[Branch, bool]] = []
    node = tree
    while isinstance(node, Branch):
        half = 1 << (node.depth - 1)
        went_left = i < half
        path.append((node, went_left))
        if went_left:
            node = node.left
        else:
            node = node.right
            i -= half

    rebuilt: PerfectTree = Leaf(fn(node.value))
    for parent, went_left in reversed(path):
        if went_left:
            rebuilt = Branch(rebuilt, parent.right)
        else:
            rebuilt = Branch(parent.left, rebuilt)
    return rebuilt


def replace_tree(tree: PerfectTree, i: int, value: Any) -> PerfectTree:
    """
    A new tree equal to tree except that leaf i holds value.

        >>> t = Branch(Branch(Leaf(1), Leaf(2)), Branch(Leaf(3), Leaf(4)))
        >>> str(replace_tree(t, 2, 7))
        '<<1,2>,<7,4>>'
    """
    return adjust_tree(tree, i, lambda _old: value)
