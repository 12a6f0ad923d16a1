# perfect_tree/ops.py
"""
Element-wise operations and specialised folds, all defined through dfold.

    tfold      uniform fold: one combine function for every level
    tmap       apply f to every leaf
    tzip_with  combine two trees of equal depth leaf by leaf
    tzip       tzip_with building pairs
    tunzip     tree of pairs -> pair of trees
    tindices   tree whose i-th leaf holds i
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Tuple

from .core.nat import D2, pow_witness, witness
from .core.tree import Branch, Leaf, PerfectTree, dfold, replicate
from .errors import ShapeMismatch
from .validate import assert_tree, check_depth

logger = logging.getLogger(__name__)


def tfold(leaf_fn: Callable[[Any], Any], combine: Callable[[Any, Any], Any],
          tree: PerfectTree) -> Any:
    """Reduce a tree to a single value with the same combine at every level."""
    return dfold(leaf_fn, lambda _level, l, r: combine(l, r), tree)


def tmap(f: Callable[[Any], Any], tree: PerfectTree) -> PerfectTree:
    """
    The tree obtained by applying f to each element, i.e.

        tmap(f, Branch(Leaf(a), Leaf(b))) == Branch(Leaf(f(a)), Leaf(f(b)))
    """
    return dfold(lambda a: Leaf(f(a)), lambda _level, l, r: Branch(l, r), tree)


def tzip_with(f: Callable[[Any, Any], Any], ta: PerfectTree, tb: PerfectTree) -> PerfectTree:
    """
    Zip two trees of equal depth with f.

    Folds over ta's shape, producing at every node a function that takes
    the matching subtree of tb apart.
    """
    assert_tree(ta, "left tree")
    assert_tree(tb, "right tree")
    if ta.depth != tb.depth:
        logger.debug("tzip_with depth mismatch: %d vs %d", ta.depth, tb.depth)
        raise ShapeMismatch(f"cannot zip trees of depth {ta.depth} and {tb.depth}")

    def leaf(a):
        return lambda other: Leaf(f(a, other.value))

    def branch(_level, fl, fr):
        return lambda other: Branch(fl(other.left), fr(other.right))

    return dfold(leaf, branch, ta)(tb)


def tzip(ta: PerfectTree, tb: PerfectTree) -> PerfectTree:
    """Tree of corresponding pairs."""
    return tzip_with(lambda a, b: (a, b), ta, tb)


def tunzip(tree: PerfectTree) -> Tuple[PerfectTree, PerfectTree]:
    """Split a tree of pairs into a tree of first and a tree of second components."""

    def leaf(pair):
        a, b = pair
        return Leaf(a), Leaf(b)

    def branch(_level, l, r):
        return Branch(l[0], r[0]), Branch(l[1], r[1])

    return dfold(leaf, branch, tree)


def tindices(depth) -> PerfectTree:
    """
    Tree of depth d whose leaf at position i holds i.

    Folds over a replicate(d, 0) skeleton: at level l the right half is the
    left half shifted by 2**l.

        >>> str(tindices(3))
        '<<<0,1>,<2,3>>,<<4,5>,<6,7>>>'
    """
    d = check_depth(depth, "depth")

    def branch(level, l, r):
        offset = pow_witness(D2, witness(level)).value
        return Branch(l, tmap(lambda i: i + offset, r))

    return dfold(Leaf, branch, replicate(d, 0))
