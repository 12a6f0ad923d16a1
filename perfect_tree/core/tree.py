# perfect_tree/core/tree.py
"""
PERFECT TREE CORE
=================
A tree of depth d is either

    Leaf(a)          d = 0
    Branch(l, r)     d = l.depth + 1,  l.depth == r.depth

so it always holds exactly 2**d elements, all at the leaves, ordered left
to right with indices 0 .. 2**d - 1.

Nodes are immutable and compare structurally. Subtrees may be shared
(replicate builds each level once), which is safe because nothing mutates.

Everything else in the package is expressed through ``dfold``: a fold whose
branch function is told the level it joins at, so its result type may
change from level to level.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Optional

from .. import config
from ..errors import DepthLimitExceeded, MotiveViolation, ShapeMismatch
from ..validate import assert_tree, check_depth
from .nat import D1, NaturalWitness, sub_witness, witness

logger = logging.getLogger(__name__)


class PerfectTree:
    """Common base of Leaf and Branch."""

    __slots__ = ("depth", "_hash")

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ---------- container protocol ----------

    def __len__(self) -> int:
        return 1 << self.depth

    def __iter__(self) -> Iterator[Any]:
        """Leaves, left to right."""
        stack: list[PerfectTree] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Leaf):
                yield node.value
            else:
                stack.append(node.right)
                stack.append(node.left)

    def __getitem__(self, i: int) -> Any:
        # Local import: access builds on this module.
        from ..access import index_tree
        return index_tree(self, i)

    def __hash__(self):
        h = self._hash
        if h is None:
            h = self._compute_hash()
            object.__setattr__(self, "_hash", h)
        return h

    def _compute_hash(self) -> int:
        raise NotImplementedError

    def witness(self) -> NaturalWitness:
        """Witness for this tree's depth."""
        return witness(self.depth)


class Leaf(PerfectTree):
    """A depth-0 tree holding one element."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "depth", 0)
        object.__setattr__(self, "_hash", None)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, PerfectTree):
            return NotImplemented
        return isinstance(other, Leaf) and self.value == other.value

    # Defining __eq__ resets __hash__ to None.
    __hash__ = PerfectTree.__hash__

    def _compute_hash(self) -> int:
        return hash(("Leaf", self.value))

    def __repr__(self):
        return f"Leaf({self.value!r})"

    def __str__(self):
        return repr(self.value)


class Branch(PerfectTree):
    """Two sub-trees of equal depth."""

    __slots__ = ("left", "right")

    def __init__(self, left: PerfectTree, right: PerfectTree) -> None:
        if not isinstance(left, PerfectTree) or not isinstance(right, PerfectTree):
            raise TypeError(
                "Branch expects two PerfectTree children, got "
                f"{type(left).__name__} and {type(right).__name__}"
            )
        if left.depth != right.depth:
            logger.debug("unbalanced branch: left d%d, right d%d", left.depth, right.depth)
            raise ShapeMismatch(
                f"Branch children must have equal depth, got {left.depth} and {right.depth}"
            )
        depth = left.depth + 1
        if depth > config.MAX_DEPTH:
            raise DepthLimitExceeded(f"depth {depth} exceeds MAX_DEPTH={config.MAX_DEPTH}")
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)
        object.__setattr__(self, "depth", depth)
        object.__setattr__(self, "_hash", None)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, PerfectTree):
            return NotImplemented
        return _structurally_equal(self, other)

    __hash__ = PerfectTree.__hash__

    def _compute_hash(self) -> int:
        return hash(("Branch", hash(self.left), hash(self.right)))

    def __repr__(self):
        return f"Branch({self.left!r}, {self.right!r})"

    def __str__(self):
        return f"<{self.left},{self.right}>"


def _structurally_equal(a: PerfectTree, b: PerfectTree) -> bool:
    # Pairs of nodes already compared are skipped, so trees with shared
    # subtrees compare in time proportional to their distinct nodes.
    seen: set[tuple[int, int]] = set()
    stack = [(a, b)]
    while stack:
        x, y = stack.pop()
        if x is y:
            continue
        key = (id(x), id(y))
        if key in seen:
            continue
        seen.add(key)
        if isinstance(x, Leaf):
            if not isinstance(y, Leaf) or x.value != y.value:
                return False
        else:
            if not isinstance(y, Branch) or x.depth != y.depth:
                return False
            stack.append((x.right, y.right))
            stack.append((x.left, y.left))
    return True


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def replicate(depth, value: Any) -> PerfectTree:
    """
    A tree of the given depth holding 2**depth copies of value.

    Each level is built once and used for both children, so construction is
    O(depth) in time and memory regardless of the leaf count.
    """
    d = check_depth(depth, "depth")
    tree: PerfectTree = Leaf(value)
    for _ in range(d):
        tree = Branch(tree, tree)
    return tree


# ---------------------------------------------------------------------------
# Deconstruction
# ---------------------------------------------------------------------------

def textract(tree: PerfectTree) -> Any:
    """The element of a depth-0 tree."""
    assert_tree(tree, "tree")
    if tree.depth != 0:
        raise ShapeMismatch(f"textract expects a depth 0 tree, got depth {tree.depth}")
    return tree.value


def tsplit(tree: PerfectTree) -> tuple[PerfectTree, PerfectTree]:
    """The two equal-depth halves of a tree of depth >= 1."""
    assert_tree(tree, "tree")
    if tree.depth == 0:
        raise ShapeMismatch("tsplit expects a tree of depth >= 1, got a leaf")
    return tree.left, tree.right


# ---------------------------------------------------------------------------
# Depth-dependent fold
# ---------------------------------------------------------------------------

def _check_motive(motive: Callable[[int], Any], level: int, result: Any) -> None:
    expected = motive(level)
    if isinstance(expected, (type, tuple)):
        ok = isinstance(result, expected)
    elif callable(expected):
        ok = bool(expected(result))
    else:
        raise TypeError(
            f"motive({level}) must return a type, a tuple of types or a predicate, "
            f"got {type(expected).__name__}"
        )
    if not ok:
        raise MotiveViolation(f"fold result at level {level} rejected by motive: {result!r}")


def dfold(
    leaf_fn: Callable[[Any], Any],
    branch_fn: Callable[[int, Any, Any], Any],
    tree: PerfectTree,
    motive: Optional[Callable[[int], Any]] = None,
) -> Any:
    """
    Depth-dependent fold.

        dfold(f, g, Leaf(a))      = f(a)
        dfold(f, g, Branch(l, r)) = g(k, dfold(f, g, l), dfold(f, g, r))

    where k is the depth of l and r. Because g knows k, the value it returns
    at level k + 1 may have a different type (or width) than what it
    receives at level k.

    ``motive(level)`` optionally describes what a result at ``level`` must
    look like: a type, a tuple of types, or a predicate. Leaves are level 0,
    the root is level ``tree.depth``. A rejected result raises
    MotiveViolation.
    """
    assert_tree(tree, "tree")
    trace = config.TRACE_FOLDS_ENABLED

    def go(sn: NaturalWitness, node: PerfectTree) -> Any:
        if isinstance(node, Leaf):
            result = leaf_fn(node.value)
            if motive is not None:
                _check_motive(motive, 0, result)
            return result
        below = sub_witness(sn, D1, expected=node.left.depth)
        level = below.value
        result = branch_fn(level, go(below, node.left), go(below, node.right))
        if motive is not None:
            _check_motive(motive, level + 1, result)
        if trace:
            logger.debug("dfold joined level %d -> %r", level, result)
        return result

    return go(tree.witness(), tree)
