# perfect_tree/flat.py
"""
Tree <-> flat sequence conversion.

    t2v(Leaf(a))      = (a,)
    t2v(Branch(l, r)) = t2v(l) + t2v(r)

    v2t(0, s)         = Leaf(s[0])
    v2t(k + 1, s)     = Branch(v2t(k, first half of s), v2t(k, second half of s))

The two are inverse as long as len(s) == 2**depth. Any other length is
rejected with LengthMismatch; nothing is truncated or padded.

Sequences only need len() and integer indexing (list, tuple, range, str,
array ...). Halves are addressed by offset, never copied.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence, Tuple

from .core.tree import Branch, Leaf, PerfectTree, dfold
from .errors import LengthMismatch
from .validate import check_depth

logger = logging.getLogger(__name__)


def t2v(tree: PerfectTree) -> Tuple[Any, ...]:
    """Leaves of tree, left to right, as a tuple of length 2**depth."""
    return dfold(lambda a: (a,), lambda _level, l, r: l + r, tree)


def _sequence_length(seq: Any) -> int:
    try:
        return len(seq)
    except TypeError:
        raise TypeError(f"expected a sized sequence, got {type(seq).__name__}") from None


def v2t(depth, seq: Sequence[Any]) -> PerfectTree:
    """Build the tree of the given depth whose leaves are seq, in order."""
    d = check_depth(depth, "depth")
    n = _sequence_length(seq)
    expected = 1 << d
    if n != expected:
        logger.debug("v2t length mismatch: depth %d wants %d, got %d", d, expected, n)
        raise LengthMismatch(
            f"a tree of depth {d} needs exactly {expected} elements, got {n}"
        )

    def go(level: int, offset: int) -> PerfectTree:
        if level == 0:
            return Leaf(seq[offset])
        half = 1 << (level - 1)
        return Branch(go(level - 1, offset), go(level - 1, offset + half))

    return go(d, 0)


def depth_for_length(n: int) -> int:
    """Depth of the tree holding n leaves; n must be a power of two."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"length must be an int, got {type(n).__name__}")
    if n <= 0 or n & (n - 1):
        raise LengthMismatch(f"{n} is not a power of two, no perfect tree has that many leaves")
    return n.bit_length() - 1


def from_sequence(seq: Sequence[Any]) -> PerfectTree:
    """v2t with the depth inferred from len(seq)."""
    n = _sequence_length(seq)
    return v2t(depth_for_length(n), seq)


# Names used throughout the documentation.
flatten = t2v
unflatten = v2t
