# perfect_tree/reductions.py
"""
Reduction networks built on the depth-dependent fold.

These are convenience utilities showing what dfold is for: a balanced
network of joins where every tier's accumulator is exactly as wide as it
needs to be.

A population counter over 2**d bits needs d + 1 bits for its result, but
the adders near the leaves only ever see small numbers. With dfold each
tier of adders is one bit wider than the one below it:

    level 0: Unsigned(1)   (the bits themselves)
    level 1: Unsigned(2)
    ...
    level d: Unsigned(d + 1)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Union

from .core.tree import PerfectTree, dfold
from .flat import from_sequence
from .ops import tfold
from .validate import is_tree


@dataclass(frozen=True)
class Unsigned:
    """An unsigned value that knows its bit width."""
    width: int
    value: int

    def __post_init__(self) -> None:
        for name in ("width", "value"):
            field_value = getattr(self, name)
            if isinstance(field_value, bool) or not isinstance(field_value, int):
                raise TypeError(f"{name} must be an int, got {type(field_value).__name__}")
        if self.width < 1:
            raise ValueError(f"width must be >= 1, got {self.width}")
        if not 0 <= self.value < (1 << self.width):
            raise ValueError(f"{self.value} does not fit in {self.width} unsigned bits")

    def plus(self, other: "Unsigned") -> "Unsigned":
        """Widening add: the result is one bit wider than the wider operand."""
        return Unsigned(max(self.width, other.width) + 1, self.value + other.value)

    def __int__(self) -> int:
        return self.value


def _as_tree(bits: Union[PerfectTree, Sequence[Any]]) -> PerfectTree:
    return bits if is_tree(bits) else from_sequence(bits)


def _bit(b: Any) -> Unsigned:
    if b not in (0, 1):
        raise ValueError(f"population_count expects 0/1 leaves, got {b!r}")
    return Unsigned(1, int(b))


def population_count(bits: Union[PerfectTree, Sequence[Any]]) -> Unsigned:
    """
    Number of set bits, as an Unsigned of width depth + 1.

    bits is a tree of 0/1 values or a sequence whose length is a power of
    two. Each level's width is checked as the fold goes.
    """
    tree = _as_tree(bits)
    return dfold(
        _bit,
        lambda _level, l, r: l.plus(r),
        tree,
        motive=lambda level: lambda u: isinstance(u, Unsigned) and u.width == level + 1,
    )


def tree_sum(tree: PerfectTree) -> Any:
    """Sum of all leaves with a single uniform adder."""
    return tfold(lambda a: a, lambda l, r: l + r, tree)
