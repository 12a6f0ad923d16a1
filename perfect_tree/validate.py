"""
Argument validation for perfect_tree.

Public operations check their inputs here before building anything, so a
bad argument fails at the call site with a clear message instead of deep
inside a recursion.

Depths may be given as a plain int, a NaturalWitness or an InductiveNatural;
check_depth normalizes all three to int.
"""

from __future__ import annotations

from typing import Any

from . import config
from .core.nat import InductiveNatural, NaturalWitness
from .errors import DepthLimitExceeded


def check_depth(depth: Any, context: str = "depth") -> int:
    """
    Normalize a depth to int, raising if it is unusable.

    Raises:
        TypeError: depth is not an int / witness / inductive natural.
        ValueError: depth is negative.
        DepthLimitExceeded: depth is above config.MAX_DEPTH.
    """
    if isinstance(depth, (NaturalWitness, InductiveNatural)):
        d = int(depth)
    elif isinstance(depth, bool) or not isinstance(depth, int):
        raise TypeError(f"{context} must be an int, got {type(depth).__name__}: {depth!r}")
    else:
        d = depth
    if d < 0:
        raise ValueError(f"{context} must be >= 0, got {d}")
    if d > config.MAX_DEPTH:
        raise DepthLimitExceeded(f"{context} {d} exceeds MAX_DEPTH={config.MAX_DEPTH}")
    return d


def is_tree(value: Any) -> bool:
    """True if value is a Leaf or a Branch."""
    # Local import: core.tree imports this module.
    from .core.tree import PerfectTree
    return isinstance(value, PerfectTree)


def assert_tree(value: Any, context: str = "value") -> None:
    """
    Assert that value is a perfect tree, raising TypeError if not.

    Args:
        value: The value to check.
        context: Description for error message (e.g., "left operand").
    """
    if not is_tree(value):
        raise TypeError(
            f"{context} must be a PerfectTree, got {type(value).__name__}: {value!r}"
        )
