"""
Exception types for perfect_tree.

Every failure is a precondition violation detected before any node of a
result tree is built, so there is never a half-built value to observe.
"""

from __future__ import annotations


class TreeError(Exception):
    """Base class for all perfect_tree errors."""
    pass


class IndexOutOfRange(TreeError, IndexError):
    """Leaf index outside ``[0, 2**depth)``."""
    pass


class LengthMismatch(TreeError, ValueError):
    """A flat sequence (or bit string) does not hold exactly ``2**depth`` elements."""
    pass


class ShapeMismatch(LengthMismatch):
    """Two trees (or two sub-branches) that must share a depth do not."""
    pass


class WitnessError(TreeError, ValueError):
    """A natural-number witness failed validation."""
    pass


class WitnessUnderflow(WitnessError):
    """Witness subtraction would go below zero."""
    pass


class MotiveViolation(TreeError, TypeError):
    """A fold produced a value the motive rejects for that level."""
    pass


class DepthLimitExceeded(TreeError, ValueError):
    """Requested depth is above ``config.MAX_DEPTH``."""
    pass
