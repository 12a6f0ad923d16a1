# perfect_tree/core/nat.py
"""
Natural-number witnesses for tree depths.

Two views of the same number live here:

    NaturalWitness   a runtime value asserted to equal a tracked size
                     (a tree depth, a leaf count ...). Rendered ``d3``.
    InductiveNatural the same number as a zero/successor chain:
                     ZERO, Succ(ZERO), Succ(Succ(ZERO)), ...

Witnesses are only ever built through the validating constructor: arithmetic
computes the integer result and then goes through ``witness()`` again, with
an optional ``expected`` size to confirm against.

The inductive form is a recursion aid. Its arithmetic follows the textbook
structural definitions, unrolled into loops over the successor chain so a
large result cannot exhaust the Python stack.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TypeVar, Union

from ..errors import WitnessError, WitnessUnderflow

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# NaturalWitness
# ---------------------------------------------------------------------------

def _check_natural(n: Any, context: str) -> int:
    # bool is a subclass of int; True is not a size.
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{context} must be an int, got {type(n).__name__}: {n!r}")
    if n < 0:
        raise WitnessError(f"{context} must be >= 0, got {n}")
    return n


class NaturalWitness:
    """A known natural number, tied to the size it stands for."""

    __slots__ = ("_value",)

    def __init__(self, n: int, expected: Optional[int] = None) -> None:
        if isinstance(n, NaturalWitness):
            n = n._value
        value = _check_natural(n, "witness value")
        if expected is not None:
            if isinstance(expected, NaturalWitness):
                expected = expected._value
            expected = _check_natural(expected, "expected size")
            if value != expected:
                logger.debug("witness mismatch: value=%d expected=%d", value, expected)
                raise WitnessError(
                    f"witness value {value} does not match tracked size {expected}"
                )
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("NaturalWitness is immutable")

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other):
        if not isinstance(other, NaturalWitness):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(("NaturalWitness", self._value))

    def __repr__(self):
        return f"d{self._value}"


def witness(n: Union[int, NaturalWitness], expected: Optional[int] = None) -> NaturalWitness:
    """
    Build a witness for n.

    If ``expected`` is given, the witness is only built when n equals it;
    otherwise a WitnessError is raised.
    """
    return NaturalWitness(n, expected)


def to_integer(w: NaturalWitness) -> int:
    """Reify a witness to its plain integer."""
    if not isinstance(w, NaturalWitness):
        raise TypeError(f"to_integer expects a NaturalWitness, got {type(w).__name__}")
    return w.value


def with_witness(n: int, fn: Callable[[NaturalWitness], T]) -> T:
    """Supply fn with the witness for n."""
    return fn(witness(n))


def _operands(a, b, name: str) -> tuple[int, int]:
    if not isinstance(a, NaturalWitness) or not isinstance(b, NaturalWitness):
        raise TypeError(
            f"{name} expects two NaturalWitness values, "
            f"got {type(a).__name__} and {type(b).__name__}"
        )
    return a.value, b.value


def add_witness(a: NaturalWitness, b: NaturalWitness,
                expected: Optional[int] = None) -> NaturalWitness:
    x, y = _operands(a, b, "add_witness")
    return witness(x + y, expected)


def sub_witness(a: NaturalWitness, b: NaturalWitness,
                expected: Optional[int] = None) -> NaturalWitness:
    """
    a - b as a new witness.

    Only used to step one level down a branch, where a >= b always holds.
    Going below zero is a programmer error and raises WitnessUnderflow.
    """
    x, y = _operands(a, b, "sub_witness")
    if x < y:
        logger.debug("witness underflow: %d - %d", x, y)
        raise WitnessUnderflow(f"cannot subtract d{y} from d{x}")
    return witness(x - y, expected)


def mul_witness(a: NaturalWitness, b: NaturalWitness,
                expected: Optional[int] = None) -> NaturalWitness:
    x, y = _operands(a, b, "mul_witness")
    return witness(x * y, expected)


def pow_witness(a: NaturalWitness, b: NaturalWitness,
                expected: Optional[int] = None) -> NaturalWitness:
    x, y = _operands(a, b, "pow_witness")
    return witness(x ** y, expected)


D0 = witness(0)
D1 = witness(1)
D2 = witness(2)


# ---------------------------------------------------------------------------
# InductiveNatural
# ---------------------------------------------------------------------------

class InductiveNatural:
    """Zero or the successor of another InductiveNatural."""

    __slots__ = ("_size",)

    def __setattr__(self, name, value):
        raise AttributeError("InductiveNatural is immutable")

    def is_zero(self) -> bool:
        return False

    def __int__(self) -> int:
        return self._size

    def __index__(self) -> int:
        return self._size

    # Chains are canonical, so two chains are structurally equal iff they
    # have the same length.
    def __eq__(self, other):
        if not isinstance(other, InductiveNatural):
            return NotImplemented
        return self._size == other._size

    def __hash__(self):
        return hash(("InductiveNatural", self._size))


class Zero(InductiveNatural):
    __slots__ = ()

    def __init__(self) -> None:
        object.__setattr__(self, "_size", 0)

    def is_zero(self) -> bool:
        return True

    def __repr__(self):
        return "Zero"


class Succ(InductiveNatural):
    __slots__ = ("pred",)

    def __init__(self, pred: InductiveNatural) -> None:
        if not isinstance(pred, InductiveNatural):
            raise TypeError(f"Succ expects an InductiveNatural, got {type(pred).__name__}")
        object.__setattr__(self, "pred", pred)
        object.__setattr__(self, "_size", pred._size + 1)

    def __repr__(self):
        # Full nesting is unreadable past a handful of levels.
        if self._size <= 4:
            return f"Succ({self.pred!r})"
        return f"Succ^{self._size}(Zero)"


ZERO = Zero()


def from_int(n: int) -> InductiveNatural:
    """Build the successor chain for n."""
    n = _check_natural(n, "n")
    u: InductiveNatural = ZERO
    for _ in range(n):
        u = Succ(u)
    return u


def from_witness(w: NaturalWitness) -> InductiveNatural:
    """Convert a witness to its inductive form by repeated decrement, O(n)."""
    if not isinstance(w, NaturalWitness):
        raise TypeError(f"from_witness expects a NaturalWitness, got {type(w).__name__}")
    steps = 0
    cur = w
    while cur.value > 0:
        cur = sub_witness(cur, D1)
        steps += 1
    u: InductiveNatural = ZERO
    for _ in range(steps):
        u = Succ(u)
    return u


def to_int(u: InductiveNatural) -> int:
    """Count the successors of u."""
    if not isinstance(u, InductiveNatural):
        raise TypeError(f"to_int expects an InductiveNatural, got {type(u).__name__}")
    n = 0
    cur = u
    while isinstance(cur, Succ):
        n += 1
        cur = cur.pred
    return n


def _check_inductive(*xs: Any) -> None:
    for x in xs:
        if not isinstance(x, InductiveNatural):
            raise TypeError(f"expected an InductiveNatural, got {type(x).__name__}")


def add_inductive(x: InductiveNatural, y: InductiveNatural) -> InductiveNatural:
    """
    add(Zero, y)    = y
    add(x, Zero)    = x
    add(Succ(x), y) = Succ(add(x, y))
    """
    _check_inductive(x, y)
    if y.is_zero():
        return x
    # Peel the successors off x, then rebuild them on top of y.
    peeled = 0
    cur = x
    while isinstance(cur, Succ):
        peeled += 1
        cur = cur.pred
    result = y
    for _ in range(peeled):
        result = Succ(result)
    return result


def mul_inductive(x: InductiveNatural, y: InductiveNatural) -> InductiveNatural:
    """
    mul(Zero, _)    = Zero
    mul(_, Zero)    = Zero
    mul(Succ(x), y) = add(y, mul(x, y))
    """
    _check_inductive(x, y)
    if y.is_zero():
        return ZERO
    result: InductiveNatural = ZERO
    cur = x
    while isinstance(cur, Succ):
        result = add_inductive(y, result)
        cur = cur.pred
    return result


def pow_inductive(x: InductiveNatural, y: InductiveNatural) -> InductiveNatural:
    """
    pow(_, Zero)    = Succ(Zero)
    pow(x, Succ(y)) = mul(x, pow(x, y))
    """
    _check_inductive(x, y)
    result: InductiveNatural = Succ(ZERO)
    cur = y
    while isinstance(cur, Succ):
        result = mul_inductive(x, result)
        cur = cur.pred
    return result
