# tests/test_nat.py
"""
Core invariants for natural-number witnesses and inductive naturals.

These tests are intentionally small and structural:
- witness construction, validation and rendering
- witness arithmetic always goes through validation
- from_witness / to_int round-trip
- inductive add / mul / pow against integer arithmetic on a small grid
"""

import pytest

from perfect_tree import (
    D0,
    D1,
    D2,
    ZERO,
    InductiveNatural,
    NaturalWitness,
    Succ,
    Zero,
    WitnessError,
    WitnessUnderflow,
    add_inductive,
    add_witness,
    from_int,
    from_witness,
    mul_inductive,
    mul_witness,
    pow_inductive,
    pow_witness,
    sub_witness,
    to_int,
    to_integer,
    witness,
    with_witness,
)


# ---------------------------------------------------------------------------
# NaturalWitness
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("n", [0, 1, 2, 7, 64, 10**30])
def test_witness_roundtrip(n: int) -> None:
    w = witness(n)
    assert isinstance(w, NaturalWitness)
    assert to_integer(w) == n
    assert int(w) == n


def test_witness_renders_with_d_prefix() -> None:
    assert repr(witness(3)) == "d3"
    assert repr(D0) == "d0"


def test_witness_equality_and_hash() -> None:
    assert witness(5) == witness(5)
    assert witness(5) != witness(6)
    assert len({witness(5), witness(5), witness(6)}) == 2


def test_witness_usable_as_index() -> None:
    assert [10, 20, 30][witness(2)] == 30
    assert list(range(witness(3))) == [0, 1, 2]


def test_witness_is_immutable() -> None:
    w = witness(3)
    with pytest.raises(AttributeError):
        w._value = 4


def test_negative_witness_rejected() -> None:
    with pytest.raises(WitnessError):
        witness(-1)


@pytest.mark.parametrize("bad", [1.0, "3", None, True])
def test_non_int_witness_rejected(bad) -> None:
    with pytest.raises(TypeError):
        witness(bad)


def test_expected_size_is_confirmed() -> None:
    assert witness(4, expected=4) == witness(4)
    with pytest.raises(WitnessError):
        witness(4, expected=5)


def test_witness_of_witness_is_equal() -> None:
    w = witness(9)
    assert witness(w) == w


def test_with_witness_supplies_the_witness() -> None:
    assert with_witness(6, lambda w: int(w) * 2) == 12


@pytest.mark.parametrize("a", range(0, 6))
@pytest.mark.parametrize("b", range(0, 6))
def test_witness_arithmetic_grid(a: int, b: int) -> None:
    wa, wb = witness(a), witness(b)
    assert int(add_witness(wa, wb)) == a + b
    assert int(mul_witness(wa, wb)) == a * b
    assert int(pow_witness(wa, wb)) == a ** b
    if a >= b:
        assert int(sub_witness(wa, wb)) == a - b


def test_sub_witness_underflow_is_an_error() -> None:
    with pytest.raises(WitnessUnderflow):
        sub_witness(D0, D1)
    # WitnessUnderflow is still a WitnessError
    with pytest.raises(WitnessError):
        sub_witness(D1, D2)


def test_arithmetic_checks_expected_result() -> None:
    assert pow_witness(D2, witness(3), expected=8) == witness(8)
    with pytest.raises(WitnessError):
        add_witness(D1, D1, expected=3)
    with pytest.raises(WitnessError):
        sub_witness(witness(4), D1, expected=2)


def test_arithmetic_rejects_plain_ints() -> None:
    with pytest.raises(TypeError):
        add_witness(1, D1)
    with pytest.raises(TypeError):
        to_integer(3)


# ---------------------------------------------------------------------------
# InductiveNatural
# ---------------------------------------------------------------------------

def test_zero_is_canonical() -> None:
    assert isinstance(ZERO, Zero)
    assert ZERO.is_zero()
    assert to_int(ZERO) == 0
    assert from_int(0) == ZERO


@pytest.mark.parametrize("n", range(0, 12))
def test_from_witness_roundtrip(n: int) -> None:
    u = from_witness(witness(n))
    assert isinstance(u, InductiveNatural)
    assert to_int(u) == n
    assert u == from_int(n)


def test_successor_structure() -> None:
    two = from_int(2)
    assert isinstance(two, Succ)
    assert isinstance(two.pred, Succ)
    assert two.pred.pred is ZERO
    assert not two.is_zero()
    assert repr(two) == "Succ(Succ(Zero))"


def test_long_chain_repr_is_compact() -> None:
    assert repr(from_int(10)) == "Succ^10(Zero)"


def test_inductive_equality_and_hash() -> None:
    assert Succ(ZERO) == from_int(1)
    assert Succ(ZERO) != ZERO
    assert len({from_int(3), from_int(3), ZERO}) == 2


def test_succ_rejects_non_inductive() -> None:
    with pytest.raises(TypeError):
        Succ(1)


def test_inductive_is_immutable() -> None:
    with pytest.raises(AttributeError):
        from_int(2).pred = ZERO


@pytest.mark.parametrize("a", range(0, 5))
@pytest.mark.parametrize("b", range(0, 5))
def test_inductive_arithmetic_grid(a: int, b: int) -> None:
    ua, ub = from_int(a), from_int(b)
    assert to_int(add_inductive(ua, ub)) == a + b
    assert to_int(mul_inductive(ua, ub)) == a * b
    assert to_int(pow_inductive(ua, ub)) == a ** b


def test_add_zero_is_identity() -> None:
    x = from_int(4)
    assert add_inductive(ZERO, x) is x
    assert add_inductive(x, ZERO) is x


def test_pow_zero_is_one() -> None:
    assert pow_inductive(ZERO, ZERO) == Succ(ZERO)
    assert pow_inductive(from_int(7), ZERO) == Succ(ZERO)


def test_large_results_do_not_recurse() -> None:
    # 2**12 successors: far deeper than the interpreter's recursion limit.
    big = pow_inductive(from_int(2), from_int(12))
    assert to_int(big) == 4096


def test_inductive_arithmetic_rejects_ints() -> None:
    with pytest.raises(TypeError):
        add_inductive(1, ZERO)
    with pytest.raises(TypeError):
        from_witness(3)
