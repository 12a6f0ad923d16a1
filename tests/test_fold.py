# tests/test_fold.py
"""
Tests for the depth-dependent fold and the reductions built on it.

The point of dfold is that each level may produce a differently sized
result, so next to plain value checks these tests assert the width of the
accumulator at every level of a population-count network.
"""

import logging

import pytest

from perfect_tree import (
    Branch,
    Leaf,
    MotiveViolation,
    Unsigned,
    dfold,
    population_count,
    replicate,
    tfold,
    tindices,
    tree_sum,
    v2t,
    LengthMismatch,
)
from perfect_tree import config


def test_fold_on_leaf_is_leaf_fn():
    assert dfold(lambda a: a * 10, lambda k, l, r: None, Leaf(4)) == 40


def test_fold_on_branch_joins_children(tree4):
    result = dfold(lambda a: [a], lambda _k, l, r: l + r, tree4)
    assert result == [1, 2, 3, 4]


def test_branch_fn_receives_child_depth():
    seen = []

    def branch(level, l, r):
        seen.append(level)
        return level + 1

    top = dfold(lambda a: 0, branch, replicate(3, None))
    assert top == 3
    # 4 joins at level 0, 2 at level 1, 1 at level 2
    assert sorted(seen) == [0, 0, 0, 0, 1, 1, 2]


def test_result_type_may_change_per_level():
    # level 0 -> int, level 1 -> str, level 2 -> tuple
    def branch(level, l, r):
        if level == 0:
            return f"{l}{r}"
        return (l, r)

    assert dfold(lambda a: a, branch, v2t(2, [1, 2, 3, 4])) == ("12", "34")


def test_motive_accepts_types_per_level():
    def motive(level):
        return int if level == 0 else str

    result = dfold(lambda a: a, lambda _k, l, r: f"{l}+{r}", Branch(Leaf(1), Leaf(2)), motive)
    assert result == "1+2"


def test_motive_rejects_wrong_type():
    with pytest.raises(MotiveViolation):
        dfold(lambda a: a, lambda _k, l, r: l + r, Branch(Leaf(1), Leaf(2)),
              motive=lambda level: str)


def test_motive_violation_is_a_type_error():
    with pytest.raises(TypeError):
        dfold(str, lambda _k, l, r: l + r, Leaf(1), motive=lambda level: int)


def test_motive_predicate():
    with pytest.raises(MotiveViolation):
        dfold(lambda a: a, lambda _k, l, r: l + r, replicate(2, 1),
              motive=lambda level: lambda v: v <= 2)


def test_motive_must_return_type_or_predicate():
    with pytest.raises(TypeError):
        dfold(lambda a: a, lambda _k, l, r: l, Leaf(1), motive=lambda level: 5)


def test_fold_rejects_non_tree():
    with pytest.raises(TypeError):
        dfold(lambda a: a, lambda _k, l, r: l, [1, 2])


def test_tfold_uniform_combine(tree4):
    assert tfold(lambda a: a, max, tree4) == 4
    assert tfold(str, lambda l, r: l + r, tree4) == "1234"


def test_tree_sum():
    assert tree_sum(tindices(4)) == sum(range(16))


def test_trace_logging(monkeypatch, caplog):
    monkeypatch.setattr(config, "TRACE_FOLDS_ENABLED", True)
    with caplog.at_level(logging.DEBUG, logger="perfect_tree.core.tree"):
        dfold(lambda a: a, lambda _k, l, r: l + r, replicate(1, 2))
    assert any("level 0" in rec.getMessage() for rec in caplog.records)


# ---------------------------------------------------------------------------
# Width-growing reduction
# ---------------------------------------------------------------------------

def test_population_count_all_ones_depth_4():
    # 16 leaves all 1, adder tree widens one bit per level.
    count = population_count(replicate(4, 1))
    assert count.value == 16
    assert count.width == 5


@pytest.mark.parametrize("bits,expected", [
    ([0], 0),
    ([1], 1),
    ([1, 0], 1),
    ([1, 1, 0, 1], 3),
    ([0] * 8, 0),
    ([1, 0, 1, 0, 1, 0, 1, 1], 5),
])
def test_population_count_from_sequences(bits, expected):
    result = population_count(bits)
    assert int(result) == expected
    assert result.width == len(bits).bit_length()


def test_widths_are_tight_at_every_level():
    widths = {}

    def branch(level, l, r):
        widths.setdefault(level + 1, set()).add(l.plus(r).width)
        return l.plus(r)

    dfold(lambda b: Unsigned(1, b), branch, replicate(5, 1))
    assert widths == {1: {2}, 2: {3}, 3: {4}, 4: {5}, 5: {6}}


def test_population_count_rejects_non_bits():
    with pytest.raises(ValueError):
        population_count([0, 2])


def test_population_count_rejects_odd_lengths():
    with pytest.raises(LengthMismatch):
        population_count([1, 0, 1])


def test_unsigned_range_checked():
    with pytest.raises(ValueError):
        Unsigned(2, 4)
    with pytest.raises(ValueError):
        Unsigned(0, 0)
    assert Unsigned(2, 3).plus(Unsigned(1, 1)) == Unsigned(3, 4)


@pytest.mark.parametrize("width, value", [(1.5, 1), (True, 1), (2, 1.0), (2, "1")])
def test_unsigned_fields_must_be_ints(width, value):
    with pytest.raises(TypeError):
        Unsigned(width, value)
