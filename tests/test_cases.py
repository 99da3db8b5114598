from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.cases import (
    apply_rarb,
    apply_rarrb,
    apply_rrarb,
    apply_rrarrb,
    cheapest_cost_ab,
    cheapest_cost_ba,
    cost_rarb,
    cost_rarb_a,
    cost_rarrb,
    cost_rarrb_a,
    cost_rrarb,
    cost_rrarb_a,
    cost_rrarrb,
    cost_rrarrb_a,
)
from pushswap.stacks import Stacks

A_TO_B = [
    (cost_rarb, apply_rarb),
    (cost_rrarrb, apply_rrarrb),
    (cost_rrarb, apply_rrarb),
    (cost_rarrb, apply_rarrb),
]
B_TO_A = [
    (cost_rarb_a, apply_rarb),
    (cost_rrarrb_a, apply_rrarrb),
    (cost_rrarb_a, apply_rrarb),
    (cost_rarrb_a, apply_rarrb),
]


def _circular_ascending(seq):
    items = list(seq)
    start = items.index(min(items))
    rotated = items[start:] + items[:start]
    return rotated == sorted(rotated)


def _circular_descending(seq):
    items = list(seq)
    start = items.index(max(items))
    rotated = items[start:] + items[:start]
    return rotated == sorted(rotated, reverse=True)


def _make(a, b):
    stacks = Stacks(a)
    stacks.b = deque(b)
    return stacks


@st.composite
def _a_to_b(draw):
    values = draw(st.lists(st.integers(-500, 500), unique=True, min_size=2, max_size=10))
    split = draw(st.integers(1, len(values) - 1))
    a = values[:split]
    b = sorted(values[split:], reverse=True)
    shift = draw(st.integers(0, len(b) - 1))
    return a, b[shift:] + b[:shift]


@st.composite
def _b_to_a(draw):
    values = draw(st.lists(st.integers(-500, 500), unique=True, min_size=2, max_size=10))
    split = draw(st.integers(1, len(values) - 1))
    a = sorted(values[:split])
    b = values[split:]
    shift = draw(st.integers(0, len(a) - 1))
    return a[shift:] + a[:shift], b


@pytest.mark.parametrize("cost, apply", A_TO_B)
@given(case=_a_to_b())
def test_apply_from_a_uses_exactly_cost_moves(cost, apply, case):
    a, b = case
    for value in a:
        stacks = _make(a, b)
        expected = cost(a, b, value)
        apply(stacks, value, "a")
        assert len(stacks.operations) == expected + 1
        assert stacks.operations[-1] == "pb"
        assert stacks.b[0] == value
        assert value not in stacks.a
        assert _circular_descending(stacks.b)
        assert sorted(list(stacks.a) + list(stacks.b)) == sorted(a + b)


@pytest.mark.parametrize("cost, apply", B_TO_A)
@given(case=_b_to_a())
def test_apply_from_b_uses_exactly_cost_moves(cost, apply, case):
    a, b = case
    for value in b:
        stacks = _make(a, b)
        expected = cost(a, b, value)
        apply(stacks, value, "b")
        assert len(stacks.operations) == expected + 1
        assert stacks.operations[-1] == "pa"
        assert stacks.a[0] == value
        assert value not in stacks.b
        assert _circular_ascending(stacks.a)
        assert sorted(list(stacks.a) + list(stacks.b)) == sorted(a + b)


@given(case=_a_to_b())
def test_cheapest_cost_ab_is_attained_lower_bound(case):
    a, b = case
    best = cheapest_cost_ab(a, b)
    costs = [cost(a, b, value) for value in a for cost, _ in A_TO_B]
    assert all(best <= c for c in costs)
    assert best in costs


@given(case=_b_to_a())
def test_cheapest_cost_ba_is_attained_lower_bound(case):
    a, b = case
    best = cheapest_cost_ba(a, b)
    costs = [cost(a, b, value) for value in b for cost, _ in B_TO_A]
    assert all(best <= c for c in costs)
    assert best in costs


def test_cheapest_on_empty_stack_raises():
    with pytest.raises(ValueError):
        cheapest_cost_ab([], [1])
    with pytest.raises(ValueError):
        cheapest_cost_ba([1], [])


@pytest.mark.parametrize("apply", [apply_rarb, apply_rrarrb, apply_rrarb, apply_rarrb])
def test_apply_rejects_unknown_source(apply):
    stacks = _make([1, 2], [3])
    with pytest.raises(ValueError):
        apply(stacks, 1, "c")
    assert stacks.operations == []