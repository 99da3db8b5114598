"""Sorting strategies that drive the moves on the two stacks."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

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
from pushswap.finds import find_index, get_min_index
from pushswap.stacks import Stacks
from pushswap.validation import is_sorted

_Cost = Callable[[Sequence[int], Sequence[int], int], int]
_Apply = Callable[[Stacks, int, str], None]

# The order in which the strategies are tried matters: the first one whose
# cost equals the cheapest cost is the one carried out.
_A_TO_B: tuple[tuple[_Cost, _Apply], ...] = (
    (cost_rarb, apply_rarb),
    (cost_rrarrb, apply_rrarrb),
    (cost_rarrb, apply_rarrb),
    (cost_rrarb, apply_rrarb),
)
_B_TO_A: tuple[tuple[_Cost, _Apply], ...] = (
    (cost_rarb_a, apply_rarb),
    (cost_rarrb_a, apply_rarrb),
    (cost_rrarrb_a, apply_rrarrb),
    (cost_rrarb_a, apply_rrarb),
)


def bring_to_top(stacks: Stacks, index: int, size: int) -> None:
    """Rotate a the short way round until the element at ``index`` is on top."""
    if index <= size // 2:
        for _ in range(index):
            stacks.ra()
    else:
        for _ in range(size - index):
            stacks.rra()


def sort_three(stacks: Stacks) -> None:
    """Order the top three elements of a with at most two moves."""
    if len(stacks.a) < 3:
        raise ValueError("stack a needs at least three elements")
    top, middle, bottom = stacks.a[0], stacks.a[1], stacks.a[2]
    if top > middle and middle < bottom and top < bottom:
        stacks.sa()
    elif top > middle and middle > bottom:
        stacks.sa()
        stacks.rra()
    elif top > middle and middle < bottom and top > bottom:
        stacks.ra()
    elif top < middle and middle > bottom and top < bottom:
        stacks.sa()
        stacks.ra()
    elif top < middle and middle > bottom and top > bottom:
        stacks.rra()


def sort_small(stacks: Stacks) -> None:
    """Sort four or five elements: park the minima on b, sort three, bring back."""
    size = len(stacks.a)
    while size > 3:
        bring_to_top(stacks, get_min_index(stacks.a), size)
        stacks.pb()
        size -= 1
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def _carry_cheapest(
    stacks: Stacks,
    source: str,
    target: int,
    moves: tuple[tuple[_Cost, _Apply], ...],
) -> None:
    candidates = list(stacks.a if source == "a" else stacks.b)
    for value in candidates:
        for cost, apply in moves:
            if cost(stacks.a, stacks.b, value) == target:
                apply(stacks, value, source)
                return
    raise RuntimeError("no move reaches the cheapest cost")


def push_to_b(stacks: Stacks) -> None:
    """Move the cheapest elements of a onto b until three remain or a is sorted."""
    while len(stacks.a) > 3 and not is_sorted(stacks.a):
        target = cheapest_cost_ab(stacks.a, stacks.b)
        _carry_cheapest(stacks, "a", target, _A_TO_B)


def fill_b(stacks: Stacks) -> None:
    """Fill b in descending order, leaving a sorted."""
    for _ in range(2):
        if len(stacks.a) > 3 and not is_sorted(stacks.a):
            stacks.pb()
    if len(stacks.a) > 3 and not is_sorted(stacks.a):
        push_to_b(stacks)
    if not is_sorted(stacks.a):
        sort_three(stacks)


def refill_a(stacks: Stacks) -> None:
    """Move every element of b back into its place in a, cheapest first."""
    while stacks.b:
        target = cheapest_cost_ba(stacks.a, stacks.b)
        _carry_cheapest(stacks, "b", target, _B_TO_A)


def turk_sort(stacks: Stacks) -> None:
    """Sort a of any size through b, then rotate its minimum to the top."""
    fill_b(stacks)
    refill_a(stacks)
    smallest = min(stacks.a)
    position = find_index(stacks.a, smallest)
    if position < len(stacks.a) - position:
        while stacks.a[0] != smallest:
            stacks.ra()
    else:
        while stacks.a[0] != smallest:
            stacks.rra()


def choose_algorithm(stacks: Stacks) -> None:
    """Sort a with the strategy that suits its size."""
    size = len(stacks.a)
    if size > 5:
        turk_sort(stacks)
    elif size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size in (4, 5):
        sort_small(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Return the moves that sort ``values`` in ascending order."""
    items = list(values)
    if len(set(items)) != len(items):
        raise ValueError("values must be distinct")
    stacks = Stacks(items)
    if not is_sorted(stacks.a):
        choose_algorithm(stacks)
    return list(stacks.operations)