"""Move costs for carrying one value between the stacks, and the moves themselves."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.finds import find_index, find_place_a, find_place_b
from pushswap.stacks import Stacks


def _reverse_distance(size: int, position: int) -> int:
    return size - position if position else 0


def cost_rarb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves to bring ``value`` from a to b rotating both stacks forward."""
    return max(find_place_b(b, value), find_index(a, value))


def cost_rrarrb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves to bring ``value`` from a to b reverse-rotating both stacks."""
    return max(
        _reverse_distance(len(b), find_place_b(b, value)),
        _reverse_distance(len(a), find_index(a, value)),
    )


def cost_rrarb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves to bring ``value`` from a to b reverse-rotating a, rotating b."""
    return _reverse_distance(len(a), find_index(a, value)) + find_place_b(b, value)


def cost_rarrb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves to bring ``value`` from a to b rotating a, reverse-rotating b."""
    return _reverse_distance(len(b), find_place_b(b, value)) + find_index(a, value)


def cost_rarb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves to bring ``value`` from b to a rotating both stacks forward."""
    return max(find_place_a(a, value), find_index(b, value))


def cost_rrarrb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves to bring ``value`` from b to a reverse-rotating both stacks."""
    return max(
        _reverse_distance(len(a), find_place_a(a, value)),
        _reverse_distance(len(b), find_index(b, value)),
    )


def cost_rarrb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves to bring ``value`` from b to a rotating a, reverse-rotating b."""
    return _reverse_distance(len(b), find_index(b, value)) + find_place_a(a, value)


def cost_rrarb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves to bring ``value`` from b to a reverse-rotating a, rotating b."""
    return _reverse_distance(len(a), find_place_a(a, value)) + find_index(b, value)


def _check_source(source: str) -> None:
    if source not in ("a", "b"):
        raise ValueError(f"source must be 'a' or 'b', not {source!r}")


def apply_rarb(stacks: Stacks, value: int, source: str) -> None:
    """Carry ``value`` from ``source`` to the other stack rotating both forward."""
    _check_source(source)
    if source == "a":
        while stacks.a[0] != value and find_place_b(stacks.b, value) > 0:
            stacks.rr()
        while stacks.a[0] != value:
            stacks.ra()
        while find_place_b(stacks.b, value) > 0:
            stacks.rb()
        stacks.pb()
    else:
        while stacks.b[0] != value and find_place_a(stacks.a, value) > 0:
            stacks.rr()
        while stacks.b[0] != value:
            stacks.rb()
        while find_place_a(stacks.a, value) > 0:
            stacks.ra()
        stacks.pa()


def apply_rrarrb(stacks: Stacks, value: int, source: str) -> None:
    """Carry ``value`` from ``source`` to the other stack reverse-rotating both."""
    _check_source(source)
    if source == "a":
        while stacks.a[0] != value and find_place_b(stacks.b, value) > 0:
            stacks.rrr()
        while stacks.a[0] != value:
            stacks.rra()
        while find_place_b(stacks.b, value) > 0:
            stacks.rrb()
        stacks.pb()
    else:
        while stacks.b[0] != value and find_place_a(stacks.a, value) > 0:
            stacks.rrr()
        while stacks.b[0] != value:
            stacks.rrb()
        while find_place_a(stacks.a, value) > 0:
            stacks.rra()
        stacks.pa()


def apply_rrarb(stacks: Stacks, value: int, source: str) -> None:
    """Carry ``value`` from ``source`` reverse-rotating a and rotating b."""
    _check_source(source)
    if source == "a":
        while stacks.a[0] != value:
            stacks.rra()
        while find_place_b(stacks.b, value) > 0:
            stacks.rb()
        stacks.pb()
    else:
        while find_place_a(stacks.a, value) > 0:
            stacks.rra()
        while stacks.b[0] != value:
            stacks.rb()
        stacks.pa()


def apply_rarrb(stacks: Stacks, value: int, source: str) -> None:
    """Carry ``value`` from ``source`` rotating a and reverse-rotating b."""
    _check_source(source)
    if source == "a":
        while stacks.a[0] != value:
            stacks.ra()
        while find_place_b(stacks.b, value) > 0:
            stacks.rrb()
        stacks.pb()
    else:
        while find_place_a(stacks.a, value) > 0:
            stacks.ra()
        while stacks.b[0] != value:
            stacks.rrb()
        stacks.pa()


def cheapest_cost_ab(a: Sequence[int], b: Sequence[int]) -> int:
    """Smallest cost of moving any element of a onto b."""
    if not a:
        raise ValueError("stack a is empty")
    return min(
        cost(a, b, value)
        for value in a
        for cost in (cost_rrarrb, cost_rarb, cost_rarrb, cost_rrarb)
    )


def cheapest_cost_ba(a: Sequence[int], b: Sequence[int]) -> int:
    """Smallest cost of moving any element of b onto a."""
    if not b:
        raise ValueError("stack b is empty")
    return min(
        cost(a, b, value)
        for value in b
        for cost in (cost_rrarrb_a, cost_rarb_a, cost_rarrb_a, cost_rrarb_a)
    )