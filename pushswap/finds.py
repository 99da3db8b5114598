"""Lookups on a stack: positions, minimum, insertion points and ranks."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def find_index(stack: Sequence[int], value: int) -> int:
    """Return the position of ``value`` in ``stack``, counted from the top."""
    for position, item in enumerate(stack):
        if item == value:
            return position
    raise ValueError(f"{value} is not in the stack")


def get_min_index(stack: Sequence[int]) -> int:
    """Return the position of the first smallest element."""
    if not stack:
        raise ValueError("empty stack has no minimum")
    return min(enumerate(stack), key=lambda pair: pair[1])[0]


def find_place_a(stack: Sequence[int], value: int) -> int:
    """Return how many rotations of ascending stack a make room for ``value``.

    After rotating a that many times, pushing ``value`` on top keeps a in
    circular ascending order.
    """
    items = list(stack)
    if not items:
        raise ValueError("empty stack has no place")
    if items[-1] < value < items[0]:
        return 0
    if value > max(items) or value < min(items):
        return items.index(min(items))
    for position, (upper, lower) in enumerate(pairwise(items), start=1):
        if upper <= value <= lower:
            return position
    raise ValueError(f"no place for {value} in the stack")


def find_place_b(stack: Sequence[int], value: int) -> int:
    """Return how many rotations of descending stack b make room for ``value``.

    After rotating b that many times, pushing ``value`` on top keeps b in
    circular descending order.
    """
    items = list(stack)
    if not items:
        raise ValueError("empty stack has no place")
    if items[0] < value < items[-1]:
        return 0
    if value > max(items) or value < min(items):
        return items.index(max(items))
    for position, (upper, lower) in enumerate(pairwise(items), start=1):
        if upper >= value >= lower:
            return position
    raise ValueError(f"no place for {value} in the stack")


def rank_values(values: Sequence[int]) -> list[int]:
    """Return each value's rank in sorted order; equal values rank by position."""
    order = sorted(range(len(values)), key=lambda position: values[position])
    ranks = [0] * len(values)
    for rank, position in enumerate(order):
        ranks[position] = rank
    return ranks