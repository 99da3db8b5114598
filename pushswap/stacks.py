"""The two stacks of the puzzle and the eleven moves allowed on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _swap(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    first = stack.popleft()
    second = stack.popleft()
    stack.appendleft(first)
    stack.appendleft(second)
    return True


def _rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


def _push(source: deque[int], target: deque[int]) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


class Stacks:
    """Stacks ``a`` and ``b`` (top at index 0) with a log of the moves made.

    A single move that finds too few elements to act on changes nothing and
    is not logged; the combined moves ``ss``, ``rr`` and ``rrr`` are always
    logged.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _log_if(self, done: bool, name: str) -> None:
        if done:
            self.operations.append(name)

    def sa(self) -> None:
        """Swap the top two elements of a."""
        self._log_if(_swap(self.a), "sa")

    def sb(self) -> None:
        """Swap the top two elements of b."""
        self._log_if(_swap(self.b), "sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self.operations.append("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._log_if(_push(self.b, self.a), "pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._log_if(_push(self.a, self.b), "pb")

    def ra(self) -> None:
        """Rotate a: the top element goes to the bottom."""
        self._log_if(_rotate(self.a), "ra")

    def rb(self) -> None:
        """Rotate b: the top element goes to the bottom."""
        self._log_if(_rotate(self.b), "rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)
        self.operations.append("rr")

    def rra(self) -> None:
        """Reverse-rotate a: the bottom element goes to the top."""
        self._log_if(_reverse_rotate(self.a), "rra")

    def rrb(self) -> None:
        """Reverse-rotate b: the bottom element goes to the top."""
        self._log_if(_reverse_rotate(self.b), "rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.operations.append("rrr")