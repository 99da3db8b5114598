"""Parsing and checking of the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = " \t\n\v\f\r"
_DIGITS = "0123456789"


class InvalidArgumentsError(ValueError):
    """Raised when the arguments are not distinct integers in int range."""


def parse_long(text: str) -> int:
    """Read an optionally signed decimal prefix after leading whitespace.

    Anything that does not fit that form ends the number; no digits gives 0.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if char not in _DIGITS:
            break
        result = result * 10 + int(char)
    return sign * result


def parse_int(text: str) -> int:
    """Like :func:`parse_long`, wrapped to a 32-bit signed integer."""
    return (parse_long(text) - INT_MIN) % 2**32 + INT_MIN


def is_number(text: str) -> bool:
    """True for an optional sign followed by one or more ASCII digits."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return bool(body) and all(char in _DIGITS for char in body)


def in_int_range(text: str) -> bool:
    """True if the parsed value fits a 32-bit signed integer."""
    return INT_MIN <= parse_long(text) <= INT_MAX


def has_duplicates(args: Iterable[str]) -> bool:
    """True if two arguments parse to the same value."""
    seen: set[int] = set()
    for arg in args:
        value = parse_long(arg)
        if value in seen:
            return True
        seen.add(value)
    return False


def validate_args(args: Sequence[str]) -> list[int]:
    """Return the arguments as integers, or raise InvalidArgumentsError."""
    for arg in args:
        if not is_number(arg) or not in_int_range(arg):
            raise InvalidArgumentsError(f"not a valid integer: {arg!r}")
    if has_duplicates(args):
        raise InvalidArgumentsError("duplicate values")
    return [parse_int(arg) for arg in args]


def is_sorted(values: Iterable[int]) -> bool:
    """True if the values never decrease."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def split_args(argv: Sequence[str]) -> list[str]:
    """Turn the arguments into number strings.

    A single argument is split on spaces; several are taken as they are.
    """
    if len(argv) == 1:
        return [word for word in argv[0].split(" ") if word]
    return list(argv)