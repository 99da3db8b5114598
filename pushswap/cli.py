"""Command line: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.algorithm import solve
from pushswap.validation import InvalidArgumentsError, split_args, validate_args


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line; print ``Error`` and return 1 on bad input."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    if not arguments:
        return 0
    try:
        values = validate_args(split_args(arguments))
    except InvalidArgumentsError:
        sys.stdout.write("Error\n")
        return 1
    operations = solve(values)
    if operations:
        sys.stdout.write("\n".join(operations) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())