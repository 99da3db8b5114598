# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small fixed set of operations. It prints the operations it uses, one per
line, on standard output.

## Operations

| Name  | Effect                                           |
|-------|--------------------------------------------------|
| `sa`  | swap the top two elements of `a`                 |
| `sb`  | swap the top two elements of `b`                 |
| `ss`  | `sa` and `sb` together                           |
| `pa`  | move the top of `b` onto `a`                     |
| `pb`  | move the top of `a` onto `b`                     |
| `ra`  | rotate `a` up: the top goes to the bottom        |
| `rb`  | rotate `b` up                                    |
| `rr`  | `ra` and `rb` together                           |
| `rra` | rotate `a` down: the bottom goes to the top      |
| `rrb` | rotate `b` down                                  |
| `rrr` | `rra` and `rrb` together                         |

A single operation that finds fewer elements than it needs (for example
`sa` on a stack of one) changes nothing and is not recorded. The
combined operations `ss`, `rr` and `rrr` are always recorded.

## Command line

```
pip install .
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The numbers can be given as separate arguments or as a single argument
separated by spaces. The first number is the top of stack `a`.

- Without arguments the command prints nothing.
- Input that is already sorted prints nothing.
- If an argument is not an integer (an optional `+` or `-` followed by
  digits), is outside the 32-bit signed range, or is repeated, the
  command prints `Error` on standard output and exits with status 1.

Two elements are sorted with one swap, three with at most two
operations, and four or five by pushing the smallest elements to `b`.
Longer inputs use a cost-based insertion strategy: every step moves
the element that needs the fewest rotations.

The command only prints the operations; it does not read operations
back or check that a list of operations sorts a stack.

## Library use

```python
from pushswap.algorithm import solve
from pushswap.stacks import Stacks
from pushswap.validation import validate_args, InvalidArgumentsError

moves = solve([3, 2, 1])          # list of operation names

stacks = Stacks([2, 1, 3])
stacks.sa()                       # stacks.a is now 1, 2, 3
stacks.operations                 # ["sa"]

values = validate_args(["3", "-7", "+12"])   # [3, -7, 12]
```

- `pushswap.stacks.Stacks` holds `a` and `b` as deques (top at index 0),
  one method per operation, and the list `operations` of the moves made.
- `pushswap.algorithm.solve` returns the moves that sort the values in
  ascending order and raises `ValueError` if values repeat.
- `pushswap.validation.validate_args` returns the arguments as integers
  and raises `InvalidArgumentsError` for input that the command would
  reject; `split_args` splits a single argument on spaces.
- `pushswap.finds` and `pushswap.cases` hold the position lookups and
  move-cost functions the sorting strategy is built from.

## Tests

```
pip install .[test]
pytest
```