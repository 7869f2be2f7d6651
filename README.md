# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a fixed set of
operations. `push-swap` prints a sequence of operations that sorts the
numbers, one per line; `push-swap-checker` applies such a sequence and says
whether the result is sorted.

## Operations

| Op    | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up (top goes to the bottom)        |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down (bottom comes to the top)     |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

The first number given is the top of `a`; sorted means `b` is empty and `a`
is in ascending order from the top.

## Installation

```
pip install .
```

## Usage

Give the numbers as separate arguments, or as one argument with the numbers
separated by spaces:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

Each argument has to be an integer (an optional `+` or `-` followed by
digits) that fits in 32 bits, and no number may appear twice; at least one
number is needed. Otherwise `Error` is written to standard error. Input that
is already sorted prints nothing. The exit status is 0 in every case.

Stacks of two, three or five numbers are sorted by fixed small routines;
other sizes push values to `b` choosing at each step the one that needs the
fewest rotations, then bring them back in order.

To check a sequence of operations, pipe it to the checker with the same
numbers:

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

The checker reads one operation per line from standard input, applies each
known one and ignores any other line. It then prints `OK` if the stacks are
sorted and `KO` if not. Invalid numbers write `Error` to standard error with
exit status 1; with no numbers at all it does nothing.

Both commands can also be run as `python -m pushswap.cli` and
`python -m pushswap.checker`.

## Library

```python
import io
from pushswap.parse import set_args, validate_args, init_stacks
from pushswap.sorting import init_sorting

out = io.StringIO()
args = set_args(["3 1 2"], split=True)
if validate_args(args):
    stacks = init_stacks(args, out)
    init_sorting(stacks)
    print(out.getvalue())
    print(stacks.a, stacks.moves_count)
```

- `pushswap.stacks.Stacks` holds the lists `a` and `b` (top first) and
  `moves_count`, and has a method for every operation (`swap_a`, `push_b`,
  `rotate_a`, `reverse_rotate_both`, ...), plus `rotate_a_to_top`,
  `rotate_b_to_top`, `is_sorted` and `min_position`. Each recorded move is
  written to the stream it was given, or to standard output when none was.
- `pushswap.parse` has `set_args`, `validate_args`, `parse_int` and
  `init_stacks`, which raises `ParseError` on out-of-range, repeated or
  missing values.
- `pushswap.sorting` has `init_sorting`, `handle_small_cases`, and the cost
  helpers `calc_cost`, `find_cheapest_move` and `execute_rotations`.
- `pushswap.checker` has `exec_step` and `read_steps`.

## Tests

```
pip install ".[test]"
pytest
```