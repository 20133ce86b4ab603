# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations, and check whether a given sequence of operations sorts a
list.

## Operations

| Name  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the two top elements of `a`                  |
| `sb`  | swap the two top elements of `b`                  |
| `ss`  | `sa` and `sb` together                            |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` up: the top element becomes the last   |
| `rb`  | rotate `b` up                                     |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate `a` down: the last element becomes the top |
| `rrb` | rotate `b` down                                   |
| `rrr` | `rra` and `rrb` together                          |

An operation on an empty stack, or a swap on a stack with fewer than two
elements, does nothing. A list is solved when every value is back on `a` and
`a` is in ascending order from top to bottom.

## Installation

```
pip install .
```

## Command line

Print a sequence of operations that sorts the numbers, one per line:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

Numbers are given either as separate arguments or as a single argument
separated by spaces. The first number is the top of stack `a`. Input that is
not an integer, falls outside the 32-bit signed range or repeats a value
prints `Error` on standard error, as does a single empty argument. An input
that is already sorted, or no arguments at all, prints nothing. A number may
carry a leading `-` or `+`; a leading `+` is accepted but the number is then
read as 0.

Lists of up to three values are sorted directly, four or five by moving the
smallest values to `b`, and longer lists by repeatedly pushing the element of
`a` that is cheapest to place into `b`, then moving everything back.

Check a sequence of operations read from standard input:

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

The checker writes `OK` on standard error when the operations sort the
numbers and `KO` otherwise, and `Error` for bad numbers or a line that is not
a known operation. Only lines ending in a newline are read; a final line
without one is ignored. Both commands always exit with status 0.

## Library

```python
from pushswap.algorithm import solve
from pushswap.stacks import TwoStacks

operations = solve([5, 1, 4, 2, 3])
stacks = TwoStacks([5, 1, 4, 2, 3])
stacks.run(operations)
assert stacks.is_solved()
```

- `pushswap.stacks`: the `Operation` enum, `TwoStacks` (with `apply`, `run`,
  `is_solved` and the list of applied operations in `history`),
  `parse_operation` and `is_sorted`.
- `pushswap.parsing`: `parse_arguments` turns command-line style arguments
  into a list of integers and `parse_integer` reads one; both raise
  `InputError` on bad input.
- `pushswap.algorithm`: `solve`, plus `sort_three`, `sort_small` and
  `big_sort`, which act on a `TwoStacks` in place.
- `pushswap.checker`: `check` applies instruction lines to a list of values
  and reports whether the result is sorted; `read_instructions` yields the
  newline-terminated lines of a stream.

## Running the tests

```
pip install .[test]
pytest
```