"""The sorting strategy: a list of operations that leaves stack a in order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .stacks import Operation, TwoStacks, is_sorted


def _is_above_median(position: int, size: int) -> bool:
    return position < size // 2


def _move_to_top(
    stacks: TwoStacks,
    stack: deque[int],
    value: int,
    forward: Operation,
    backward: Operation,
    use_forward: bool,
) -> None:
    operation = forward if use_forward else backward
    while stack[0] != value:
        stacks.apply(operation)


def _min_on_top(stacks: TwoStacks) -> None:
    """Rotate a until its smallest value is on top, taking the shorter way."""
    smallest = min(stacks.a)
    position = stacks.a.index(smallest)
    _move_to_top(
        stacks,
        stacks.a,
        smallest,
        Operation.RA,
        Operation.RRA,
        position <= len(stacks.a) // 2,
    )


def _closest_below(value: int, stack: Iterable[int]) -> int:
    """The largest value under ``value``, or the largest of all if none is."""
    items = list(stack)
    smaller = [item for item in items if item < value]
    return max(smaller) if smaller else max(items)


def _closest_above(value: int, stack: Iterable[int]) -> int:
    """The smallest value over ``value``, or the smallest of all if none is."""
    items = list(stack)
    larger = [item for item in items if item > value]
    return min(larger) if larger else min(items)


def _push_price(pos_a: int, size_a: int, pos_b: int, size_b: int) -> int:
    above_a = _is_above_median(pos_a, size_a)
    above_b = _is_above_median(pos_b, size_b)
    price = pos_a if above_a else size_a - pos_a
    price += pos_b if above_b else size_b - pos_b
    if above_a and above_b:
        price -= min(pos_a, pos_b)
    elif not above_a and not above_b:
        price -= min(size_a - pos_a, size_b - pos_b)
    return price


def _cheapest_move(stacks: TwoStacks) -> tuple[int, int]:
    """The value of a that is cheapest to push, and its target in b."""
    size_a, size_b = len(stacks.a), len(stacks.b)
    positions_b = {value: index for index, value in enumerate(stacks.b)}
    best: tuple[int, int] | None = None
    best_price = 0
    for pos_a, value in enumerate(stacks.a):
        target = _closest_below(value, stacks.b)
        price = _push_price(pos_a, size_a, positions_b[target], size_b)
        if best is None or price < best_price:
            best = (value, target)
            best_price = price
    assert best is not None
    return best


def _cheapest_on_top(stacks: TwoStacks) -> None:
    cheapest, target = _cheapest_move(stacks)
    above_a = _is_above_median(stacks.a.index(cheapest), len(stacks.a))
    above_b = _is_above_median(stacks.b.index(target), len(stacks.b))
    if above_a and above_b:
        while stacks.a[0] != cheapest and stacks.b[0] != target:
            stacks.apply(Operation.RR)
    elif not above_a and not above_b:
        while stacks.a[0] != cheapest and stacks.b[0] != target:
            stacks.apply(Operation.RRR)
    _move_to_top(
        stacks,
        stacks.a,
        cheapest,
        Operation.RA,
        Operation.RRA,
        _is_above_median(stacks.a.index(cheapest), len(stacks.a)),
    )
    _move_to_top(
        stacks,
        stacks.b,
        target,
        Operation.RB,
        Operation.RRB,
        _is_above_median(stacks.b.index(target), len(stacks.b)),
    )


def _sort_two(stacks: TwoStacks) -> None:
    if stacks.a[0] > stacks.a[1]:
        stacks.apply(Operation.SA)


def sort_three(stacks: TwoStacks) -> None:
    """Order the three values on top of a with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("sort_three needs at least three values on stack a")
    a, b, c = stacks.a[0], stacks.a[1], stacks.a[2]
    if a > b and a > c and c > b:
        stacks.apply(Operation.RA)
    elif a < b and c < b and c > a:
        stacks.run([Operation.RRA, Operation.SA])
    elif a > b and b < c:
        stacks.apply(Operation.SA)
    elif b > a and b > c:
        stacks.apply(Operation.RRA)
    elif a > b and a > c:
        stacks.run([Operation.SA, Operation.RRA])


def sort_small(stacks: TwoStacks) -> None:
    """Sort a stack of three to five values by parking the smallest on b."""
    while len(stacks.a) > 3:
        _min_on_top(stacks)
        stacks.apply(Operation.PB)
    sort_three(stacks)
    while stacks.b:
        stacks.apply(Operation.PA)


def big_sort(stacks: TwoStacks) -> None:
    """Sort a stack of more than five values by cheapest-move insertion."""
    stacks.apply(Operation.PB)
    stacks.apply(Operation.PB)
    while len(stacks.a) > 3:
        _cheapest_on_top(stacks)
        stacks.apply(Operation.PB)
    sort_three(stacks)
    while stacks.b:
        target = _closest_above(stacks.b[0], stacks.a)
        position = stacks.a.index(target)
        _move_to_top(
            stacks,
            stacks.a,
            target,
            Operation.RA,
            Operation.RRA,
            position <= len(stacks.a) // 2,
        )
        stacks.apply(Operation.PA)
    _min_on_top(stacks)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` onto stack a."""
    stacks = TwoStacks(values)
    if is_sorted(stacks.a):
        return []
    size = len(stacks.a)
    if size <= 1:
        return []
    if size == 2:
        _sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size in (4, 5):
        sort_small(stacks)
    else:
        big_sort(stacks)
    return list(stacks.history)