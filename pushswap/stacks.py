"""The two stacks of the puzzle and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum


class Operation(str, Enum):
    """An instruction that rearranges the two stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def parse_operation(text: str) -> Operation:
    """Return the operation named by ``text``; raise ValueError if there is none."""
    try:
        return Operation(text)
    except ValueError:
        raise ValueError(f"unknown operation: {text!r}") from None


def is_sorted(values: Iterable[int]) -> bool:
    """True if ``values`` is non-empty and in non-decreasing order."""
    items = list(values)
    if not items:
        return False
    return all(left <= right for left, right in zip(items, items[1:]))


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(source: deque[int], destination: deque[int]) -> None:
    if source:
        destination.appendleft(source.popleft())


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    stack.rotate(1)


class TwoStacks:
    """Stacks ``a`` and ``b``, each with its top at index 0.

    Every operation applied is appended to ``history``.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.history: list[Operation] = []
        self._size = len(self.a)

    def __repr__(self) -> str:
        return f"TwoStacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, operation: Operation | str) -> None:
        """Carry out one operation and record it."""
        op = parse_operation(operation) if not isinstance(operation, Operation) else operation
        a, b = self.a, self.b
        if op is Operation.SA:
            _swap(a)
        elif op is Operation.SB:
            _swap(b)
        elif op is Operation.SS:
            _swap(a)
            _swap(b)
        elif op is Operation.PA:
            _push(b, a)
        elif op is Operation.PB:
            _push(a, b)
        elif op is Operation.RA:
            _rotate(a)
        elif op is Operation.RB:
            _rotate(b)
        elif op is Operation.RR:
            _rotate(a)
            _rotate(b)
        elif op is Operation.RRA:
            _reverse_rotate(a)
        elif op is Operation.RRB:
            _reverse_rotate(b)
        else:
            _reverse_rotate(a)
            _reverse_rotate(b)
        self.history.append(op)

    def run(self, operations: Sequence[Operation | str] | Iterable[Operation | str]) -> None:
        """Apply every operation in order."""
        for operation in operations:
            self.apply(operation)

    def is_solved(self) -> bool:
        """True if every value is back on ``a`` and ``a`` is in order."""
        return len(self.a) == self._size and is_sorted(self.a)