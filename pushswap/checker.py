"""Command that checks whether a list of operations sorts the given integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .parsing import InputError, parse_arguments
from .stacks import TwoStacks, parse_operation


def read_instructions(stream: TextIO) -> Iterator[str]:
    """Yield each newline-terminated line of ``stream``, newline included.

    A final line with no newline after it is dropped.
    """
    for line in stream:
        if line.endswith("\n"):
            yield line


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply the instructions to ``values`` and report whether they sort it.

    Each line names one operation, optionally followed by a single newline.
    An unknown instruction raises ValueError.
    """
    stacks = TwoStacks(values)
    for line in lines:
        text = line[:-1] if line.endswith("\n") else line
        stacks.apply(parse_operation(text))
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``.

    The verdict, like ``Error`` for bad input, goes to standard error. The
    exit status is always 0.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
        solved = check(values, read_instructions(sys.stdin))
    except (InputError, ValueError):
        sys.stderr.write("Error\n")
        return 0
    sys.stderr.write("OK\n" if solved else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())