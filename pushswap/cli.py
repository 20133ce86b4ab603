"""Command that prints the operations sorting the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .algorithm import solve
from .parsing import InputError, parse_arguments


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the arguments onto stack a.

    Invalid input prints ``Error`` on standard error. The exit status is
    always 0.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    operations = solve(values)
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())