"""Reading the list of integers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_NUMBER = re.compile(r"[+-]?[0-9]*")


class InputError(ValueError):
    """The arguments do not form a valid list of distinct integers."""


def _numeric_value(text: str) -> int:
    # A leading '+' is accepted but not skipped, so the digits after it
    # are never read and the value is 0.
    body = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if body.startswith("-"):
        sign = -1
        body = body[1:]
        if body[:1] in ("-", "+"):
            raise InputError(f"invalid integer: {text!r}")
    elif body.startswith("+") and body[1:2] in ("-", "+"):
        raise InputError(f"invalid integer: {text!r}")
    digits = re.match(r"[0-9]*", body).group()
    return sign * int(digits) if digits else 0


def _check_format(text: str) -> None:
    if not _NUMBER.fullmatch(text):
        raise InputError(f"invalid integer: {text!r}")


def _check_range(value: int, text: str) -> None:
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"integer out of range: {text!r}")


def parse_integer(text: str) -> int:
    """Parse one argument as a 32-bit signed integer."""
    _check_format(text)
    value = _numeric_value(text)
    _check_range(value, text)
    return value


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the starting contents of stack a.

    A single argument holds space-separated numbers; several arguments hold
    one number each. Duplicates and malformed numbers raise InputError.
    """
    if not args:
        return []
    if len(args) == 1:
        if args[0] == "":
            raise InputError("empty argument")
        tokens = [token for token in args[0].split(" ") if token]
    else:
        tokens = list(args)

    for token in tokens:
        _check_format(token)
    values = [_numeric_value(token) for token in tokens]

    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)

    for value, token in zip(values, tokens):
        _check_range(value, token)
    return values