"""Reading the command-line numbers into a pair of stacks."""

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence, TextIO

from .stacks import INT_MAX, INT_MIN, Stacks

_NUMBER = re.compile(r"[+-]?[0-9]+")
_LEADING_NUMBER = re.compile(r"[ \t\v\r\n\f]*([+-]?)([0-9]*)")


class ParseError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def set_args(argv: Sequence[str], split: bool) -> list[str]:
    """Return the number arguments.

    With ``split`` the first argument is one string of numbers separated
    by spaces; otherwise every argument is a number on its own.
    """
    if not split:
        return list(argv)
    if not argv:
        return []
    return [part for part in argv[0].split(" ") if part]


def validate_args(args: Iterable[str]) -> bool:
    """True when every argument is an optional sign followed by digits."""
    return all(_NUMBER.fullmatch(arg) for arg in args)


def parse_int(text: str) -> int:
    """Read a leading integer, skipping leading whitespace; 0 if there is none."""
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def init_stacks(args: Iterable[str], out: Optional[TextIO] = None) -> Stacks:
    """Build stacks with ``args`` on ``a``, top first.

    Raises ParseError on a value outside the 32-bit range, a repeated
    value, or when there are no values at all.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        n = parse_int(arg)
        if not INT_MIN <= n <= INT_MAX:
            raise ParseError(f"value out of range: {arg!r}")
        if n in seen:
            raise ParseError(f"duplicate value: {arg!r}")
        seen.add(n)
        values.append(n)
    if not values:
        raise ParseError("no values given")
    return Stacks(values, out)