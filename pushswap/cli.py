"""Command that prints the moves sorting the given numbers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parse import ParseError, init_stacks, set_args, validate_args
from .sorting import init_sorting


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the numbers in ``argv`` and print each move on its own line.

    A single argument is read as a space-separated list. Invalid input
    writes ``Error`` to standard error.
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    args = set_args(argv, len(argv) == 1)
    try:
        if not validate_args(args):
            raise ParseError("invalid argument")
        stacks = init_stacks(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 0
    if stacks.is_sorted():
        return 0
    init_sorting(stacks)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())