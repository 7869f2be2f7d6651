"""Command that applies moves read from standard input and checks the result."""

from __future__ import annotations

import sys
from typing import Callable, Iterator, Optional, Sequence, TextIO

from .parse import ParseError, init_stacks, set_args, validate_args
from .stacks import Stacks


class _Discard:
    """A text sink for the move names the stacks would otherwise print."""

    def write(self, text: str) -> int:
        return len(text)


_STEPS: dict[str, Callable[[Stacks], object]] = {
    "sa\n": lambda s: s.swap_a(),
    "sb\n": lambda s: s.swap_b(),
    "ss\n": lambda s: (s.swap_a(), s.swap_b()),
    "pa\n": lambda s: s.push_a(),
    "pb\n": lambda s: s.push_b(),
    "ra\n": lambda s: s.rotate_a(False),
    "rb\n": lambda s: s.rotate_b(False),
    "rr\n": lambda s: (s.rotate_a(False), s.rotate_b(False)),
    "rra\n": lambda s: s.reverse_rotate_a(False),
    "rrb\n": lambda s: s.reverse_rotate_b(False),
    "rrr\n": lambda s: (s.reverse_rotate_a(False), s.reverse_rotate_b(False)),
}


def exec_step(step: str, stacks: Stacks) -> bool:
    """Apply one newline-terminated move; False if it is not a known move."""
    action = _STEPS.get(step)
    if action is None:
        return False
    action(stacks)
    return True


def read_steps(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream``, newlines kept, until end of input."""
    yield from iter(stream.readline, "")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Apply the moves on standard input to the given numbers.

    Prints ``OK`` when they end sorted and ``KO`` otherwise; invalid
    numbers write ``Error`` to standard error and give exit status 1.
    Unknown moves are ignored.
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    if not argv:
        return 0
    args = set_args(argv, len(argv) == 1)
    try:
        if not validate_args(args):
            raise ParseError("invalid argument")
        stacks = init_stacks(args, _Discard())
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    for step in read_steps(sys.stdin):
        exec_step(step, stacks)
    sys.stdout.write("OK\n" if stacks.is_sorted() else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())