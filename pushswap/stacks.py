"""The two stacks of the puzzle and the operations that move values between them."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TextIO

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass
class MaxEntry:
    """The largest value found on a stack and its position from the top."""

    value: int
    pos: int


def find_pos_by_value(stack: Sequence[int], value: int) -> int:
    """Return the position of ``value`` in ``stack``, or -1 when it is absent."""
    for pos, item in enumerate(stack):
        if item == value:
            return pos
    return -1


def find_target(a_tail: Sequence[int], b: Iterable[int]) -> int:
    """Pick the value in ``b`` that the top of ``a_tail`` should sit on.

    That is the largest value in ``b`` below the first value of ``a_tail``;
    when there is none, the largest value of ``a_tail`` itself is returned.
    """
    a_val = a_tail[0]
    best = max((v for v in b if INT_MIN < v < a_val), default=INT_MIN)
    if best == INT_MIN:
        best = max((v for v in a_tail if v > INT_MIN), default=INT_MIN)
    return best


def max_on_stack(stack: Iterable[int]) -> MaxEntry:
    """Return the largest value on ``stack`` with its first position."""
    entry = MaxEntry(INT_MIN, 0)
    for pos, value in enumerate(stack):
        if value > entry.value:
            entry = MaxEntry(value, pos)
    return entry


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a count of recorded moves.

    Every recorded move is written, one name per line, to ``out``
    (standard output when ``out`` is None).
    """

    def __init__(self, values: Iterable[int] = (), out: Optional[TextIO] = None):
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.moves_count = 0
        self._out = out

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r}, moves_count={self.moves_count})"

    def _emit(self, name: str) -> None:
        self.moves_count += 1
        stream = self._out if self._out is not None else sys.stdout
        stream.write(name + "\n")

    # swaps

    def swap_a(self) -> bool:
        if len(self.a) <= 1:
            return False
        self.a[0], self.a[1] = self.a[1], self.a[0]
        self._emit("sa")
        return True

    def swap_b(self) -> bool:
        if len(self.b) <= 1:
            return False
        self.b[0], self.b[1] = self.b[1], self.b[0]
        self._emit("sb")
        return True

    def swap_both(self) -> bool:
        """Swap both tops; if ``b`` cannot be swapped, undo the swap of ``a``."""
        if not self.swap_a():
            return False
        if not self.swap_b():
            self.swap_a()
            self.moves_count -= 2
            return False
        return True

    # pushes

    def push_a(self) -> bool:
        if not self.b:
            return False
        self.a.insert(0, self.b.pop(0))
        self._emit("pa")
        return True

    def push_b(self) -> bool:
        if not self.a:
            return False
        self.b.insert(0, self.a.pop(0))
        self._emit("pb")
        return True

    # rotations

    def rotate_a(self, record: bool = True) -> bool:
        if len(self.a) <= 1:
            return False
        self.a.append(self.a.pop(0))
        if record:
            self._emit("ra")
        return True

    def rotate_b(self, record: bool = True) -> bool:
        if len(self.b) <= 1:
            return False
        self.b.append(self.b.pop(0))
        if record:
            self._emit("rb")
        return True

    def rotate_both(self) -> bool:
        self.rotate_a(False)
        self.rotate_b(False)
        self._emit("rr")
        return True

    def reverse_rotate_a(self, record: bool = True) -> bool:
        if len(self.a) <= 1:
            return False
        self.a.insert(0, self.a.pop())
        if record:
            self._emit("rra")
        return True

    def reverse_rotate_b(self, record: bool = True) -> bool:
        if len(self.b) <= 1:
            return False
        self.b.insert(0, self.b.pop())
        if record:
            self._emit("rrb")
        return True

    def reverse_rotate_both(self) -> bool:
        self.reverse_rotate_a(False)
        self.reverse_rotate_b(False)
        self._emit("rrr")
        return True

    def rotate_a_to_top(self, pos: int) -> None:
        """Bring position ``pos`` of ``a`` to the top the shorter way round."""
        if pos <= len(self.a) // 2:
            for _ in range(pos):
                self.rotate_a(True)
        else:
            for _ in range(len(self.a) - pos):
                self.reverse_rotate_a(True)

    def rotate_b_to_top(self, pos: int) -> None:
        """Bring position ``pos`` of ``b`` to the top the shorter way round."""
        if pos <= 0:
            return
        if pos <= len(self.b) // 2:
            for _ in range(pos):
                self.rotate_b(True)
        else:
            for _ in range(len(self.b) - pos):
                self.reverse_rotate_b(True)

    # queries

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` is in ascending order."""
        if self.b:
            return False
        return all(x <= y for x, y in zip(self.a, self.a[1:]))

    def min_position(self) -> int:
        """Position of the first smallest value of ``a``."""
        if not self.a:
            raise ValueError("stack a is empty")
        return min(range(len(self.a)), key=self.a.__getitem__)