"""Sorting stack ``a`` with the fewest moves the cost heuristic can find."""

from __future__ import annotations

from dataclasses import dataclass

from .stacks import INT_MAX, Stacks, find_pos_by_value, find_target, max_on_stack


@dataclass
class Cost:
    """What it takes to bring one value of ``a`` over its target in ``b``."""

    cost_a: int = 0
    cost_b: int = 0
    total: int = 0
    pos_a: int = 0
    pos_b: int = 0
    target: int = 0


def _forward(pos: int, size: int) -> bool:
    return pos <= size // 2


def _distance(pos: int, size: int) -> int:
    return pos if _forward(pos, size) else size - pos


def calc_cost(stacks: Stacks, pos_a: int, target_b: int) -> Cost:
    """Cost of moving position ``pos_a`` of ``a`` above ``target_b`` in ``b``."""
    size_a, size_b = len(stacks.a), len(stacks.b)
    pos_b = find_pos_by_value(stacks.b, target_b)
    cost_a = _distance(pos_a, size_a)
    cost_b = 0 if pos_b < 0 else _distance(pos_b, size_b)
    if pos_b >= 0 and _forward(pos_a, size_a) == _forward(pos_b, size_b):
        total = max(cost_a, cost_b)
    else:
        total = cost_a + cost_b
    return Cost(cost_a, cost_b, total, pos_a, pos_b, target_b)


def find_cheapest_move(stacks: Stacks) -> Cost:
    """The first position of ``a`` with the lowest total cost."""
    best = Cost(total=INT_MAX)
    for pos in range(len(stacks.a)):
        target = find_target(stacks.a[pos:], stacks.b)
        current = calc_cost(stacks, pos, target)
        if current.total < best.total:
            best = current
    return best


def execute_rotations(stacks: Stacks, cost: Cost) -> None:
    """Rotate both stacks so the chosen values are on top, sharing moves."""
    size_a, size_b = len(stacks.a), len(stacks.b)
    forward_a = _forward(cost.pos_a, size_a)
    forward_b = _forward(cost.pos_b, size_b)
    n_a = cost.pos_a if forward_a else size_a - cost.pos_a
    n_b = cost.pos_b if forward_b else size_b - cost.pos_b
    if forward_a == forward_b:
        shared = max(0, min(n_a, n_b))
        for _ in range(shared):
            if forward_a:
                stacks.rotate_both()
            else:
                stacks.reverse_rotate_both()
        n_a -= shared
        n_b -= shared
    for _ in range(n_a):
        if forward_a:
            stacks.rotate_a(True)
        else:
            stacks.reverse_rotate_a(True)
    for _ in range(n_b):
        if forward_b:
            stacks.rotate_b(True)
        else:
            stacks.reverse_rotate_b(True)


def _sort_two(stacks: Stacks) -> None:
    if stacks.a[0] > stacks.a[1]:
        stacks.swap_a()


def _sort_three(stacks: Stacks) -> None:
    if len(stacks.a) < 2:
        return
    a, b, c = stacks.a[:3]
    if a > b and b < c and a < c:
        stacks.swap_a()
    elif a > b and b > c:
        stacks.swap_a()
        stacks.reverse_rotate_a(True)
    elif a > b and b < c and a > c:
        stacks.rotate_a(True)
    elif a < b and b > c and a < c:
        stacks.swap_a()
        stacks.rotate_a(True)
    elif a < b and b > c and a > c:
        stacks.reverse_rotate_a(True)


def _sort_five(stacks: Stacks) -> None:
    if len(stacks.a) != 5:
        return
    for _ in range(2):
        stacks.rotate_a_to_top(stacks.min_position())
        stacks.push_b()
    _sort_three(stacks)
    stacks.push_a()
    stacks.push_a()


def handle_small_cases(stacks: Stacks | None) -> bool:
    """Sort stacks of 0, 1, 2, 3 or 5 values; False for any other size."""
    if stacks is None or not stacks.a:
        return True
    size = len(stacks.a)
    if size <= 1:
        return True
    if size == 2:
        _sort_two(stacks)
        return True
    if size == 3:
        _sort_three(stacks)
        return True
    if size == 5:
        _sort_five(stacks)
        return True
    return False


def _turk(stacks: Stacks) -> None:
    while stacks.a:
        cheapest = find_cheapest_move(stacks)
        execute_rotations(stacks, cheapest)
        stacks.push_b()


def _push_back_from_b(stacks: Stacks) -> None:
    while stacks.b:
        largest = max_on_stack(stacks.b)
        stacks.rotate_b_to_top(largest.pos)
        stacks.push_a()


def init_sorting(stacks: Stacks) -> bool:
    """Sort ``a`` in ascending order, recording every move."""
    if handle_small_cases(stacks):
        return True
    stacks.push_b()
    stacks.push_b()
    _turk(stacks)
    _push_back_from_b(stacks)
    stacks.rotate_a_to_top(stacks.min_position())
    return True