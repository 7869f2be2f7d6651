import io

import pytest

from pushswap.stacks import (
    INT_MIN,
    MaxEntry,
    Stacks,
    find_pos_by_value,
    find_target,
    max_on_stack,
)

VALUES = [3, 1, 2, 5, 4]


def make(values=VALUES):
    out = io.StringIO()
    return Stacks(values, out), out


def test_swap_a_exchanges_top_two():
    s, out = make()
    assert s.swap_a() is True
    assert s.a[:2] == [VALUES[1], VALUES[0]]
    assert s.a[2:] == VALUES[2:]
    assert out.getvalue() == "sa\n"
    assert s.moves_count == 1


def test_swap_a_twice_restores():
    s, out = make()
    s.swap_a()
    s.swap_a()
    assert s.a == VALUES
    assert out.getvalue() == "sa\nsa\n"


def test_swap_on_short_stack_does_nothing():
    s, out = make([7])
    assert s.swap_a() is False
    assert s.swap_b() is False
    assert out.getvalue() == ""
    assert s.moves_count == 0


def test_swap_both_undoes_when_b_too_short():
    s, out = make()
    assert s.swap_both() is False
    assert s.a == VALUES
    assert s.moves_count == 0
    assert out.getvalue() == "sa\nsa\n"


def test_swap_both_success():
    s, out = make()
    s.push_b()
    s.push_b()
    out.seek(0)
    out.truncate()
    b_before = list(s.b)
    assert s.swap_both() is True
    assert s.b == [b_before[1], b_before[0]]
    assert out.getvalue() == "sa\nsb\n"


def test_push_round_trip():
    s, out = make()
    assert s.push_b() is True
    assert s.b == VALUES[:1]
    assert s.a == VALUES[1:]
    assert s.push_a() is True
    assert s.a == VALUES
    assert s.b == []
    assert out.getvalue() == "pb\npa\n"
    assert s.moves_count == 2


def test_push_from_empty_fails():
    s, out = make()
    assert s.push_a() is False
    empty, _ = make([])
    assert empty.push_b() is False
    assert out.getvalue() == ""


def test_rotate_a_recorded():
    s, out = make()
    assert s.rotate_a(True) is True
    assert s.a == VALUES[1:] + VALUES[:1]
    assert out.getvalue() == "ra\n"
    assert s.moves_count == 1


def test_rotate_unrecorded_is_silent():
    s, out = make()
    s.rotate_a(False)
    s.reverse_rotate_a(False)
    assert s.a == VALUES
    assert out.getvalue() == ""
    assert s.moves_count == 0


def test_reverse_rotate_undoes_rotate():
    s, out = make()
    s.rotate_a()
    s.reverse_rotate_a()
    assert s.a == VALUES
    assert out.getvalue() == "ra\nrra\n"


def test_rotate_b_and_reverse():
    s, out = make()
    for _ in range(3):
        s.push_b()
    b = list(s.b)
    s.rotate_b()
    assert s.b == b[1:] + b[:1]
    s.reverse_rotate_b()
    assert s.b == b
    assert out.getvalue().endswith("rb\nrrb\n")


def test_rotate_both_counts_even_with_empty_b():
    s, out = make()
    assert s.rotate_both() is True
    assert s.a == VALUES[1:] + VALUES[:1]
    assert out.getvalue() == "rr\n"
    assert s.moves_count == 1


def test_reverse_rotate_both():
    s, out = make()
    assert s.reverse_rotate_both() is True
    assert s.a == VALUES[-1:] + VALUES[:-1]
    assert out.getvalue() == "rrr\n"


@pytest.mark.parametrize("pos", range(len(VALUES)))
def test_rotate_a_to_top(pos):
    s, _ = make()
    s.rotate_a_to_top(pos)
    assert s.a[0] == VALUES[pos]
    assert sorted(s.a) == sorted(VALUES)
    assert s.moves_count == min(pos, len(VALUES) - pos)


@pytest.mark.parametrize("pos", range(4))
def test_rotate_b_to_top(pos):
    s, _ = make()
    for _ in range(4):
        s.push_b()
    b = list(s.b)
    start = s.moves_count
    s.rotate_b_to_top(pos)
    assert s.b[0] == b[pos]
    assert s.moves_count - start == min(pos, len(b) - pos)


def test_rotate_b_to_top_non_positive_does_nothing():
    s, out = make()
    s.push_b()
    s.push_b()
    before = out.getvalue()
    s.rotate_b_to_top(-1)
    assert out.getvalue() == before


def test_is_sorted():
    assert Stacks(sorted(VALUES), io.StringIO()).is_sorted() is True
    assert Stacks([1, 1, 2], io.StringIO()).is_sorted() is True
    assert Stacks(VALUES, io.StringIO()).is_sorted() is False
    s, _ = make(sorted(VALUES))
    s.push_b()
    assert s.is_sorted() is False


def test_min_position():
    s, _ = make()
    assert s.min_position() == VALUES.index(min(VALUES))


def test_min_position_first_of_equal():
    s, _ = make([4, 0, 2, 0])
    assert s.min_position() == [4, 0, 2, 0].index(0)


def test_min_position_empty_raises():
    with pytest.raises(ValueError):
        Stacks([], io.StringIO()).min_position()


def test_default_output_is_stdout(capsys):
    s = Stacks(VALUES)
    s.swap_a()
    assert capsys.readouterr().out == "sa\n"


def test_find_pos_by_value():
    assert find_pos_by_value(VALUES, VALUES[3]) == 3
    assert find_pos_by_value(VALUES, max(VALUES) + 1) == -1


def test_find_target_largest_smaller_in_b():
    b = [5, 1, 9]
    assert find_target([6, 0], b) == 5


def test_find_target_falls_back_to_max_of_tail():
    tail = [0, 7, 3]
    assert find_target(tail, [10, 20]) == max(tail)


def test_find_target_ignores_int_min_in_b():
    tail = [0, 7]
    assert find_target(tail, [INT_MIN]) == max(tail)


def test_max_on_stack_first_occurrence():
    stack = [4, 9, 9, 2]
    assert max_on_stack(stack) == MaxEntry(max(stack), stack.index(max(stack)))


def test_max_on_stack_empty():
    assert max_on_stack([]) == MaxEntry(INT_MIN, 0)