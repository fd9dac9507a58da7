from itertools import permutations

import pytest

from pushswap.sorting import (
    find_position,
    is_reverse_sorted,
    is_sorted,
    move_to_top,
    radix_sort,
    rank_values,
    sort_four_five,
    sort_six_seven,
    sort_stacks,
    sort_three,
)
from pushswap.stacks import Stacks


def _replay(values, operations):
    stacks = Stacks.from_values(values)
    for op in operations:
        if op.startswith("rr"):
            stacks.reverse_rotate(op[2])
        elif op[0] == "s":
            stacks.swap(op[1])
        elif op[0] == "r":
            stacks.rotate(op[1])
        else:
            stacks.push(op[1])
    return stacks


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([4])
    assert is_sorted([1, 2, 2, 9])
    assert not is_sorted([2, 1])


def test_is_reverse_sorted():
    assert is_reverse_sorted([3, 2, 1])
    assert is_reverse_sorted([])
    assert not is_reverse_sorted([1, 2])


def test_find_position():
    assert find_position([5, 7, 9], 9) == 2
    assert find_position([5, 7, 9], 5) == 0
    assert find_position([5, 7, 9], 4) == len([5, 7, 9])


def test_move_to_top_short_way_forward():
    stacks = Stacks.from_values([1, 2, 3, 4, 5])
    move_to_top(stacks, 2, "a")
    assert stacks.a[0] == 2
    assert stacks.operations == ["ra"]


def test_move_to_top_short_way_backward():
    stacks = Stacks.from_values([1, 2, 3, 4, 5])
    move_to_top(stacks, 4, "a")
    assert stacks.a[0] == 4
    assert stacks.operations == ["rra", "rra"]


def test_move_to_top_missing_value():
    with pytest.raises(ValueError):
        move_to_top(Stacks.from_values([1, 2]), 3, "a")


def test_rank_values():
    assert rank_values([30, 10, 20]) == [2, 0, 1]
    assert sorted(rank_values([9, -4, 100, 7])) == list(range(4))


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_sort_three_all_orders(values):
    stacks = Stacks.from_values(values)
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(stacks.operations) <= 2


def test_sort_three_wrong_size():
    with pytest.raises(ValueError):
        sort_three(Stacks.from_values([1, 2]))


@pytest.mark.parametrize("size", [4, 5])
def test_sort_four_five_all_orders(size):
    for values in permutations(range(size)):
        stacks = Stacks.from_values(values)
        sort_four_five(stacks)
        assert list(stacks.a) == sorted(values)
        assert not stacks.b
        assert len(stacks.operations) <= 12


@pytest.mark.parametrize("size", [6, 7])
def test_sort_six_seven_all_orders(size):
    for values in permutations(range(size)):
        stacks = Stacks.from_values(values)
        sort_six_seven(stacks)
        assert list(stacks.a) == sorted(values)
        assert not stacks.b


@pytest.mark.parametrize(
    "values",
    [
        [7, 6, 5, 4, 3, 2, 1, 0],
        [700, 600, 500, 400, 300, 200, 100, 0],
        [3, 2, 1, 0, -1, -2, -3, -4],
    ],
)
def test_radix_sort_reversed(values):
    stacks = Stacks.from_values(values)
    radix_sort(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    replayed = _replay(values, stacks.operations)
    assert list(replayed.a) == sorted(values)


def test_radix_sort_unsortable_order_raises():
    with pytest.raises(RuntimeError):
        radix_sort(Stacks.from_values([1, 0, 3, 2, 5, 4, 7, 6]))


def test_radix_sort_needs_empty_b():
    with pytest.raises(ValueError):
        radix_sort(Stacks([3, 1, 2], [5]))


def test_sort_stacks_already_sorted_does_nothing():
    stacks = Stacks.from_values([1, 5, 9, 12])
    sort_stacks(stacks)
    assert stacks.operations == []


def test_sort_stacks_two_values():
    stacks = Stacks.from_values([9, 3])
    sort_stacks(stacks)
    assert list(stacks.a) == [3, 9]
    assert stacks.operations == ["sa"]


@pytest.mark.parametrize(
    "values",
    [[5, 1, 3], [40, -2, 17, 8], [3, 9, 1, 7, 5, 2], [12, 11, 10, 9, 8, 7, 6, 5]],
)
def test_sort_stacks_replay_matches(values):
    stacks = Stacks.from_values(values)
    sort_stacks(stacks)
    assert list(stacks.a) == sorted(values)
    replayed = _replay(values, stacks.operations)
    assert list(replayed.a) == list(stacks.a)
    assert not replayed.b