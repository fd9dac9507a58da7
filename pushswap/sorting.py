"""Sorting stack ``a`` with the stack operations, printing as few as it can."""

from __future__ import annotations

from itertools import pairwise
from typing import Deque, Dict, Iterable, List, Sequence

from pushswap.stacks import Stacks


def _named(stacks: Stacks, name: str) -> Deque[int]:
    if name == "a":
        return stacks.a
    if name == "b":
        return stacks.b
    raise ValueError(f"stack name must be 'a' or 'b', got {name!r}")


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease."""
    return all(left <= right for left, right in pairwise(values))


def is_reverse_sorted(values: Iterable[int]) -> bool:
    """True when the values never increase."""
    return all(left >= right for left, right in pairwise(values))


def find_position(values: Iterable[int], target: int) -> int:
    """Index of ``target`` in ``values``; the length of ``values`` when absent."""
    position = 0
    for position, value in enumerate(values):
        if value == target:
            return position
    else:
        return position + 1 if values else 0


def move_to_top(stacks: Stacks, target: int, name: str) -> None:
    """Bring ``target`` to the top of the named stack by the shorter way round."""
    stack = _named(stacks, name)
    if target not in stack:
        raise ValueError(f"{target} is not in stack {name}")
    position = find_position(stack, target)
    step = stacks.rotate if position <= len(stack) // 2 else stacks.reverse_rotate
    while stack[0] != target:
        step(name)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly three values in at most two operations."""
    a = stacks.a
    if len(a) != 3:
        raise ValueError(f"sort_three needs three values, got {len(a)}")
    if is_sorted(a):
        return
    one, two, three = a
    if one < two and two > three and three > one:
        stacks.reverse_rotate("a")
        stacks.swap("a")
    elif one > two and two < three and three > one:
        stacks.swap("a")
    elif one < two and two > three and three < one:
        stacks.reverse_rotate("a")
    elif one > two and two < three and three < one:
        stacks.rotate("a")
    elif one > two and two > three:
        stacks.rotate("a")
        stacks.swap("a")


def sort_four_five(stacks: Stacks) -> None:
    """Push the smallest values to ``b`` until three remain, sort them, push back."""
    if len(stacks.a) < 3:
        raise ValueError("sort_four_five needs at least three values")
    while len(stacks.a) > 3:
        move_to_top(stacks, min(stacks.a), "a")
        stacks.push("b")
    sort_three(stacks)
    while stacks.b:
        stacks.push("a")


def sort_six_seven(stacks: Stacks) -> None:
    """Push the smallest values to ``b`` until four remain, then finish as for five."""
    if len(stacks.a) < 4:
        raise ValueError("sort_six_seven needs at least four values")
    while len(stacks.a) > 4:
        smallest = min(stacks.a)
        while stacks.a[0] != smallest:
            stacks.rotate("a")
        stacks.push("b")
    sort_four_five(stacks)
    while stacks.b:
        stacks.push("a")


def rank_values(values: Iterable[int]) -> List[int]:
    """For each value, how many of the values are smaller than it."""
    items = list(values)
    return [sum(1 for other in items if value > other) for value in items]


def _radix_pass(stacks: Stacks, ranks: Dict[int, int], bit: int, total_bits: int) -> None:
    a, b = stacks.a, stacks.b
    for _ in range(len(a)):
        if is_sorted(a):
            break
        if (ranks[a[0]] >> bit) & 1:
            stacks.rotate("a")
        else:
            stacks.push("b")
    if is_reverse_sorted(b) or bit + 1 > total_bits:
        return
    for _ in range(len(b)):
        if (ranks[b[0]] >> (bit + 1)) & 1:
            stacks.push("a")
        else:
            stacks.rotate("b")


def _is_rotated_sorted(values: Sequence[int]) -> bool:
    items = list(values)
    if len(items) < 2:
        return True
    descents = sum(1 for left, right in pairwise(items + items[:1]) if left > right)
    return descents <= 1


def radix_sort(stacks: Stacks) -> None:
    """Sort ``a`` by the binary digits of each value's rank, using ``b`` as buffer.

    Raises ValueError when ``b`` is not empty, and RuntimeError when the
    passes leave ``a`` in an order that rotation alone cannot sort.
    """
    if stacks.b:
        raise ValueError("radix_sort needs stack b to be empty")
    ranks = dict(zip(stacks.a, rank_values(stacks.a)))
    total_bits = max(ranks.values(), default=0).bit_length()
    for bit in range(total_bits):
        _radix_pass(stacks, ranks, bit, total_bits)
    while stacks.b:
        stacks.push("a")
    if not _is_rotated_sorted(stacks.a):
        raise RuntimeError("radix passes left stack a in an order rotation cannot sort")
    while not is_sorted(stacks.a):
        stacks.rotate("a")


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a``, choosing the method by its size."""
    if is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size == 2:
        stacks.swap("a")
    elif size == 3:
        sort_three(stacks)
    elif size in (4, 5):
        sort_four_five(stacks)
    elif size in (6, 7):
        sort_six_seven(stacks)
    else:
        radix_sort(stacks)