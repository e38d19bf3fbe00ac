"""Sorting stack ``a`` by the cheapest-move strategy using the stack operations."""

from __future__ import annotations

import io
from bisect import bisect_left
from collections import deque
from typing import Iterable

from pushswap.stack import Stacks, is_sorted


def _above_median(stack: deque[int], value: int) -> bool:
    """True if ``value`` sits in the upper half of ``stack`` (median included)."""
    return stack.index(value) <= len(stack) // 2


def _cost(index: int, length: int) -> int:
    """Number of rotations needed to bring position ``index`` to the top."""
    return index if index <= length // 2 else length - index


def _choose_cheapest(a: deque[int], b: deque[int]) -> tuple[int, int]:
    """Pick the item of ``a`` cheapest to place on ``b``, with its target in ``b``.

    The target is the largest item of ``b`` smaller than the candidate, or the
    largest item of ``b`` when there is none. Ties go to the item nearest the top.
    """
    positions_b = {value: index for index, value in enumerate(b)}
    ordered = sorted(b)
    best: tuple[int, int, int] | None = None
    for index, value in enumerate(a):
        smaller = bisect_left(ordered, value)
        target = ordered[smaller - 1] if smaller else ordered[-1]
        cost = _cost(index, len(a)) + _cost(positions_b[target], len(b))
        if best is None or cost < best[0]:
            best = (cost, value, target)
    assert best is not None
    return best[1], best[2]


def _target_in_a(value: int, a: deque[int]) -> int:
    """Smallest item of ``a`` larger than ``value``, else the smallest item of ``a``."""
    larger = [item for item in a if item > value]
    return min(larger) if larger else min(a)


def _bring_to_top(stacks: Stacks, value: int, name: str) -> None:
    """Rotate stack ``name`` in the shorter direction until ``value`` is on top."""
    stack = stacks.a if name == "a" else stacks.b
    if _above_median(stack, value):
        rotate = stacks.ra if name == "a" else stacks.rb
    else:
        rotate = stacks.rra if name == "a" else stacks.rrb
    while stack[0] != value:
        rotate()


def _move_cheapest_to_b(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    value, target = _choose_cheapest(a, b)
    value_up = _above_median(a, value)
    target_up = _above_median(b, target)
    if value_up and target_up:
        while b[0] != target and a[0] != value:
            stacks.rr()
    elif not value_up and not target_up:
        while b[0] != target and a[0] != value:
            stacks.rrr()
    _bring_to_top(stacks, value, "a")
    _bring_to_top(stacks, target, "b")
    stacks.pb()


def _move_b_to_a(stacks: Stacks) -> None:
    _bring_to_top(stacks, _target_in_a(stacks.b[0], stacks.a), "a")
    stacks.pa()


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most three items (two also work)."""
    a = stacks.a
    if len(a) < 2:
        return
    biggest = max(a)
    if a[0] == biggest:
        stacks.ra()
    elif a[1] == biggest:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` of four or more items, using ``b`` as scratch space."""
    remaining = len(stacks.a)
    stacks.pb()
    while remaining > 3 and not is_sorted(stacks.a):
        remaining -= 1
        _move_cheapest_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        _move_b_to_a(stacks)
    _bring_to_top(stacks, min(stacks.a), "a")


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values`` (top first) in ascending order."""
    stacks = Stacks(values, stream=io.StringIO())
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.sa()
        elif len(stacks.a) == 3:
            sort_three(stacks)
        else:
            sort_stacks(stacks)
    return list(stacks.operations)