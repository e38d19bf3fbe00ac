"""The two stacks and the eleven named operations that act on them."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional, TextIO

from pushswap.output import printf


def is_sorted(values: Iterable[int]) -> bool:
    """True if ``values`` never decreases from one item to the next."""
    items = list(values)
    return all(first <= second for first, second in zip(items, items[1:]))


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _push(dst: deque[int], src: deque[int]) -> None:
    if src:
        dst.appendleft(src.popleft())


def _rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _rev_rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``, top first; every operation reports its name.

    Each operation's name is written as a line to ``stream`` (standard output
    by default) and appended to :attr:`operations`.
    """

    def __init__(self, values: Iterable[int] = (), stream: Optional[TextIO] = None) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.stream = stream
        self.operations: list[str] = []

    def _report(self, name: str) -> None:
        self.operations.append(name)
        printf("%s\n", name, stream=self.stream)

    def sa(self) -> None:
        """Swap the top two items of ``a``."""
        _swap(self.a)
        self._report("sa")

    def sb(self) -> None:
        """Swap the top two items of ``b``."""
        _swap(self.b)
        self._report("sb")

    def ss(self) -> None:
        """Swap the top two items of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self._report("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.a, self.b)
        self._report("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.b, self.a)
        self._report("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        _rotate(self.a)
        self._report("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        _rotate(self.b)
        self._report("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)
        self._report("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        _rev_rotate(self.a)
        self._report("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        _rev_rotate(self.b)
        self._report("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _rev_rotate(self.a)
        _rev_rotate(self.b)
        self._report("rrr")

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"