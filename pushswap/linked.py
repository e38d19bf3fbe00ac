"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    content: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list supporting insertion at either end."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: T) -> None:
        """Insert ``content`` at the start of the list."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, content: T) -> None:
        """Append ``content`` at the end of the list."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> T:
        """Return the content of the last node; raise IndexError when empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` first if given."""
        node = self._head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self._head = self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"