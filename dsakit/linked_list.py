"""A singly linked list with front and back insertion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node:
    item: Any
    next: Optional["_Node"] = None


class SinglyLinkedList(Generic[T]):
    """A singly linked list tracking its head, tail and length."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._length = 0

    def insert_front(self, item: T) -> None:
        """Insert ``item`` at the front of the list."""
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._length += 1

    def insert_end(self, item: T) -> None:
        """Append ``item`` at the end of the list."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.item
            node = node.next

    def _check_index(self, index: int) -> None:
        if self._head is None:
            raise IndexError("list is empty")
        if index < 0 or index >= self._length:
            raise IndexError("index out of range")

    def get(self, index: int) -> T:
        """Return the item at ``index``.

        Raises IndexError when the list is empty or the index is out of range.
        """
        self._check_index(index)
        for position, item in enumerate(self):
            if position == index:
                return item
        raise IndexError("index out of range")

    def remove(self, index: int) -> None:
        """Remove the item at ``index``.

        Raises IndexError when the list is empty or the index is out of range.
        """
        self._check_index(index)
        previous: Optional[_Node] = None
        node = self._head
        for _ in range(index):
            previous, node = node, node.next
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        node.next = None
        self._length -= 1

    def first(self) -> T:
        """Return the first item; raise IndexError if the list is empty."""
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.item

    def last(self) -> T:
        """Return the last item; raise IndexError if the list is empty."""
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail.item