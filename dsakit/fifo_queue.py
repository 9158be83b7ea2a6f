"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """A FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Add ``item`` to the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def render(self) -> str:
        """Return the items front to back joined by ' -> ', with a newline."""
        if not self._items:
            raise IndexError("queue is empty")
        return " -> ".join(str(item) for item in self._items) + "\n"

    def peek(self) -> Optional[Any]:
        """Return the front item, or None if the queue is empty."""
        return self._items[0] if self._items else None

    def peek_last(self) -> Optional[Any]:
        """Return the back item, or None if the queue is empty."""
        return self._items[-1] if self._items else None