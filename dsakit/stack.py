"""A last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A LIFO stack; ``default`` is what peeking an empty stack yields."""

    def __init__(self, default: Optional[T] = None) -> None:
        self._items: list[T] = []
        self._default = default

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> Optional[T]:
        """Remove and return the top item; on an empty stack return the default."""
        if not self._items:
            return self._default
        return self._items.pop()

    def peek(self) -> Optional[T]:
        """Return the top item, or the default if the stack is empty."""
        return self._items[-1] if self._items else self._default

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def render(self) -> str:
        """Return the items top to bottom joined by ' -> ', with a newline."""
        if not self._items:
            raise IndexError("stack is empty")
        return " -> ".join(str(item) for item in self) + "\n"