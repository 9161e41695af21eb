"""
FIFO queue.

Backed by ``collections.deque`` so both ends are O(1). Reads from an empty
queue return ``None`` rather than raising.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """First-in, first-out container."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: deque[T] = deque(items or ())

    def enqueue(self, item: T) -> None:
        """Add an element to the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> T | None:
        """Remove and return the front element, or ``None`` when empty."""
        if self.is_empty():
            return None
        return self._items.popleft()

    def peek(self) -> T | None:
        """Return the front element without removing it."""
        if self.is_empty():
            return None
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        # Front to back, joined by "->"
        return "->".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"Queue([{', '.join(repr(item) for item in self._items)}])"
