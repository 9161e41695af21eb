"""
Singly linked list with head and tail pointers.

Head insertion/removal and tail insertion are O(1); tail removal walks the
list because nodes carry no back pointer.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from src.structures.exceptions import ListIndexError

T = TypeVar("T")


@dataclass(eq=False)
class ListNode(Generic[T]):
    """A single link in the list.

    Attributes:
        data: Stored element
        next: Following node, or None for the tail
    """

    data: T
    next: ListNode[T] | None = None


class SinglyLinkedList(Generic[T]):
    """Singly linked list.

    Usage:
        items = SinglyLinkedList[int]()
        items.add_at_tail(1)
        items.add_at_head(0)
        items.insert_at(1, 5)      # 0 -> 5 -> 1
        items.remove_at_tail()     # returns 1
    """

    def __init__(self) -> None:
        self.head: ListNode[T] | None = None
        self.tail: ListNode[T] | None = None
        self._length = 0

    # =========================================================================
    # Queries
    # =========================================================================

    def is_empty(self) -> bool:
        return self._length == 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        current = self.head
        while current is not None:
            yield current.data
            current = current.next

    def to_list(self) -> list[T]:
        return list(self)

    # =========================================================================
    # Insertion
    # =========================================================================

    def add_at_head(self, value: T) -> None:
        node = ListNode(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        self._length += 1

    def add_at_tail(self, value: T) -> None:
        node = ListNode(value)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._length += 1

    def insert_at(self, index: int, value: T) -> None:
        """Insert ``value`` so that it ends up at position ``index``.

        Args:
            index: Target position, 0 through len(self) inclusive

        Raises:
            ListIndexError: If index is outside that range
        """
        if index < 0 or index > self._length:
            raise ListIndexError(index, self._length)
        if index == 0:
            self.add_at_head(value)
            return
        if index == self._length:
            self.add_at_tail(value)
            return

        previous = self._node_at(index - 1)
        previous.next = ListNode(value, previous.next)
        self._length += 1

    # =========================================================================
    # Removal
    # =========================================================================

    def remove_at_head(self) -> T | None:
        """Remove and return the first element, or None when empty."""
        if self.head is None:
            return None
        node = self.head
        self.head = node.next
        self._length -= 1
        if self.head is None:
            self.tail = None
        return node.data

    def remove_at_tail(self) -> T | None:
        """Remove and return the last element, or None when empty."""
        if self.head is None:
            return None
        if self.head is self.tail:
            return self.remove_at_head()

        previous = self._node_at(self._length - 2)
        data = self._unlink_after(previous, self._length - 1)
        self.tail = previous
        return data

    def remove_at(self, index: int) -> T | None:
        """Remove and return the element at ``index``.

        Raises:
            ListIndexError: If index is not a valid position
        """
        if index < 0 or index >= self._length:
            raise ListIndexError(index, self._length)
        if index == 0:
            return self.remove_at_head()
        if index == self._length - 1:
            return self.remove_at_tail()

        return self._unlink_after(self._node_at(index - 1), index)

    def _node_at(self, index: int) -> ListNode[T]:
        current = self.head
        for _ in range(index):
            if current is None:
                break
            current = current.next
        if current is None:
            raise ListIndexError(index, self._length)
        return current

    def _unlink_after(self, previous: ListNode[T], index: int) -> T:
        """Detach the node following ``previous`` (at ``index``) and return its data."""
        node = previous.next
        if node is None:
            raise ListIndexError(index, self._length)
        previous.next = node.next
        self._length -= 1
        return node.data

    def __repr__(self) -> str:
        return f"SinglyLinkedList({self.to_list()!r})"
