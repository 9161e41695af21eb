"""
Custom exceptions for the structures module.

Exception naming avoids shadowing Python builtins; ListIndexError still
subclasses IndexError so callers can catch either.
"""

from __future__ import annotations


class StructureError(Exception):
    """Base exception for all container errors."""

    pass


class ListIndexError(StructureError, IndexError):
    """Raised when a linked list position is out of bounds.

    Carries the rejected index and the list length at the time of the call.
    """

    def __init__(self, index: int, length: int) -> None:
        """Initialize with the offending index and current length.

        Args:
            index: Position that was requested
            length: Number of elements in the list
        """
        super().__init__("Index out of bounds")
        self.index = index
        self.length = length
