"""
Explicit success/failure outcome for fallible graph calls.

Edge insertion, traversal and shortest path never raise; they return a
Result. A failed Result still carries a benign value (None, an empty
visit list, empty distance maps) so callers that ignore ``ok`` see the
same empty outcome as before.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from src.graph.exceptions import GraphError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Tagged outcome of a graph operation.

    Attributes:
        value: Operation output (benign empty value on failure)
        error: The failure, or None on success
    """

    value: T
    error: GraphError | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: GraphError, value: T) -> Result[T]:
        return cls(value=value, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        """Literal diagnostic text of the failure, if any."""
        return self.error.message if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure.

        Raises:
            GraphError: The failure this result carries
        """
        if self.error is not None:
            raise self.error
        return self.value
