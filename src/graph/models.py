"""
Data model for the graph subsystem.

Nodes live in a per-graph arena and are addressed by a stable integer
handle (their insertion index). Every algorithm keys its bookkeeping by
handle; the node's ``value`` is ordinary data used for diagnostics only.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

NodeHandle = int


# =============================================================================
# Node Data
# =============================================================================


class NodeData(BaseModel):
    """Default node payload: a numeric ``value`` plus arbitrary extra fields.

    Frozen so instances are hashable and can be registered in a graph.
    Any other hashable object works as node data too.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    value: int | float = Field(description="Numeric value shown in diagnostics")

    def __str__(self) -> str:
        return str(self.value)


def describe_node(data: Hashable) -> str:
    """Render node data for diagnostic messages.

    Uses the ``value`` attribute (or ``"value"`` key of a mapping) when the
    data has one, else the data itself.
    """
    if isinstance(data, Mapping) and "value" in data:
        return str(data["value"])
    return str(getattr(data, "value", data))


# =============================================================================
# Edges
# =============================================================================


@dataclass(frozen=True)
class Edge:
    """Outgoing edge record.

    Attributes:
        target: Handle of the node the edge points at
        weight: Optional weight; None means unweighted
    """

    target: NodeHandle
    weight: float | None = None


# =============================================================================
# Shortest Paths
# =============================================================================


@dataclass
class ShortestPaths:
    """Result of a single-source shortest path computation.

    Attributes:
        source: Handle of the start node (None for a failed computation)
        distances: handle -> best known distance (math.inf when unreachable)
        predecessors: handle -> previous handle on the best path (None for
            the source and for unreachable nodes)
    """

    source: NodeHandle | None = None
    distances: dict[NodeHandle, float] = field(default_factory=dict)
    predecessors: dict[NodeHandle, NodeHandle | None] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> ShortestPaths:
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.distances and not self.predecessors

    def distance_to(self, handle: NodeHandle) -> float:
        return self.distances.get(handle, math.inf)

    def is_reachable(self, handle: NodeHandle) -> bool:
        return self.distance_to(handle) != math.inf

    def path_to(self, handle: NodeHandle) -> list[NodeHandle]:
        """Walk predecessors back to the source.

        Returns:
            Handles from source to ``handle`` inclusive, or [] if unreachable
        """
        if not self.is_reachable(handle):
            return []

        path = [handle]
        current = self.predecessors.get(handle)
        while current is not None:
            path.append(current)
            current = self.predecessors.get(current)
        path.reverse()
        return path
