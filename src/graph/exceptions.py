"""
Custom exceptions for the graph module.

Graph operations never raise these directly: they are carried inside a
failed Result (see src.graph.result) and logged. ``Result.unwrap()``
raises them for callers that prefer exceptions.

Exception naming avoids shadowing Python builtins and keeps the failure
context (operation, endpoints, weight) as attributes.
"""

from __future__ import annotations

from collections.abc import Hashable

from src.graph.models import NodeHandle, describe_node


class GraphError(Exception):
    """Base exception for all graph errors.

    ``message`` holds the literal diagnostic text.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StartNodeNotFoundError(GraphError):
    """Raised when BFS, DFS or Dijkstra starts from an unknown node."""

    def __init__(self, operation: str, node: Hashable) -> None:
        """Initialize with the operation label and the missing node.

        Args:
            operation: Label used in the message ("BFS", "DFS", "Dijkstra")
            node: The node data that is not registered in the graph
        """
        super().__init__(
            f"{operation} failed: Start node with data {describe_node(node)} not found."
        )
        self.operation = operation
        self.node = node


class EdgeEndpointMissingError(GraphError):
    """Raised when an edge names a source or target that is not registered.

    The message wording depends on the graph kind, so the graph builds it.
    """

    def __init__(self, message: str, source: Hashable, target: Hashable) -> None:
        """Initialize with message and both endpoints.

        Args:
            message: Human-readable error description
            source: Requested source node data
            target: Requested target node data
        """
        super().__init__(message)
        self.source = source
        self.target = target


class NegativeWeightError(GraphError):
    """Raised when Dijkstra relaxes an edge with a negative weight."""

    MESSAGE = "Dijkstra requires non-negative edge weights. Found negative weight."

    def __init__(self, source: NodeHandle, target: NodeHandle, weight: float) -> None:
        """Initialize with the offending edge.

        Args:
            source: Handle of the node being settled
            target: Handle the negative edge points at
            weight: The negative weight found
        """
        super().__init__(self.MESSAGE)
        self.source = source
        self.target = target
        self.weight = weight
