"""
Graph traversal module.

Implements the two traversal strategies over any adjacency table:
- BFS: FIFO work queue, nodes marked visited when enqueued
- DFS: LIFO work stack, nodes marked visited when popped

Both engines work only through the AdjacencyLike query contract, so they
run unchanged over directed and undirected graphs. Visited sets are keyed
by node handle.

Design follows:
- Duck typing for the graph (works with any AdjacencyLike implementation)
- Explicit Result values instead of raised errors
- Visit order depends on adjacency-list insertion order
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable
from typing import Protocol, runtime_checkable

from src.core.logging import operation_context
from src.graph.exceptions import StartNodeNotFoundError
from src.graph.models import Edge, NodeHandle, describe_node
from src.graph.result import Result
from src.structures.queue import Queue
from src.structures.stack import Stack

logger = logging.getLogger(__name__)

Visitor = Callable[[Hashable], object]


# =============================================================================
# Protocol for Adjacency Tables (Duck Typing)
# =============================================================================


@runtime_checkable
class AdjacencyLike(Protocol):
    """Protocol for the adjacency table query contract.

    Allows GraphTraversal and DijkstraEngine to work with DirectedGraph,
    UndirectedGraph, or any other implementation of these methods.
    """

    def handle_of(self, data: Hashable) -> NodeHandle | None:
        """Handle of a registered node, or None."""
        ...

    def node(self, handle: NodeHandle) -> Hashable:
        """Node data stored under a handle."""
        ...

    def handles(self) -> Iterable[NodeHandle]:
        """All handles in insertion order."""
        ...

    def neighbors_of(self, handle: NodeHandle) -> list[Edge]:
        """Outgoing edges of a handle in insertion order."""
        ...


# =============================================================================
# GraphTraversal Class
# =============================================================================


class GraphTraversal:
    """Traversal engine for adjacency-table graphs.

    Usage:
        traversal = GraphTraversal(graph)

        # BFS: layer by layer from the start node
        result = traversal.bfs_traverse(start, visit=print)

        # DFS: last-listed neighbour explored first
        result = traversal.dfs_traverse(start)
        result.value   # visit order, [] when the start node is unknown
    """

    def __init__(self, graph: AdjacencyLike) -> None:
        """Initialize traversal engine.

        Args:
            graph: Adjacency table to traverse
        """
        self._graph = graph

    # =========================================================================
    # BFS Traversal
    # =========================================================================

    def bfs_traverse(
        self,
        start: Hashable,
        visit: Visitor | None = None,
    ) -> Result[list[Hashable]]:
        """Breadth-first traversal from a starting node.

        The start node is marked visited as soon as it is enqueued, and so
        is every neighbour, so each node enters the queue at most once.
        Nodes come out in non-decreasing hop distance from the start; within
        a layer the first node to discover a child decides its position.

        Args:
            start: Node data to start from
            visit: Called once per visited node, in visit order

        Returns:
            Result holding the visit order, or a StartNodeNotFoundError
        """
        with operation_context("bfs"):
            start_handle = self._graph.handle_of(start)
            if start_handle is None:
                return self._start_missing("BFS", start)

            order: list[Hashable] = []
            visited: set[NodeHandle] = {start_handle}
            queue: Queue[NodeHandle] = Queue()
            queue.enqueue(start_handle)

            while not queue.is_empty():
                current = queue.dequeue()
                data = self._graph.node(current)
                order.append(data)
                if visit is not None:
                    visit(data)

                for edge in self._graph.neighbors_of(current):
                    if edge.target not in visited:
                        visited.add(edge.target)
                        queue.enqueue(edge.target)

            logger.debug(
                "BFS from %s visited %d nodes", describe_node(start), len(order)
            )
            return Result.success(order)

    # =========================================================================
    # DFS Traversal
    # =========================================================================

    def dfs_traverse(
        self,
        start: Hashable,
        visit: Visitor | None = None,
    ) -> Result[list[Hashable]]:
        """Iterative depth-first traversal from a starting node.

        Nodes are not marked on push. A popped node that is already visited
        is discarded, so the stack may hold duplicates. After visiting a
        node every outgoing target is pushed in adjacency order, which makes
        the last listed neighbour the next one explored.

        Args:
            start: Node data to start from
            visit: Called once per visited node, in visit order

        Returns:
            Result holding the visit order, or a StartNodeNotFoundError
        """
        with operation_context("dfs"):
            start_handle = self._graph.handle_of(start)
            if start_handle is None:
                return self._start_missing("DFS", start)

            order: list[Hashable] = []
            visited: set[NodeHandle] = set()
            stack: Stack[NodeHandle] = Stack()
            stack.push(start_handle)

            while not stack.is_empty():
                current = stack.pop()
                if current in visited:
                    continue

                visited.add(current)
                data = self._graph.node(current)
                order.append(data)
                if visit is not None:
                    visit(data)

                for edge in self._graph.neighbors_of(current):
                    stack.push(edge.target)

            logger.debug(
                "DFS from %s visited %d nodes", describe_node(start), len(order)
            )
            return Result.success(order)

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def _start_missing(
        self,
        operation: str,
        start: Hashable,
    ) -> Result[list[Hashable]]:
        error = StartNodeNotFoundError(operation, start)
        logger.error("%s", error.message)
        return Result.failure(error, [])
