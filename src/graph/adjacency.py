"""
Node arena and adjacency table shared by directed and undirected graphs.

Nodes are stored in insertion order and addressed by integer handles.
Node data is looked up by equality, so registering data equal to an
existing node returns the existing handle. Each handle owns an outgoing
edge list kept in insertion order; traversal order depends on it.

Subclasses decide how one add_edge call maps onto edge-list entries.
Mutating a graph while a traversal or Dijkstra run is in progress is not
supported.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterator

from src.core.config import Settings, get_settings
from src.core.logging import operation_context
from src.graph.exceptions import EdgeEndpointMissingError
from src.graph.models import Edge, NodeHandle, ShortestPaths
from src.graph.result import Result
from src.graph.shortest_path import DijkstraEngine
from src.graph.traversal import GraphTraversal

logger = logging.getLogger(__name__)


class AdjacencyGraph(ABC):
    """Adjacency-list graph over hashable node data.

    Concrete graphs implement the edge-insertion policy and the wording of
    their diagnostics.
    """

    #: Kind label used in log lines ("directed", "undirected")
    kind: str = ""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize an empty graph.

        Args:
            settings: Overrides get_settings() (edge logging, Dijkstra mode)
        """
        self._settings = settings or get_settings()
        self._nodes: list[Hashable] = []
        self._index: dict[Hashable, NodeHandle] = {}
        self._adjacency: list[list[Edge]] = []
        logger.debug("Created %s graph", self.kind, extra={"graph": self.kind})

    # =========================================================================
    # Node Registry
    # =========================================================================

    def add_node(self, data: Hashable) -> NodeHandle:
        """Register ``data`` as a node.

        Re-adding data that is already registered changes nothing.

        Returns:
            The node's handle (existing handle for a duplicate)

        Raises:
            TypeError: If ``data`` is unhashable
        """
        handle = self._lookup(data)
        if handle is not None:
            return handle

        handle = len(self._nodes)
        self._index[data] = handle
        self._nodes.append(data)
        self._adjacency.append([])
        return handle

    def has_node(self, data: Hashable) -> bool:
        return self._lookup(data) is not None

    def get_nodes(self) -> list[Hashable]:
        """All node data in insertion order (a copy)."""
        return list(self._nodes)

    def get_neighbors(self, data: Hashable) -> list[Edge] | None:
        """Outgoing edges of a node.

        Returns:
            A copy of the edge list ([] when the node has no edges), or
            None when the node is not registered
        """
        handle = self._lookup(data)
        if handle is None:
            return None
        return list(self._adjacency[handle])

    def handle_of(self, data: Hashable) -> NodeHandle | None:
        """Handle registered for ``data``, or None."""
        return self._lookup(data)

    def _lookup(self, data: object) -> NodeHandle | None:
        try:
            return self._index.get(data)  # type: ignore[call-overload]
        except TypeError:
            # Unhashable data can never be a node
            return None

    def node(self, handle: NodeHandle) -> Hashable:
        """Node data stored under ``handle``.

        Raises:
            IndexError: If the handle was never issued by this graph
        """
        if handle < 0:
            raise IndexError(f"Invalid node handle: {handle}")
        return self._nodes[handle]

    def handles(self) -> range:
        return range(len(self._nodes))

    def neighbors_of(self, handle: NodeHandle) -> list[Edge]:
        return list(self._adjacency[handle])

    def edge_count(self) -> int:
        """Number of edge-list entries (an undirected edge counts twice)."""
        return sum(len(edges) for edges in self._adjacency)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, data: object) -> bool:
        return self._lookup(data) is not None

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._nodes))

    # =========================================================================
    # Edge Insertion
    # =========================================================================

    def add_edge(self, source: Hashable, target: Hashable) -> Result[None]:
        """Add an unweighted edge.

        Returns:
            Successful Result, or EdgeEndpointMissingError with the graph
            left unchanged
        """
        return self._add_edge(source, target, None)

    def add_weighted_edge(
        self, source: Hashable, target: Hashable, weight: float
    ) -> Result[None]:
        """Add a weighted edge. Negative weights are stored as given."""
        return self._add_edge(source, target, weight)

    def _add_edge(
        self, source: Hashable, target: Hashable, weight: float | None
    ) -> Result[None]:
        with operation_context("add_edge"):
            source_handle = self._lookup(source)
            target_handle = self._lookup(target)

            if source_handle is None or target_handle is None:
                error = EdgeEndpointMissingError(
                    self._missing_endpoint_message(source, target, weight is not None),
                    source,
                    target,
                )
                logger.error("%s", error.message, extra={"graph": self.kind})
                return Result.failure(error, None)

            self._insert(source_handle, target_handle, weight)

            if self._settings.log_edge_insertions:
                logger.debug(
                    "%s",
                    self._inserted_message(source, target, weight),
                    extra={"graph": self.kind},
                )
            return Result.success(None)

    @abstractmethod
    def _insert(
        self, source: NodeHandle, target: NodeHandle, weight: float | None
    ) -> None:
        """Append the edge-list entries for one edge."""
        raise NotImplementedError

    @abstractmethod
    def _missing_endpoint_message(
        self, source: Hashable, target: Hashable, weighted: bool
    ) -> str:
        raise NotImplementedError

    @abstractmethod
    def _inserted_message(
        self, source: Hashable, target: Hashable, weight: float | None
    ) -> str:
        raise NotImplementedError

    # =========================================================================
    # Algorithms
    # =========================================================================

    def bfs(
        self, start: Hashable, visit: Callable[[Hashable], object] | None = None
    ) -> Result[list[Hashable]]:
        """Breadth-first traversal; see GraphTraversal.bfs_traverse."""
        return GraphTraversal(self).bfs_traverse(start, visit)

    def dfs(
        self, start: Hashable, visit: Callable[[Hashable], object] | None = None
    ) -> Result[list[Hashable]]:
        """Depth-first traversal; see GraphTraversal.dfs_traverse."""
        return GraphTraversal(self).dfs_traverse(start, visit)

    def dijkstra(self, start: Hashable) -> Result[ShortestPaths]:
        """Shortest paths from ``start``; see DijkstraEngine.shortest_paths."""
        engine = DijkstraEngine(selection=self._settings.dijkstra_selection)
        return engine.shortest_paths(self, start)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={len(self._nodes)}, "
            f"edges={self.edge_count()})"
        )
