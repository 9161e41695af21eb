"""
Single-source shortest paths (Dijkstra) over any adjacency table.

Two ways of picking the next node to settle:
- "scan" (default): linear scan of the unvisited set, O(V^2). Among equal
  distances the earliest-inserted node wins.
- "heap": binary heap with lazy deletion, O(E log V). Among equal
  distances the lowest handle wins, so the predecessor recorded for a
  node with several equal-cost paths may differ from "scan" mode.

Both modes share the same relaxation rules:
- an edge without a weight counts as 1
- a candidate distance replaces the current one only if strictly smaller,
  so the first predecessor found for a given cost is kept
- the first negative weight met while relaxing aborts the whole run and
  discards every partial update. A negative edge whose source is never
  settled (unreachable from the start) is never seen.
"""

from __future__ import annotations

import heapq
import logging
import math
from collections.abc import Hashable
from typing import Literal

from src.core.config import get_settings
from src.core.logging import operation_context
from src.graph.exceptions import NegativeWeightError, StartNodeNotFoundError
from src.graph.models import Edge, NodeHandle, ShortestPaths, describe_node
from src.graph.result import Result
from src.graph.traversal import AdjacencyLike

logger = logging.getLogger(__name__)

Selection = Literal["scan", "heap"]

DEFAULT_WEIGHT = 1.0


class DijkstraEngine:
    """
    Relaxation-based single-source shortest path engine.

    Usage:
        engine = DijkstraEngine()
        result = engine.shortest_paths(graph, start)
        if result.ok:
            result.value.distances      # handle -> distance
            result.value.path_to(h)     # [start_handle, ..., h]
    """

    def __init__(self, selection: Selection | None = None) -> None:
        """Initialize the engine.

        Args:
            selection: "scan" or "heap"; defaults to the dijkstra_selection
                setting
        """
        if selection is None:
            selection = get_settings().dijkstra_selection
        if selection not in ("scan", "heap"):
            raise ValueError(f"Unknown Dijkstra selection: {selection!r}")
        self._selection: Selection = selection

    @property
    def selection(self) -> Selection:
        return self._selection

    def shortest_paths(
        self, graph: AdjacencyLike, start: Hashable
    ) -> Result[ShortestPaths]:
        """
        Compute distances and predecessors for every node of the graph.

        Every node appears in both maps: unreachable nodes keep distance
        math.inf and predecessor None, the start node has distance 0 and
        predecessor None.

        Returns:
            Result holding ShortestPaths. On StartNodeNotFoundError or
            NegativeWeightError the value is an empty ShortestPaths.
        """
        with operation_context("dijkstra"):
            source = graph.handle_of(start)
            if source is None:
                error = StartNodeNotFoundError("Dijkstra", start)
                logger.error("%s", error.message)
                return Result.failure(error, ShortestPaths.empty())

            try:
                if self._selection == "heap":
                    paths = self._run_heap(graph, source)
                else:
                    paths = self._run_scan(graph, source)
            except NegativeWeightError as e:
                logger.error("%s", e.message)
                logger.debug(
                    "Negative weight %s on edge %d -> %d", e.weight, e.source, e.target
                )
                return Result.failure(e, ShortestPaths.empty())

            reachable = sum(1 for d in paths.distances.values() if d != math.inf)
            logger.debug(
                "Dijkstra from %s reached %d of %d nodes",
                describe_node(start),
                reachable,
                len(paths.distances),
            )
            return Result.success(paths)

    def shortest_path_costs(
        self, graph: AdjacencyLike, start: Hashable
    ) -> Result[dict[NodeHandle, float]]:
        """
        Compute only the cost map, restricted to nodes reachable from start.
        """
        result = self.shortest_paths(graph, start)
        costs = {
            handle: distance
            for handle, distance in result.value.distances.items()
            if distance != math.inf
        }
        if result.error is not None:
            return Result.failure(result.error, costs)
        return Result.success(costs)

    # =========================================================================
    # Selection strategies
    # =========================================================================

    def _run_scan(self, graph: AdjacencyLike, source: NodeHandle) -> ShortestPaths:
        paths = _initial_paths(graph, source)
        distances = paths.distances

        # dict as an insertion-ordered set, so min() breaks ties by insertion
        unvisited = dict.fromkeys(distances)

        while unvisited:
            current = min(unvisited, key=distances.__getitem__)
            if distances[current] == math.inf:
                # Everything left is unreachable
                break
            del unvisited[current]

            for edge in graph.neighbors_of(current):
                _relax(paths, current, edge, edge.target in unvisited)

        return paths

    def _run_heap(self, graph: AdjacencyLike, source: NodeHandle) -> ShortestPaths:
        paths = _initial_paths(graph, source)
        distances = paths.distances
        settled: set[NodeHandle] = set()
        pq: list[tuple[float, NodeHandle]] = [(0.0, source)]

        while pq:
            d_u, current = heapq.heappop(pq)

            # Skip outdated entries
            if current in settled or d_u > distances[current]:
                continue
            settled.add(current)

            for edge in graph.neighbors_of(current):
                if _relax(paths, current, edge, edge.target not in settled):
                    heapq.heappush(pq, (distances[edge.target], edge.target))

        return paths


def _initial_paths(graph: AdjacencyLike, source: NodeHandle) -> ShortestPaths:
    handles = list(graph.handles())
    paths = ShortestPaths(
        source=source,
        distances={handle: math.inf for handle in handles},
        predecessors={handle: None for handle in handles},
    )
    paths.distances[source] = 0.0
    return paths


def _relax(
    paths: ShortestPaths,
    current: NodeHandle,
    edge: Edge,
    target_unvisited: bool,
) -> bool:
    """Relax one edge; return True if the target's distance improved.

    Raises:
        NegativeWeightError: If the edge weight is negative
    """
    weight = DEFAULT_WEIGHT if edge.weight is None else edge.weight
    if weight < 0:
        raise NegativeWeightError(current, edge.target, weight)
    if not target_unvisited:
        return False

    candidate = paths.distances[current] + weight
    if candidate < paths.distances[edge.target]:
        paths.distances[edge.target] = candidate
        paths.predecessors[edge.target] = current
        return True
    return False
