"""
Undirected graph: one add_edge call appends a mirrored pair of arcs.

Edge (a, b) becomes a -> b in a's list and b -> a in b's list, both with
the same weight. A self-loop therefore shows up twice in its node's list.
"""

from __future__ import annotations

from collections.abc import Hashable

from src.graph.adjacency import AdjacencyGraph
from src.graph.models import Edge, NodeHandle, describe_node


class UndirectedGraph(AdjacencyGraph):
    """Graph whose edges are traversable in both directions."""

    kind = "undirected"

    def _insert(
        self, source: NodeHandle, target: NodeHandle, weight: float | None
    ) -> None:
        self._adjacency[source].append(Edge(target, weight))
        self._adjacency[target].append(Edge(source, weight))

    def _missing_endpoint_message(
        self, source: Hashable, target: Hashable, weighted: bool
    ) -> str:
        edge = "undirected weighted edge" if weighted else "undirected edge"
        return (
            f"Cannot add {edge}: Node with data {describe_node(source)} "
            f"or {describe_node(target)} not found."
        )

    def _inserted_message(
        self, source: Hashable, target: Hashable, weight: float | None
    ) -> str:
        if weight is None:
            return (
                f"Added undirected edge between {describe_node(source)} "
                f"and {describe_node(target)}"
            )
        return (
            f"Added undirected weighted edge between {describe_node(source)} "
            f"and {describe_node(target)} with weight {weight}"
        )
