"""
Directed graph: one add_edge call appends a single arc.
"""

from __future__ import annotations

from collections.abc import Hashable

from src.graph.adjacency import AdjacencyGraph
from src.graph.models import Edge, NodeHandle, describe_node


class DirectedGraph(AdjacencyGraph):
    """Graph whose edges run from source to target only."""

    kind = "directed"

    def _insert(
        self, source: NodeHandle, target: NodeHandle, weight: float | None
    ) -> None:
        self._adjacency[source].append(Edge(target, weight))

    def _missing_endpoint_message(
        self, source: Hashable, target: Hashable, weighted: bool
    ) -> str:
        edge = "directed weighted edge" if weighted else "directed edge"
        return (
            f"Cannot add {edge}: Source ({describe_node(source)}) "
            f"or target ({describe_node(target)}) node not found."
        )

    def _inserted_message(
        self, source: Hashable, target: Hashable, weight: float | None
    ) -> str:
        if weight is None:
            return (
                f"Added directed edge from {describe_node(source)} "
                f"to {describe_node(target)}"
            )
        return (
            f"Added directed weighted edge from {describe_node(source)} "
            f"to {describe_node(target)} with weight {weight}"
        )
