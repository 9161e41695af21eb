"""
Pytest configuration and fixtures for structures-toolkit tests.
"""

from __future__ import annotations

import pytest

from src.core.config import Settings, get_settings
from src.graph import DirectedGraph, NodeData, UndirectedGraph


@pytest.fixture
def settings() -> Settings:
    """Provide test settings with edge logging on and linear-scan Dijkstra."""
    return Settings(
        dijkstra_selection="scan",
        log_edge_insertions=True,
        log_file_path=None,
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Keep get_settings() from leaking environment between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def nodes() -> dict[str, NodeData]:
    """Five nodes A..E with values 10..50."""
    return {
        name: NodeData(value=value, id=index, name=name)
        for index, (name, value) in enumerate(
            [("A", 10), ("B", 20), ("C", 30), ("D", 40), ("E", 50)], start=1
        )
    }


@pytest.fixture
def traversal_graph(
    settings: Settings, nodes: dict[str, NodeData]
) -> UndirectedGraph:
    """Undirected graph used by the traversal tests.

    Structure:
        A -- B -- D -- E
        |         |
        C --------+
    """
    graph = UndirectedGraph(settings=settings)
    for node in nodes.values():
        graph.add_node(node)

    graph.add_edge(nodes["A"], nodes["B"])
    graph.add_edge(nodes["A"], nodes["C"])
    graph.add_edge(nodes["B"], nodes["D"])
    graph.add_edge(nodes["C"], nodes["D"])
    graph.add_edge(nodes["D"], nodes["E"])
    return graph


def _weighted(graph, nodes: dict[str, NodeData]):
    for node in nodes.values():
        graph.add_node(node)

    graph.add_weighted_edge(nodes["A"], nodes["B"], 4)
    graph.add_weighted_edge(nodes["A"], nodes["C"], 2)
    graph.add_weighted_edge(nodes["B"], nodes["E"], 3)
    graph.add_weighted_edge(nodes["B"], nodes["D"], 2)
    graph.add_weighted_edge(nodes["C"], nodes["D"], 4)
    graph.add_weighted_edge(nodes["C"], nodes["E"], 5)
    graph.add_weighted_edge(nodes["D"], nodes["E"], 1)
    return graph


@pytest.fixture
def weighted_undirected(
    settings: Settings, nodes: dict[str, NodeData]
) -> UndirectedGraph:
    """Weighted undirected graph: A-B 4, A-C 2, B-E 3, B-D 2, C-D 4, C-E 5, D-E 1."""
    return _weighted(UndirectedGraph(settings=settings), nodes)


@pytest.fixture
def weighted_directed(
    settings: Settings, nodes: dict[str, NodeData]
) -> DirectedGraph:
    """Directed version of weighted_undirected plus E -> B (10)."""
    graph = _weighted(DirectedGraph(settings=settings), nodes)
    graph.add_weighted_edge(nodes["E"], nodes["B"], 10)
    return graph
