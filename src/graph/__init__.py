# Graph module: adjacency tables, traversal and shortest paths
"""
Graph layer including:
- DirectedGraph / UndirectedGraph: node arena + adjacency table
- GraphTraversal: BFS/DFS engines over any adjacency table
- DijkstraEngine: single-source shortest paths
- Result: explicit success/failure outcome of fallible calls
"""

from src.graph.adjacency import AdjacencyGraph
from src.graph.directed import DirectedGraph
from src.graph.exceptions import (
    EdgeEndpointMissingError,
    GraphError,
    NegativeWeightError,
    StartNodeNotFoundError,
)
from src.graph.models import (
    Edge,
    NodeData,
    NodeHandle,
    ShortestPaths,
    describe_node,
)
from src.graph.result import Result
from src.graph.shortest_path import DijkstraEngine
from src.graph.traversal import AdjacencyLike, GraphTraversal
from src.graph.undirected import UndirectedGraph

__all__ = [
    # Exceptions
    "GraphError",
    "StartNodeNotFoundError",
    "EdgeEndpointMissingError",
    "NegativeWeightError",
    # Models
    "Edge",
    "NodeData",
    "NodeHandle",
    "ShortestPaths",
    "describe_node",
    "Result",
    # Graphs
    "AdjacencyGraph",
    "AdjacencyLike",
    "DirectedGraph",
    "UndirectedGraph",
    # Engines
    "GraphTraversal",
    "DijkstraEngine",
]
