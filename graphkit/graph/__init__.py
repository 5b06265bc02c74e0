"""
Graph module.

Provides the graph data structure and its algorithms:
- Node: Named vertex with weighted adjacency
- Graph: Node registry plus BFS, DFS, Dijkstra and Prim-Jarnik
- BaseGraph: Abstract contract implemented by Graph
- adjacency_matrix / floyd_warshall: Dense numpy views
"""

from graphkit.graph.base import BaseGraph, NodeVisitor
from graphkit.graph.errors import (
    DisconnectedGraphError,
    GraphError,
    NotAdjacentError,
    UnknownNodeError,
)
from graphkit.graph.graph import Graph
from graphkit.graph.matrix import adjacency_matrix, floyd_warshall
from graphkit.graph.node import Node

__all__ = [
    "BaseGraph",
    "NodeVisitor",
    "Graph",
    "Node",
    "GraphError",
    "UnknownNodeError",
    "NotAdjacentError",
    "DisconnectedGraphError",
    "adjacency_matrix",
    "floyd_warshall",
]
