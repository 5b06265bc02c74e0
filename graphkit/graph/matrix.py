"""
Dense matrix views of a graph.

Useful for small graphs and as an independent cross-check of the
heap-based algorithms in graphkit.graph.graph.
"""

from __future__ import annotations

import logging

import numpy as np

from graphkit.graph.graph import Graph

logger = logging.getLogger(__name__)


def _resolve_order(graph: Graph, order: list[str] | None) -> list[str]:
    if order is None:
        return [node.name for node in graph]
    missing = [name for name in order if not graph.contains_node(name)]
    if missing:
        raise ValueError(f"Unknown nodes in order: {', '.join(missing)}")
    if len(order) != graph.size() or len(set(order)) != len(order):
        raise ValueError("Order must list every node exactly once")
    return list(order)


def adjacency_matrix(
    graph: Graph, order: list[str] | None = None
) -> tuple[np.ndarray, list[str]]:
    """
    Build a symmetric weight matrix for the graph.

    Args:
        graph: Graph to convert
        order: Node names giving the row/column order (default: insertion order)

    Returns:
        (matrix, names) where matrix[i, j] is the edge weight between
        names[i] and names[j], np.inf if there is no edge, and 0 on the
        diagonal.
    """
    names = _resolve_order(graph, order)
    index = {name: i for i, name in enumerate(names)}

    matrix = np.full((len(names), len(names)), np.inf, dtype=np.float64)
    np.fill_diagonal(matrix, 0.0)
    for a, b, weight in graph.edges():
        if a == b:
            continue
        matrix[index[a], index[b]] = weight
        matrix[index[b], index[a]] = weight

    return matrix, names


def floyd_warshall(
    graph: Graph, order: list[str] | None = None
) -> tuple[np.ndarray, list[str]]:
    """
    All-pairs shortest path costs.

    Returns:
        (distances, names) with np.inf for unreachable pairs.
    """
    dist, names = adjacency_matrix(graph, order)
    for k in range(len(names)):
        dist = np.minimum(dist, dist[:, k, None] + dist[None, k, :])

    logger.debug(f"Floyd-Warshall over {len(names)} nodes")
    return dist, names
