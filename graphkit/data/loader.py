"""
Edge-list loader for building graphs from files.

Reads JSON or msgpack documents shaped like:

    {
        "nodes": ["A", "B", "C", "D"],
        "edges": [["A", "B", 4], ["B", "C", 1], ["A", "C"]]
    }

"nodes" is optional and only needed for isolated nodes. An edge given as
a bare pair gets DEFAULT_EDGE_WEIGHT.

Usage:
    from graphkit.data import load_graph

    graph = load_graph("data/sample_graph.json")
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

import msgpack

from graphkit.config import DEFAULT_EDGE_WEIGHT, SUPPORTED_SUFFIXES
from graphkit.graph.graph import Graph

logger = logging.getLogger(__name__)


def _read_document(path: Path) -> object:
    """Decode a file according to its suffix."""
    fmt = SUPPORTED_SUFFIXES.get(path.suffix.lower())
    if fmt is None:
        supported = ", ".join(SUPPORTED_SUFFIXES)
        raise ValueError(f"Unsupported graph file '{path.name}'. Supported: {supported}")

    if fmt == "json":
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    with open(path, "rb") as f:
        return msgpack.load(f, raw=False)


def _parse_edge(entry: object, position: int) -> tuple[str, str, int]:
    if not isinstance(entry, (list, tuple)) or len(entry) not in (2, 3):
        raise ValueError(
            f"Edge #{position} must be [a, b] or [a, b, weight], got {entry!r}"
        )
    a, b = entry[0], entry[1]
    weight = entry[2] if len(entry) == 3 else DEFAULT_EDGE_WEIGHT
    if not isinstance(a, str) or not isinstance(b, str):
        raise ValueError(f"Edge #{position} endpoints must be strings, got {entry!r}")
    return a, b, weight


def graph_from_dict(data: Mapping[str, object]) -> Graph:
    """
    Build a Graph from a decoded edge-list document.

    Raises:
        ValueError: If the document is malformed or a weight is invalid
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Graph document must be a mapping, got {type(data).__name__}")

    nodes = data.get("nodes", [])
    edges = data.get("edges", [])
    if not isinstance(nodes, list) or not isinstance(edges, list):
        raise ValueError("'nodes' and 'edges' must be lists")

    graph = Graph()
    for name in nodes:
        if not isinstance(name, str):
            raise ValueError(f"Node names must be strings, got {name!r}")
        graph.get_or_create_node(name)

    for position, entry in enumerate(edges):
        a, b, weight = _parse_edge(entry, position)
        if a == b:
            logger.warning(f"Skipping self-loop on '{a}' (edge #{position})")
            continue
        graph.get_or_create_node(a).add_undirected_edge_to_node(
            graph.get_or_create_node(b), weight
        )

    return graph


def graph_to_dict(graph: Graph) -> dict[str, list]:
    """Inverse of graph_from_dict, for display."""
    return {
        "nodes": [node.name for node in graph],
        "edges": [[a, b, weight] for a, b, weight in graph.edges()],
    }


def load_graph(path: str | Path) -> Graph:
    """
    Load a graph from a JSON or msgpack edge-list file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the suffix is unsupported or the contents are malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Graph file not found: {path}")

    logger.info(f"Loading graph from {path}...")
    graph = graph_from_dict(_read_document(path))
    logger.info(f"Loaded {graph.size():,} nodes, {graph.edge_count():,} edges")
    return graph
