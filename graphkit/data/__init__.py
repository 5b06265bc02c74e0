"""
Data loading module.

Builds graphs from JSON or msgpack edge-list files.

Usage:
    from graphkit.data import load_graph

    graph = load_graph("data/sample_graph.json")
    graph.dijkstra("A")
"""

from graphkit.data.loader import graph_from_dict, graph_to_dict, load_graph

__all__ = ["load_graph", "graph_from_dict", "graph_to_dict"]
