"""
graphkit - in-memory undirected weighted graphs.

A small graph toolkit: build a graph of named nodes, then run
breadth-first search, depth-first search, Dijkstra shortest paths,
or Prim-Jarnik minimum spanning trees against it.
"""

__version__ = "0.1.0"
