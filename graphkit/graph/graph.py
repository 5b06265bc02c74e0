"""
Undirected weighted graph with BFS, DFS, Dijkstra and Prim-Jarnik.

Usage:
    from graphkit.graph import Graph

    g = Graph()
    x, y = g.get_or_create_node("X"), g.get_or_create_node("Y")
    x.add_undirected_edge_to_node(y, 1)

    g.breadth_first_search("X", print)
    costs = g.dijkstra("X")
    mst = g.prim_jarnik()
"""

from __future__ import annotations

import heapq
import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from graphkit.graph.base import BaseGraph, NodeVisitor
from graphkit.graph.errors import DisconnectedGraphError, UnknownNodeError
from graphkit.graph.node import Node

logger = logging.getLogger(__name__)


@dataclass(order=True, frozen=True)
class Path:
    """
    Dijkstra queue entry, ordered by accumulated cost.

    Attributes:
        cost: Total weight from the start node
        dest: Name of the node this path ends at
    """

    cost: int
    dest: str = field(compare=False)


@dataclass(order=True, frozen=True)
class Edge:
    """
    Prim-Jarnik frontier entry, ordered by weight.

    Attributes:
        weight: Edge weight
        a: Solved endpoint
        b: Endpoint outside the tree when the edge was pushed
    """

    weight: int
    a: Node = field(compare=False)
    b: Node = field(compare=False)


class Graph(BaseGraph):
    """
    In-memory undirected weighted graph.

    Owns its nodes through a per-instance name -> Node mapping. Nodes are
    only created through get_or_create_node; edges are added on the nodes
    themselves with Node.add_undirected_edge_to_node.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}

    # =========================================================================
    # Construction & Lookup
    # =========================================================================

    def get_or_create_node(self, name: str) -> Node:
        """
        Return the node with the given name, creating it if it doesn't exist.

        Subsequent calls with the same name return the same Node.
        """
        node = self._nodes.get(name)
        if node is None:
            node = Node(name)
            self._nodes[name] = node
        return node

    def get_node(self, name: str) -> Node:
        """
        Return an existing node.

        Raises:
            UnknownNodeError: If no node has this name
        """
        try:
            return self._nodes[name]
        except KeyError:
            raise UnknownNodeError(name) from None

    def contains_node(self, name: str) -> bool:
        return name in self._nodes

    def get_all_nodes(self) -> list[Node]:
        return list(self._nodes.values())

    def size(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def edges(self) -> Iterator[tuple[str, str, int]]:
        """Yield each undirected edge once as (name_a, name_b, weight)."""
        seen: set[Node] = set()
        for node in self._nodes.values():
            seen.add(node)
            for neighbor, weight in node.neighbors.items():
                if neighbor not in seen:
                    yield node.name, neighbor.name, weight
                elif neighbor is node:
                    yield node.name, node.name, weight

    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    def total_weight(self) -> int:
        """Sum of all edge weights."""
        return sum(weight for _, _, weight in self.edges())

    # =========================================================================
    # Traversal
    # =========================================================================

    def breadth_first_search(self, start_name: str, visitor: NodeVisitor) -> None:
        """
        Perform a breadth-first search starting at the named node.

        The visitor is called on each node the first time it is dequeued.
        Nodes may be queued more than once; repeats are skipped on dequeue.
        """
        start = self.get_node(start_name)
        visited: set[Node] = set()
        to_visit: deque[Node] = deque([start])

        while to_visit:
            node = to_visit.popleft()
            if node in visited:
                continue
            visitor(node)
            visited.add(node)
            for neighbor in node.get_neighbors():
                if neighbor not in visited:
                    to_visit.append(neighbor)

        logger.debug(f"BFS from '{start_name}' visited {len(visited)} nodes")

    def depth_first_search(self, start_name: str, visitor: NodeVisitor) -> None:
        """
        Perform a depth-first search starting at the named node.

        Same as breadth_first_search but with a stack. Filtering happens at
        pop time, so the order is a valid DFS order but not necessarily the
        one a recursive DFS would produce.
        """
        start = self.get_node(start_name)
        visited: set[Node] = set()
        to_visit: list[Node] = [start]

        while to_visit:
            node = to_visit.pop()
            if node in visited:
                continue
            visitor(node)
            visited.add(node)
            for neighbor in node.get_neighbors():
                if neighbor not in visited:
                    to_visit.append(neighbor)

        logger.debug(f"DFS from '{start_name}' visited {len(visited)} nodes")

    # =========================================================================
    # Shortest Paths
    # =========================================================================

    def dijkstra(self, start_name: str) -> dict[Node, int]:
        """
        Compute the cost of the shortest path to every node from `start_name`.

        Uses a binary heap with lazy deletion: a new entry is pushed for
        every edge relaxation and stale entries are skipped when popped.
        Weights must be non-negative.

        Returns:
            Mapping from each reachable Node to its minimum total cost. If
            the graph is disconnected, unreachable nodes are absent.

        Raises:
            UnknownNodeError: If `start_name` is not in the graph
        """
        self.get_node(start_name)

        result: dict[Node, int] = {}
        todo: list[Path] = [Path(0, start_name)]

        while len(result) < len(self._nodes) and todo:
            next_path = heapq.heappop(todo)
            node = self._nodes[next_path.dest]
            if node in result:
                continue
            cost = next_path.cost
            result[node] = cost
            for neighbor, weight in node.neighbors.items():
                heapq.heappush(todo, Path(cost + weight, neighbor.name))

        unreachable = len(self._nodes) - len(result)
        if unreachable:
            logger.debug(
                f"Dijkstra from '{start_name}': {unreachable} of "
                f"{len(self._nodes)} nodes unreachable"
            )
        return result

    # =========================================================================
    # Minimum Spanning Tree
    # =========================================================================

    def prim_jarnik(self, start_name: str | None = None) -> Graph:
        """
        Compute a minimum spanning tree with Prim-Jarnik's algorithm.

        The tree is a new Graph holding the same node names and a subset of
        this graph's edges. Equal-weight edges are not tie-broken, so the
        edge set may differ between equally valid trees; the total weight
        does not.

        Args:
            start_name: Node to grow the tree from (default: first node added)

        Raises:
            UnknownNodeError: If `start_name` is given but not in the graph
            DisconnectedGraphError: If the graph is not connected. The
                exception's `partial` attribute holds the tree spanning the
                start node's component.
        """
        result = Graph()
        if not self._nodes:
            return result

        if start_name is None:
            start = next(iter(self._nodes.values()))
        else:
            start = self.get_node(start_name)

        result.get_or_create_node(start.name)
        solved: set[Node] = set()
        frontier: list[Edge] = []

        while result.size() < self.size():
            solved.add(start)
            for neighbor, weight in start.neighbors.items():
                if neighbor not in solved:
                    heapq.heappush(frontier, Edge(weight, start, neighbor))

            # Drop edges whose far end joined the tree after they were pushed
            while frontier and frontier[0].b in solved:
                heapq.heappop(frontier)

            if not frontier:
                missing = self.size() - result.size()
                raise DisconnectedGraphError(
                    f"Graph is not connected: {missing} of {self.size()} nodes "
                    f"unreachable from '{result.get_all_nodes()[0].name}'",
                    partial=result,
                    missing=missing,
                )

            edge = heapq.heappop(frontier)
            result.get_or_create_node(edge.b.name).add_undirected_edge_to_node(
                result.get_or_create_node(edge.a.name), edge.weight
            )
            start = edge.b

        logger.debug(
            f"Spanning tree over {result.size()} nodes, total weight {result.total_weight()}"
        )
        return result
