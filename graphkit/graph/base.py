"""
Abstract graph contract.

Separates the public capability set (node creation and lookup,
traversal, shortest paths, spanning trees) from the concrete Graph so
callers and tests can depend on the contract alone.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from graphkit.graph.node import Node

NodeVisitor = Callable[["Node"], None]


class BaseGraph(ABC):
    """
    Abstract base class for undirected weighted graphs.

    All operations assume a simple undirected graph with non-negative
    integer weights. Mutating the graph while an algorithm runs is
    undefined.
    """

    @abstractmethod
    def get_or_create_node(self, name: str) -> Node:
        """Return the node called `name`, creating it if needed."""
        ...

    @abstractmethod
    def contains_node(self, name: str) -> bool:
        """Whether a node called `name` exists."""
        ...

    @abstractmethod
    def get_all_nodes(self) -> list[Node]:
        """All nodes in the graph."""
        ...

    @abstractmethod
    def size(self) -> int:
        """Number of nodes."""
        ...

    @abstractmethod
    def breadth_first_search(self, start_name: str, visitor: NodeVisitor) -> None:
        """
        Visit every node reachable from `start_name` in breadth-first order.

        Args:
            start_name: Name of the node to start from
            visitor: Called once per node, on its first visit

        Raises:
            UnknownNodeError: If `start_name` is not in the graph
        """
        ...

    @abstractmethod
    def depth_first_search(self, start_name: str, visitor: NodeVisitor) -> None:
        """
        Visit every node reachable from `start_name` in depth-first order.

        Raises:
            UnknownNodeError: If `start_name` is not in the graph
        """
        ...

    @abstractmethod
    def dijkstra(self, start_name: str) -> dict[Node, int]:
        """
        Compute the minimum path cost from `start_name` to every reachable node.

        Raises:
            UnknownNodeError: If `start_name` is not in the graph
        """
        ...

    @abstractmethod
    def prim_jarnik(self, start_name: str | None = None) -> BaseGraph:
        """
        Build a minimum spanning tree as a new graph.

        Raises:
            DisconnectedGraphError: If some node cannot be reached
        """
        ...

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains_node(name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self.size()})"
