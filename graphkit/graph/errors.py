"""
Exceptions raised by graph operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphkit.graph.graph import Graph


class GraphError(Exception):
    """Base class for all graph errors."""


class UnknownNodeError(GraphError, KeyError):
    """A node name was looked up that the graph does not contain."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown node '{self.name}'"


class NotAdjacentError(GraphError, KeyError):
    """An edge weight was requested between two nodes that share no edge."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(source, target)
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return f"No edge between '{self.source}' and '{self.target}'"


class DisconnectedGraphError(GraphError):
    """
    Raised when an operation needs every node to be reachable.

    Attributes:
        partial: Result built from the component that was reachable
        missing: Number of nodes that could not be reached
    """

    def __init__(self, message: str, partial: Graph, missing: int) -> None:
        super().__init__(message)
        self.partial = partial
        self.missing = missing
