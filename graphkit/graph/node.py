"""
Graph vertex with a weighted adjacency mapping.
"""

from __future__ import annotations

from graphkit.graph.errors import NotAdjacentError


class Node:
    """
    A named vertex that owns its outgoing adjacency relations.

    Nodes are created by a Graph (see Graph.get_or_create_node) and hash
    by identity, so two graphs may each hold a distinct node called "A".

    Attributes:
        name: Unique identifier within the owning graph (read-only)
        neighbors: Mapping from adjacent Node to edge weight
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self.neighbors: dict[Node, int] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def degree(self) -> int:
        """Number of adjacent nodes."""
        return len(self.neighbors)

    def add_undirected_edge_to_node(self, other: Node, weight: int) -> None:
        """
        Connect this node and `other` with an edge of the given weight.

        Both adjacency mappings are updated. Adding the same pair again
        overwrites the previous weight.

        Raises:
            ValueError: If weight is negative or not an integer
        """
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(f"Edge weight must be an integer, got {weight!r}")
        if weight < 0:
            raise ValueError(
                f"Edge weight must be non-negative, got {weight} "
                f"for '{self._name}' <-> '{other.name}'"
            )
        self.neighbors[other] = weight
        other.neighbors[self] = weight

    def get_neighbors(self) -> set[Node]:
        """Return the set of adjacent nodes (no ordering guaranteed)."""
        return set(self.neighbors)

    def get_weight(self, other: Node) -> int:
        """
        Return the weight of the edge to `other`.

        Raises:
            NotAdjacentError: If `other` is not a neighbor
        """
        try:
            return self.neighbors[other]
        except KeyError:
            raise NotAdjacentError(self._name, other.name) from None

    def __repr__(self) -> str:
        return f"Node(name={self._name!r}, degree={self.degree})"
