"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import random
from collections.abc import Callable
from pathlib import Path

import pytest

from graphkit.graph import Graph

Edges = list[tuple[str, str, int]]


def build_graph(edges: Edges, isolated: list[str] | None = None) -> Graph:
    """Build a graph from (a, b, weight) triples."""
    graph = Graph()
    for name in isolated or []:
        graph.get_or_create_node(name)
    for a, b, weight in edges:
        graph.get_or_create_node(a).add_undirected_edge_to_node(
            graph.get_or_create_node(b), weight
        )
    return graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def triangle() -> Graph:
    """X-Y=1, Y-Z=2, X-Z=4."""
    return build_graph([("X", "Y", 1), ("Y", "Z", 2), ("X", "Z", 4)])


@pytest.fixture
def two_components() -> Graph:
    """Component A (a1..a4, a path with a chord) and component B (b1..b3)."""
    return build_graph(
        [
            ("a1", "a2", 1),
            ("a2", "a3", 1),
            ("a3", "a4", 1),
            ("a1", "a3", 5),
            ("b1", "b2", 2),
            ("b2", "b3", 2),
        ]
    )


@pytest.fixture
def grid() -> Graph:
    """3x3 grid with unit weights; node names are 'r,c'."""
    edges: Edges = []
    for r in range(3):
        for c in range(3):
            if c < 2:
                edges.append((f"{r},{c}", f"{r},{c + 1}", 1))
            if r < 2:
                edges.append((f"{r},{c}", f"{r + 1},{c}", 1))
    return build_graph(edges)


@pytest.fixture
def random_connected_graph() -> Callable[[int, int, int], Graph]:
    """Factory: random spanning tree over n nodes plus `extra` random edges."""

    def make(seed: int, n: int, extra: int) -> Graph:
        rng = random.Random(seed)
        names = [f"n{i}" for i in range(n)]
        edges: Edges = []
        for i in range(1, n):
            edges.append((names[i], names[rng.randrange(i)], rng.randint(0, 20)))
        for _ in range(extra):
            a, b = rng.sample(names, 2)
            edges.append((a, b, rng.randint(0, 20)))
        return build_graph(edges, isolated=names)

    return make


@pytest.fixture
def make_graph() -> Callable[..., Graph]:
    """Return the build_graph helper for ad-hoc graphs."""
    return build_graph
