#!/usr/bin/env python3
"""
Smoke test: fixed scenarios plus random cross-checks.

Runs every algorithm on hand-checked graphs, then compares Dijkstra
against Floyd-Warshall on random connected graphs.
"""

from __future__ import annotations

import random
import sys
import time

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

from pathlib import Path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
logging.basicConfig(level=logging.WARNING)

import numpy as np

from graphkit.config import SAMPLE_GRAPH_PATH
from graphkit.data import load_graph
from graphkit.graph import Graph, floyd_warshall

# =============================================================================
# FIXED SCENARIOS
# =============================================================================

# (name, edges, start, expected dijkstra costs, expected MST weight)
SCENARIOS = [
    (
        "Triangle",
        [("X", "Y", 1), ("Y", "Z", 2), ("X", "Z", 4)],
        "X",
        {"X": 0, "Y": 1, "Z": 3},
        3,
    ),
    (
        "Square with diagonal",
        [("A", "B", 1), ("B", "C", 1), ("C", "D", 1), ("D", "A", 1), ("A", "C", 5)],
        "A",
        {"A": 0, "B": 1, "C": 2, "D": 1},
        3,
    ),
]

RANDOM_TRIALS = 20


def build(edges: list[tuple[str, str, int]]) -> Graph:
    graph = Graph()
    for a, b, w in edges:
        graph.get_or_create_node(a).add_undirected_edge_to_node(graph.get_or_create_node(b), w)
    return graph


def random_connected_graph(rng: random.Random, n: int, extra: int) -> Graph:
    """Random spanning tree plus `extra` random edges."""
    graph = Graph()
    names = [f"n{i}" for i in range(n)]
    for i, name in enumerate(names):
        node = graph.get_or_create_node(name)
        if i:
            parent = graph.get_or_create_node(names[rng.randrange(i)])
            node.add_undirected_edge_to_node(parent, rng.randint(0, 20))
    for _ in range(extra):
        a, b = rng.sample(names, 2)
        graph.get_node(a).add_undirected_edge_to_node(graph.get_node(b), rng.randint(0, 20))
    return graph


def check_scenarios() -> bool:
    ok = True
    for name, edges, start, expected_costs, expected_mst in SCENARIOS:
        graph = build(edges)
        costs = {node.name: cost for node, cost in graph.dijkstra(start).items()}
        mst = graph.prim_jarnik()
        passed = costs == expected_costs and mst.total_weight() == expected_mst
        status = "✓" if passed else "✗"
        print(f"  {status} {name:<24} costs={costs} mst={mst.total_weight()}")
        ok = ok and passed
    return ok


def check_random(seed: int = 7) -> bool:
    rng = random.Random(seed)
    failures = 0
    for _ in range(RANDOM_TRIALS):
        graph = random_connected_graph(rng, n=rng.randint(2, 25), extra=rng.randint(0, 40))
        dist, names = floyd_warshall(graph)
        costs = graph.dijkstra(names[0])
        expected = {name: int(d) for name, d in zip(names, dist[0], strict=True)}
        if {n.name: c for n, c in costs.items()} != expected:
            failures += 1
        if graph.prim_jarnik().edge_count() != graph.size() - 1:
            failures += 1
        if not np.all(np.isfinite(dist)):
            failures += 1
    status = "✓" if failures == 0 else "✗"
    print(f"  {status} {RANDOM_TRIALS} random graphs, {failures} failures")
    return failures == 0


def check_sample_file() -> bool:
    if not SAMPLE_GRAPH_PATH.exists():
        print(f"  - {SAMPLE_GRAPH_PATH.name} not found, skipping")
        return True
    graph = load_graph(SAMPLE_GRAPH_PATH)
    order: list[str] = []
    graph.breadth_first_search("A", lambda node: order.append(node.name))
    weight = graph.prim_jarnik().total_weight()
    passed = len(order) == graph.size() and weight == 39
    status = "✓" if passed else "✗"
    print(f"  {status} {SAMPLE_GRAPH_PATH.name}: BFS reached {len(order)} nodes, MST weight {weight}")
    return passed


def main() -> int:
    start_time = time.time()

    print("\n=== Scenarios ===\n")
    results = [check_scenarios()]
    print("\n=== Random Cross-Checks ===\n")
    results.append(check_random())
    print("\n=== Sample File ===\n")
    results.append(check_sample_file())

    print(f"\nDone in {time.time() - start_time:.2f}s")
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
