#!/usr/bin/env python3
"""
graphkit CLI - run a graph algorithm over an edge-list file.

Usage:
    python scripts/run.py data/sample_graph.json bfs --start A
    python scripts/run.py data/sample_graph.json dfs --start A
    python scripts/run.py data/sample_graph.json dijkstra --start A
    python scripts/run.py data/sample_graph.json mst
    python scripts/run.py graph.msgpack mst --json

Algorithms:
    bfs       - Breadth-first visitation order
    dfs       - Depth-first visitation order
    dijkstra  - Shortest path cost to every reachable node
    mst       - Prim-Jarnik minimum spanning tree
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graphkit.config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL  # noqa: E402
from graphkit.data import graph_to_dict, load_graph  # noqa: E402
from graphkit.graph import DisconnectedGraphError, Graph, GraphError  # noqa: E402

ALGORITHMS = ["bfs", "dfs", "dijkstra", "mst"]


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a graph algorithm over an edge-list file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "graph_file",
        type=Path,
        help="Edge-list file (.json, .msgpack or .mpk)",
    )
    parser.add_argument(
        "algorithm",
        choices=ALGORITHMS,
        help="Algorithm to run",
    )
    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Start node (required for bfs/dfs/dijkstra, optional for mst)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def run_traversal(graph: Graph, algorithm: str, start: str, as_json: bool) -> None:
    order: list[str] = []
    visit = lambda node: order.append(node.name)  # noqa: E731

    if algorithm == "bfs":
        graph.breadth_first_search(start, visit)
    else:
        graph.depth_first_search(start, visit)

    if as_json:
        print(json.dumps(order))
        return

    print(f"{algorithm.upper()} from '{start}' ({len(order)} of {graph.size()} nodes):")
    for i, name in enumerate(order):
        print(f"  {i}. {name}")


def run_dijkstra(graph: Graph, start: str, as_json: bool) -> None:
    costs = graph.dijkstra(start)
    ranked = sorted(costs.items(), key=lambda item: (item[1], item[0].name))

    if as_json:
        print(json.dumps({node.name: cost for node, cost in ranked}))
        return

    print(f"Shortest path costs from '{start}':")
    width = max(len(node.name) for node, _ in ranked)
    for node, cost in ranked:
        print(f"  {node.name:<{width}}  {cost}")

    unreachable = sorted(n.name for n in graph if n not in costs)
    if unreachable:
        print(f"\nUnreachable: {', '.join(unreachable)}")


def run_mst(graph: Graph, start: str | None, as_json: bool) -> None:
    tree = graph.prim_jarnik(start)

    if as_json:
        print(json.dumps(graph_to_dict(tree)))
        return

    print(f"Minimum spanning tree ({tree.edge_count()} edges):")
    for a, b, weight in sorted(tree.edges(), key=lambda e: (e[2], e[0], e[1])):
        print(f"  {a} - {b}  {weight}")
    print(f"\nTotal weight: {tree.total_weight()}")


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if args.algorithm != "mst" and args.start is None:
        print(f"Error: --start is required for {args.algorithm}", file=sys.stderr)
        return 2

    try:
        graph = load_graph(args.graph_file)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        if args.algorithm in ("bfs", "dfs"):
            run_traversal(graph, args.algorithm, args.start, args.json)
        elif args.algorithm == "dijkstra":
            run_dijkstra(graph, args.start, args.json)
        else:
            run_mst(graph, args.start, args.json)
    except DisconnectedGraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Partial tree covers {e.partial.size()} nodes", file=sys.stderr)
        return 1
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
