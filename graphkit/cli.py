"""Command that runs the spanning-tree and shortest-path algorithms on a sample graph."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from graphkit.algorithms import dijkstra, kruskal, prim
from graphkit.graph import Graph


def build_sample_graph() -> Graph:
    """Return the five-vertex demonstration graph."""
    graph = Graph(5)
    graph.add_edge(0, 1, 1)
    graph.add_edge(0, 4, 4)
    graph.add_edge(1, 2, 2)
    graph.add_edge(1, 3, 5)
    graph.add_edge(2, 3, 1)
    graph.add_edge(3, 4, 3)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample graph, its spanning trees and its shortest-path tree."""
    parser = argparse.ArgumentParser(
        prog="graphkit",
        description="Run Kruskal, Prim and Dijkstra on a sample graph.",
    )
    parser.parse_args(argv)

    graph = build_sample_graph()

    print("Original Graph:")
    graph.print_graph()

    print("\nKruskal's MST:")
    kruskal(graph).print_graph()

    print("\nPrim's MST:")
    prim(graph).print_graph()

    print("\nDijkstra's Shortest Paths from Node 0:")
    dijkstra(graph, 0).print_graph()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())