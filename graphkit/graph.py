"""Undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Edge:
    """One entry of an adjacency list: the neighbour and the edge weight."""

    vertex: int
    weight: int


class Graph:
    """An undirected weighted graph with a fixed number of vertices.

    Newly added edges go to the front of each adjacency list.  The graph also
    carries a visit order, filled in by traversal algorithms and used when
    printing.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices <= 0:
            raise ValueError("Number of vertices must be positive")
        self._num_vertices = num_vertices
        self._adjacency: list[list[Edge]] = [[] for _ in range(num_vertices)]
        self._visit_order: list[int] = []

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def visit_order(self) -> tuple[int, ...]:
        return tuple(self._visit_order)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._num_vertices:
            raise IndexError("Invalid vertex index")

    def add_edge(self, source: int, target: int, weight: int = 1) -> None:
        """Add an undirected edge; self-loops and duplicates are rejected."""
        if not (0 <= source < self._num_vertices and 0 <= target < self._num_vertices):
            raise IndexError("Invalid vertex index")
        if source == target:
            raise ValueError("Cannot add self-loop")
        if any(edge.vertex == target for edge in self._adjacency[source]):
            raise ValueError("Edge already exists")
        self._adjacency[source].insert(0, Edge(target, weight))
        self._adjacency[target].insert(0, Edge(source, weight))

    def remove_edge(self, source: int, target: int) -> None:
        """Remove the undirected edge between ``source`` and ``target``."""
        if not (0 <= source < self._num_vertices and 0 <= target < self._num_vertices):
            raise IndexError("Invalid vertex index")
        if source == target:
            raise ValueError("Cannot remove self-loop")
        if not self._adjacency[source] or not self._adjacency[target]:
            raise ValueError("Edge does not exist")
        self._remove_from_list(source, target)
        self._remove_from_list(target, source)

    def _remove_from_list(self, source: int, target: int) -> None:
        edges = self._adjacency[source]
        for pos, edge in enumerate(edges):
            if edge.vertex == target:
                del edges[pos]
                return
        raise ValueError("Edge does not exist")

    def neighbors(self, vertex: int) -> tuple[Edge, ...]:
        """Return the adjacency list of ``vertex``, most recent edge first."""
        self._check_vertex(vertex)
        return tuple(self._adjacency[vertex])

    def record_visit(self, vertex: int) -> None:
        """Append ``vertex`` to the visit order."""
        self._check_vertex(vertex)
        if len(self._visit_order) >= self._num_vertices:
            raise IndexError("Visit order is full")
        self._visit_order.append(vertex)

    def reset_visit_order(self) -> None:
        self._visit_order.clear()

    def copy(self) -> Graph:
        """Return an independent copy of the graph and its visit order."""
        clone = Graph(self._num_vertices)
        clone._adjacency = [list(edges) for edges in self._adjacency]
        clone._visit_order = list(self._visit_order)
        return clone

    def __copy__(self) -> Graph:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Graph:
        return self.copy()

    def total_weight(self) -> int:
        """Return the sum of the weights of all edges, each counted once."""
        return sum(
            edge.weight
            for vertex, edges in enumerate(self._adjacency)
            for edge in edges
            if edge.vertex > vertex
        )

    def format(self) -> str:
        """Render the adjacency lists of visited vertices, in visit order."""
        lines = []
        for vertex in self._visit_order:
            parts = "".join(
                f"({edge.vertex}, w={edge.weight}) " for edge in self._adjacency[vertex]
            )
            lines.append(f"{vertex}: {parts}\n")
        return "".join(lines)

    def print_graph(self, file: TextIO | None = None) -> None:
        """Write :meth:`format` to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.format())