"""Traversal, shortest-path and spanning-tree algorithms over :class:`Graph`."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from graphkit.graph import Edge, Graph
from graphkit.structures import PriorityQueue, Queue, UnionFind


class Color(Enum):
    """Visit state of a vertex during a traversal."""

    WHITE = 0
    GRAY = 1
    BLACK = 2


def _check_start(graph: Graph, start: int, label: str = "Vertex") -> None:
    if not 0 <= start < graph.num_vertices:
        raise IndexError(f"{label} {start} is out of bounds")


def bfs(graph: Graph, start: int) -> Graph:
    """Return the breadth-first tree of ``graph`` rooted at ``start``.

    Each tree edge carries the hop distance of its child vertex from
    ``start`` as its weight.  Vertices unreachable from ``start`` are absent
    from the visit order.
    """
    n = graph.num_vertices
    _check_start(graph, start)

    tree = Graph(n)
    color = [Color.WHITE] * n
    parent: list[int | None] = [None] * n
    distance: list[int | None] = [None] * n

    queue = Queue(n)
    queue.enqueue(start)
    color[start] = Color.GRAY
    distance[start] = 0

    while not queue.is_empty():
        u = queue.dequeue()
        tree.record_visit(u)
        for edge in graph.neighbors(u):
            v = edge.vertex
            if color[v] is Color.WHITE:
                color[v] = Color.GRAY
                distance[v] = distance[u] + 1
                parent[v] = u
                queue.enqueue(v)
        color[u] = Color.BLACK

    for vertex, (par, dist) in enumerate(zip(parent, distance)):
        if par is not None:
            tree.add_edge(par, vertex, dist)

    print("BFS Tree built successfully")
    return tree


def _dfs_visit(graph: Graph, tree: Graph, root: int, color: list[Color]) -> None:
    color[root] = Color.GRAY
    tree.record_visit(root)
    stack: list[tuple[int, Iterator[Edge]]] = [(root, iter(graph.neighbors(root)))]
    while stack:
        u, edges = stack[-1]
        for edge in edges:
            v = edge.vertex
            if color[v] is Color.WHITE:
                tree.add_edge(u, v, edge.weight)
                color[v] = Color.GRAY
                tree.record_visit(v)
                stack.append((v, iter(graph.neighbors(v))))
                break
        else:
            color[u] = Color.BLACK
            stack.pop()


def dfs(graph: Graph, start: int) -> Graph:
    """Return the depth-first forest of ``graph``, starting at ``start``.

    After the tree rooted at ``start`` is complete, every still unvisited
    vertex, in increasing order, roots a further tree.
    """
    n = graph.num_vertices
    _check_start(graph, start)

    tree = Graph(n)
    color = [Color.WHITE] * n

    _dfs_visit(graph, tree, start, color)
    for vertex in range(n):
        if color[vertex] is Color.WHITE:
            _dfs_visit(graph, tree, vertex, color)

    print("DFS Tree/Forest built successfully")
    return tree


def dijkstra(graph: Graph, start: int) -> Graph:
    """Return the shortest-path tree of ``graph`` from ``start``.

    The visit order lists every reached vertex other than ``start``, in
    increasing vertex order.  Raises ValueError on a negative edge weight.
    """
    n = graph.num_vertices
    _check_start(graph, start, "Start vertex")

    distance: list[float] = [math.inf] * n
    prev: list[int | None] = [None] * n
    visited = [False] * n

    queue = PriorityQueue(n)
    distance[start] = 0
    queue.insert(start, 0)

    while not queue.is_empty():
        u = queue.extract_min()
        if visited[u]:
            continue
        visited[u] = True

        for edge in graph.neighbors(u):
            v, weight = edge.vertex, edge.weight
            if weight < 0:
                raise ValueError(
                    "Negative edge weight detected. "
                    "Dijkstra cannot handle negative weights."
                )
            candidate = distance[u] + weight
            if not visited[v] and candidate < distance[v]:
                distance[v] = candidate
                prev[v] = u
                if v in queue:
                    queue.decrease_priority(v, candidate)
                else:
                    queue.insert(v, candidate)

    tree = Graph(n)
    for vertex, par in enumerate(prev):
        if par is None:
            continue
        weight = next(
            (edge.weight for edge in graph.neighbors(par) if edge.vertex == vertex), 0
        )
        tree.add_edge(par, vertex, weight)
        print(f"Added edge: {par} - {vertex} weight: {weight}")
        tree.record_visit(vertex)

    print("Dijkstra Tree built successfully")
    return tree


def prim(graph: Graph) -> Graph:
    """Return the minimum spanning tree of the component holding vertex 0."""
    n = graph.num_vertices
    tree = Graph(n)

    queue = PriorityQueue(n)
    in_tree = [False] * n
    key: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n

    key[0] = 0
    queue.insert(0, 0)

    while not queue.is_empty():
        u = queue.extract_min()
        if in_tree[u]:
            continue
        in_tree[u] = True
        tree.record_visit(u)

        for edge in graph.neighbors(u):
            v, weight = edge.vertex, edge.weight
            if not in_tree[v] and weight < key[v]:
                key[v] = weight
                parent[v] = u
                if v in queue:
                    queue.decrease_priority(v, weight)
                else:
                    queue.insert(v, weight)

    for vertex in range(1, n):
        par = parent[vertex]
        if par is not None:
            tree.add_edge(par, vertex, key[vertex])

    return tree


@dataclass(frozen=True)
class _WeightedEdge:
    u: int
    v: int
    weight: int


def kruskal(graph: Graph) -> Graph:
    """Return a minimum spanning forest of ``graph`` built by Kruskal's method.

    The visit order lists vertices in the order their first tree edge joined.
    """
    n = graph.num_vertices
    tree = Graph(n)
    sets = UnionFind(n)

    edges: list[_WeightedEdge] = []
    queue = PriorityQueue(n * n)
    for u in range(n):
        for edge in graph.neighbors(u):
            if u < edge.vertex:
                queue.insert(len(edges), edge.weight)
                edges.append(_WeightedEdge(u, edge.vertex, edge.weight))

    visited = [False] * n
    edges_added = 0
    while not queue.is_empty() and edges_added < n - 1:
        edge = edges[queue.extract_min()]
        if sets.find(edge.u) == sets.find(edge.v):
            continue
        tree.add_edge(edge.u, edge.v, edge.weight)
        sets.unite(edge.u, edge.v)
        for vertex in (edge.u, edge.v):
            if not visited[vertex]:
                tree.record_visit(vertex)
                visited[vertex] = True
        edges_added += 1

    return tree