# graphkit

A small library for weighted, undirected graphs and the classic algorithms
that run on them. It uses only the standard library.

## What it offers

- `graphkit.graph.Graph`: a graph with a fixed number of vertices, numbered
  from 0. Each vertex keeps an adjacency list of `Edge(vertex, weight)`
  entries, with the most recently added edge first. Self-loops and duplicate
  edges are rejected. The graph has these members:
  - `num_vertices` and `visit_order` (read-only properties)
  - `add_edge(source, target, weight=1)` and `remove_edge(source, target)`
  - `neighbors(vertex)`: the adjacency list as a tuple of `Edge`
  - `record_visit(vertex)` and `reset_visit_order()`
  - `copy()`: an independent copy (`copy.copy` and `copy.deepcopy` do the same)
  - `total_weight()`: the sum of all edge weights, each edge counted once
  - `format()` and `print_graph(file=None)`: one line per vertex in the visit
    order, such as `0: (1, w=1) (4, w=4) `
- `graphkit.algorithms`: each function returns a new `Graph` holding the
  resulting tree or forest, with a visit order filled in.
  - `bfs(graph, start)`: breadth-first tree from `start`. Each tree edge
    carries the hop distance of its child vertex as its weight. The visit
    order is the order vertices were dequeued.
  - `dfs(graph, start)`: depth-first forest. After the tree rooted at `start`,
    every still unvisited vertex, in increasing order, roots another tree.
  - `dijkstra(graph, start)`: shortest-path tree from `start`. The visit order
    lists every reached vertex other than `start`, in increasing vertex order.
  - `prim(graph)`: minimum spanning tree of the component holding vertex 0.
  - `kruskal(graph)`: minimum spanning forest. The visit order lists vertices
    in the order their first tree edge was taken.
  - `Color`: the `WHITE`/`GRAY`/`BLACK` visit states used by the traversals.

  `bfs`, `dfs` and `dijkstra` print progress messages to standard output
  (for example `BFS Tree built successfully`).
- `graphkit.structures`: the supporting containers `Queue`, `PriorityQueue`
  and `UnionFind`. `Queue` and `PriorityQueue` have a fixed capacity and
  support `len()` and `in`.

## Installation

```
pip install .
```

## Usage

```python
from graphkit.graph import Graph
from graphkit.algorithms import kruskal, prim, dijkstra

g = Graph(5)
g.add_edge(0, 1, 1)
g.add_edge(0, 4, 4)
g.add_edge(1, 2, 2)
g.add_edge(1, 3, 5)
g.add_edge(2, 3, 1)
g.add_edge(3, 4, 3)

print(kruskal(g).total_weight())   # 7
print(prim(g).total_weight())      # 7

tree = dijkstra(g, 0)              # shortest-path tree rooted at 0
print(tree.total_weight())         # 8
tree.print_graph()

for edge in g.neighbors(1):
    print(edge.vertex, edge.weight)
```

## Errors

- A vertex index outside the graph raises `IndexError`, as does a `UnionFind`
  element out of range, or taking from an empty `Queue` or `PriorityQueue`.
- `Graph(0)` or any non-positive size, a self-loop, a duplicate edge, a
  missing edge, or a negative edge weight given to `dijkstra` raises
  `ValueError`. So does inserting an index already in a `PriorityQueue`, or
  raising, rather than lowering, a priority with `decrease_priority`.
- Adding to a full `Queue` or `PriorityQueue` raises `OverflowError`.

## Command line

The package installs a demonstration command. It builds a fixed five-vertex
sample graph and prints that graph, its Kruskal and Prim spanning trees, and
its Dijkstra shortest-path tree from vertex 0:

```
graphkit-demo
```

## What it does not do

- Graphs are undirected only, with integer weights.
- There is no file format for reading or saving graphs; graphs are built in
  code. The command takes no input and always runs on its built-in sample.

## Running the tests

```
pip install .[test]
pytest
```