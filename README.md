# graaf

Graph algorithms that work on any object meeting a small graph protocol,
`graaf.types.GraphLike`. Only the standard library is used.

## Installation

From a checkout of the package:

```
pip install .
```

With the test dependency, then running the tests:

```
pip install ".[test]"
pytest
```

## The graph protocol

The algorithms take a graph that provides these methods:

- `get_vertices()`: a mapping from vertex id (an `int`) to vertex value
- `get_edges()`: a mapping from `(source, target)` to edge value
- `get_neighbors(vertex_id)`: the set of vertex ids reachable over one edge
- `get_edge(source, target)`: the edge value between two vertices
- `vertex_count()` and `edge_count()`
- `is_directed()`

`GraphLike` is a runtime-checkable `typing.Protocol`.
`graaf.types.graph_type_of(graph)` returns `GraphType.DIRECTED` or
`GraphType.UNDIRECTED`, and raises `TypeError` for an object that does not
provide the protocol.

For an undirected graph, `get_neighbors` is expected to list a vertex's
neighbours on both ends of each edge.

## What is included

| Module | Contents |
| --- | --- |
| `graaf.types` | `GraphType`, `GraphLike`, `graph_type_of` |
| `graaf.traversal` | `breadth_first_traverse`, `depth_first_traverse` |
| `graaf.properties` | `vertex_degree`, `vertex_outdegree`, `vertex_indegree` |
| `graaf.cycles` | `dfs_cycle_detection` |
| `graaf.paths` | `GraphPath`, `a_star_search`, `dijkstra_shortest_paths` |
| `graaf.components` | `kosarajus_strongly_connected_components`, `tarjans_strongly_connected_components` |
| `graaf.dot` | `to_dot`, `default_vertex_writer`, `default_edge_writer` |

### Traversal

`breadth_first_traverse(graph, start_vertex, edge_callback=None,
search_termination_strategy=None)` and `depth_first_traverse(...)` visit
every vertex reachable from `start_vertex`. `edge_callback` is called with
each traversed edge id `(source, target)`. `search_termination_strategy` is
a predicate on vertex ids; the traversal stops as soon as it returns true.

### Vertex degrees

`vertex_outdegree` counts a vertex's neighbours. `vertex_indegree` counts
the vertices that have it as a neighbour; for an undirected graph it equals
the outdegree. `vertex_degree` is indegree plus outdegree for a directed
graph and the outdegree for an undirected one.

### Cycle detection

`dfs_cycle_detection(graph)` returns `True` if the graph has a cycle. For an
undirected graph with at least as many edges as vertices it returns `True`
at once.

### Shortest paths

`GraphPath` is a dataclass with `vertices` (a list of vertex ids) and
`total_weight`.

- `a_star_search(graph, start_vertex, target_vertex, heuristic, weight=None)`
  returns a `GraphPath`, or `None` if the target cannot be reached.
  `heuristic` estimates the cost from a vertex to the target.
- `dijkstra_shortest_paths(graph, source_vertex, weight=None)` returns a
  dict from each reachable vertex id to its `GraphPath`; unreachable
  vertices are absent.

`weight` maps an edge value to its weight. By default an edge with a
`get_weight()` method weighs what that returns, a real number weighs itself,
and any other edge weighs 1. Both functions raise `ValueError` when they
reach an edge with a negative weight, with a message such as
`Negative edge weight [-1] between vertices [0] -> [1].`

### Strongly connected components

Both functions return a list of components, each a list of vertex ids, and
raise `TypeError` when given an undirected graph.

### DOT export

`to_dot(graph, path, vertex_writer=default_vertex_writer,
edge_writer=default_edge_writer)` writes `digraph` with `->` edges for a
directed graph and `graph` with `--` edges for an undirected one. Each
writer returns the attribute text placed inside the brackets of its line.
The default vertex writer writes `label="<id>: <value>"`; the default edge
writer writes the edge weight as its label, floats with six decimals.

## Example

```python
from graaf.dot import to_dot
from graaf.paths import dijkstra_shortest_paths
from graaf.traversal import breadth_first_traverse


class Digraph:
    def __init__(self):
        self.vertices = {}
        self.edges = {}

    def add_vertex(self, value):
        vertex_id = len(self.vertices)
        self.vertices[vertex_id] = value
        return vertex_id

    def add_edge(self, source, target, value):
        self.edges[(source, target)] = value

    def get_vertices(self):
        return self.vertices

    def get_edges(self):
        return self.edges

    def get_neighbors(self, vertex_id):
        return {t for (s, t) in self.edges if s == vertex_id}

    def get_edge(self, source, target):
        return self.edges[(source, target)]

    def vertex_count(self):
        return len(self.vertices)

    def edge_count(self):
        return len(self.edges)

    def is_directed(self):
        return True


graph = Digraph()
a, b, c = (graph.add_vertex(v) for v in (10, 20, 30))
graph.add_edge(a, b, 1)
graph.add_edge(b, c, 2)
graph.add_edge(a, c, 5)

seen = []
breadth_first_traverse(graph, a, seen.append)

paths = dijkstra_shortest_paths(graph, a)
print(paths[c].vertices, paths[c].total_weight)  # [0, 1, 2] 3

to_dot(graph, "graph.dot")
```

## What the package does not do

The package has no graph class of its own: it only runs algorithms on
objects that meet `GraphLike`, and it never changes them. It writes DOT
files but does not read them, and it has no command-line program.