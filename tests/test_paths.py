import pytest

from graaf.paths import GraphPath, a_star_search, dijkstra_shortest_paths


class SimpleGraph:
    def __init__(self, directed=True):
        self._directed = directed
        self._vertices = {}
        self._edges = {}
        self._neighbors = {}

    def _key(self, source, target):
        if self._directed or source <= target:
            return (source, target)
        return (target, source)

    def add_vertex(self, value):
        vertex_id = len(self._vertices)
        self._vertices[vertex_id] = value
        self._neighbors[vertex_id] = set()
        return vertex_id

    def add_edge(self, source, target, edge):
        self._edges[self._key(source, target)] = edge
        self._neighbors[source].add(target)
        if not self._directed:
            self._neighbors[target].add(source)

    def get_vertices(self):
        return self._vertices

    def get_edges(self):
        return self._edges

    def get_neighbors(self, vertex_id):
        return self._neighbors.get(vertex_id, set())

    def get_edge(self, source, target):
        return self._edges[self._key(source, target)]

    def vertex_count(self):
        return len(self._vertices)

    def edge_count(self):
        return len(self._edges)

    def is_directed(self):
        return self._directed


class WeightedEdge:
    def __init__(self, weight):
        self._weight = weight

    def get_weight(self):
        return self._weight


def zero_heuristic(vertex_id):
    return 0


def complex_graph(directed, make_edge=lambda w: w):
    graph = SimpleGraph(directed=directed)
    v = [graph.add_vertex(value) for value in (10, 20, 30, 40, 50)]
    graph.add_edge(v[0], v[1], make_edge(1))
    graph.add_edge(v[1], v[2], make_edge(2))
    graph.add_edge(v[0], v[2], make_edge(3))
    graph.add_edge(v[2], v[3], make_edge(4))
    graph.add_edge(v[3], v[4], make_edge(5))
    graph.add_edge(v[2], v[4], make_edge(6))
    return graph, v


def cyclic_graph(directed):
    graph = SimpleGraph(directed=directed)
    v = [graph.add_vertex(value) for value in (10, 20, 30, 40, 50)]
    graph.add_edge(v[0], v[1], 1)
    graph.add_edge(v[1], v[2], 2)
    graph.add_edge(v[2], v[3], 3)
    graph.add_edge(v[3], v[1], 4)
    graph.add_edge(v[2], v[4], 5)
    return graph, v


DIRECTIONS = [True, False]


@pytest.mark.parametrize("directed", DIRECTIONS)
def test_dijkstra_minimal_path(directed):
    graph = SimpleGraph(directed=directed)
    vertex = graph.add_vertex(10)
    assert dijkstra_shortest_paths(graph, vertex) == {vertex: GraphPath([vertex], 0)}


@pytest.mark.parametrize("directed", DIRECTIONS)
def test_dijkstra_no_available_path(directed):
    graph = SimpleGraph(directed=directed)
    v1 = graph.add_vertex(10)
    v2 = graph.add_vertex(20)
    paths = dijkstra_shortest_paths(graph, v1)
    assert v2 not in paths
    assert set(paths) == {v1}


@pytest.mark.parametrize("directed", DIRECTIONS)
def test_dijkstra_simple_path(directed):
    graph = SimpleGraph(directed=directed)
    v1 = graph.add_vertex(10)
    v2 = graph.add_vertex(20)
    graph.add_edge(v1, v2, 3)
    assert dijkstra_shortest_paths(graph, v1)[v2] == GraphPath([v1, v2], 3)


@pytest.mark.parametrize("directed", DIRECTIONS)
@pytest.mark.parametrize("make_edge", [lambda w: w, float, WeightedEdge])
def test_dijkstra_more_complex_path(directed, make_edge):
    graph, v = complex_graph(directed, make_edge)
    paths = dijkstra_shortest_paths(graph, v[0])
    assert paths[v[4]] == GraphPath([v[0], v[2], v[4]], 9)


@pytest.mark.parametrize("directed", DIRECTIONS)
def test_dijkstra_cyclic_path(directed):
    graph, v = cyclic_graph(directed)
    paths = dijkstra_shortest_paths(graph, v[0])
    assert paths[v[4]] == GraphPath([v[0], v[1], v[2], v[4]], 8)


@pytest.mark.parametrize("directed", DIRECTIONS)
def test_dijkstra_paths_are_consistent(directed):
    graph, v = complex_graph(directed)
    paths = dijkstra_shortest_paths(graph, v[0])
    assert set(paths) == set(v)
    for target, path in paths.items():
        assert path.vertices[0] == v[0]
        assert path.vertices[-1] == target
        steps = zip(path.vertices, path.vertices[1:])
        assert sum(graph.get_edge(a, b) for a, b in steps) == path.total_weight


def test_dijkstra_unit_weight_for_plain_edges():
    graph = SimpleGraph(directed=True)
    v = [graph.add_vertex(value) for value in (10, 20, 30, 40, 50)]
    graph.add_edge(v[0], v[1], object())
    graph.add_edge(v[2], v[1], object())
    graph.add_edge(v[2], v[4], object())
    graph.add_edge(v[1], v[3], object())
    graph.add_edge(v[3], v[2], object())
    paths = dijkstra_shortest_paths(graph, v[0])
    assert paths[v[4]] == GraphPath([v[0], v[1], v[3], v[2], v[4]], 4)


def test_dijkstra_custom_weight_function():
    graph, v = complex_graph(True, lambda w: {"km": w})
    paths = dijkstra_shortest_paths(graph, v[0], lambda edge: edge["km"])
    assert paths[v[4]] == GraphPath([v[0], v[2], v[4]], 9)


@pytest.mark.parametrize("directed", DIRECTIONS)
@pytest.mark.parametrize("make_edge", [lambda w: w, float, WeightedEdge])
def test_dijkstra_negative_weight(directed, make_edge):
    graph = SimpleGraph(directed=directed)
    v1 = graph.add_vertex(10)
    v2 = graph.add_vertex(20)
    graph.add_edge(v1, v2, make_edge(-1))
    with pytest.raises(ValueError) as excinfo:
        dijkstra_shortest_paths(graph, v1)
    assert str(excinfo.value) == (
        f"Negative edge weight [-1] between vertices [{v1}] -> [{v2}]."
    )


@pytest.mark.parametrize("directed", DIRECTIONS)
def test_a_star_minimal_path(directed):
    graph = SimpleGraph(directed=directed)
    vertex = graph.add_vertex(10)
    assert a_star_search(graph, vertex, vertex, zero_heuristic) == GraphPath(
        [vertex], 0
    )


@pytest.mark.parametrize("directed", DIRECTIONS)
def test_a_star_no_available_path(directed):
    graph = SimpleGraph(directed=directed)
    v1 = graph.add_vertex(10)
    v2 = graph.add_vertex(20)
    assert a_star_search(graph, v1, v2, zero_heuristic) is None


@pytest.mark.parametrize("directed", DIRECTIONS)
def test_a_star_more_complex_path(directed):
    graph, v = complex_graph(directed)
    path = a_star_search(graph, v[0], v[4], zero_heuristic)
    assert path == GraphPath([v[0], v[2], v[4]], 9)


@pytest.mark.parametrize("directed", DIRECTIONS)
def test_a_star_cyclic_path(directed):
    graph, v = cyclic_graph(directed)
    path = a_star_search(graph, v[0], v[4], zero_heuristic)
    assert path == GraphPath([v[0], v[1], v[2], v[4]], 8)


@pytest.mark.parametrize("directed", DIRECTIONS)
def test_a_star_matches_dijkstra_with_admissible_heuristic(directed):
    graph, v = complex_graph(directed)
    paths = dijkstra_shortest_paths(graph, v[0])
    for target in v:
        heuristic = lambda vertex, t=target: 0 if vertex == t else 1
        path = a_star_search(graph, v[0], target, heuristic)
        assert path is not None
        assert path.total_weight == paths[target].total_weight
        assert path.vertices[0] == v[0]
        assert path.vertices[-1] == target


def test_a_star_directed_edge_wrong_direction():
    graph = SimpleGraph(directed=True)
    v1 = graph.add_vertex(10)
    v2 = graph.add_vertex(20)
    graph.add_edge(v2, v1, 1)
    assert a_star_search(graph, v1, v2, zero_heuristic) is None


def test_a_star_negative_weight():
    graph = SimpleGraph(directed=True)
    v1 = graph.add_vertex(10)
    v2 = graph.add_vertex(20)
    graph.add_edge(v1, v2, -1)
    with pytest.raises(ValueError) as excinfo:
        a_star_search(graph, v1, v2, zero_heuristic)
    assert str(excinfo.value) == (
        f"Negative edge weight [-1] between vertices [{v1}] -> [{v2}]."
    )


def test_a_star_custom_weight_function():
    graph, v = complex_graph(True, lambda w: {"km": w})
    path = a_star_search(graph, v[0], v[4], zero_heuristic, lambda edge: edge["km"])
    assert path == GraphPath([v[0], v[2], v[4]], 9)