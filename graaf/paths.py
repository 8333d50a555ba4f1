"""Weighted shortest paths: A* search and Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Optional

from graaf.types import GraphLike, VertexId

WeightFunction = Callable[[Any], Any]
Heuristic = Callable[[VertexId], Any]


@dataclass
class GraphPath:
    """A path through a graph and the sum of the weights along it."""

    vertices: list[VertexId] = field(default_factory=list)
    total_weight: Any = 0


@dataclass
class _PathVertex:
    id: VertexId
    dist_from_start: Any
    prev_id: VertexId


def _default_weight(edge: Any) -> Any:
    """Return the weight of an edge; edges without one weigh 1."""
    weight_getter = getattr(edge, "get_weight", None)
    if callable(weight_getter):
        return weight_getter()
    if isinstance(edge, Real):
        return edge
    return 1


def _format_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _checked_weight(
    graph: GraphLike, weight: WeightFunction, source: VertexId, target: VertexId
) -> Any:
    edge_weight = weight(graph.get_edge(source, target))
    if edge_weight < 0:
        raise ValueError(
            f"Negative edge weight [{_format_number(edge_weight)}] "
            f"between vertices [{source}] -> [{target}]."
        )
    return edge_weight


def _reconstruct_path(
    start_vertex: VertexId,
    end_vertex: VertexId,
    vertex_info: dict[VertexId, _PathVertex],
) -> Optional[GraphPath]:
    if end_vertex not in vertex_info:
        return None
    vertices = [end_vertex]
    current = end_vertex
    while current != start_vertex:
        current = vertex_info[current].prev_id
        vertices.append(current)
    vertices.reverse()
    return GraphPath(vertices, vertex_info[end_vertex].dist_from_start)


def a_star_search(
    graph: GraphLike,
    start_vertex: VertexId,
    target_vertex: VertexId,
    heuristic: Heuristic,
    weight: Optional[WeightFunction] = None,
) -> Optional[GraphPath]:
    """Find the shortest path from start_vertex to target_vertex with A*.

    heuristic estimates the cost from a vertex to the target. weight maps an
    edge value to its weight. Returns None if no path exists; raises
    ValueError on a negative edge weight.
    """
    weight = weight or _default_weight
    counter = itertools.count()

    g_score: dict[VertexId, Any] = {start_vertex: 0}
    vertex_info: dict[VertexId, _PathVertex] = {
        start_vertex: _PathVertex(start_vertex, heuristic(start_vertex), start_vertex)
    }
    open_set = [(vertex_info[start_vertex].dist_from_start, next(counter), start_vertex)]

    while open_set:
        _, _, current = heapq.heappop(open_set)
        if current == target_vertex:
            return _reconstruct_path(start_vertex, target_vertex, vertex_info)

        for neighbor in graph.get_neighbors(current):
            edge_weight = _checked_weight(graph, weight, current, neighbor)
            tentative_g_score = g_score[current] + edge_weight

            if neighbor not in vertex_info or tentative_g_score < g_score[neighbor]:
                g_score[neighbor] = tentative_g_score
                f_score = tentative_g_score + heuristic(neighbor)
                vertex_info[neighbor] = _PathVertex(neighbor, f_score, current)
                heapq.heappush(open_set, (f_score, next(counter), neighbor))

    return None


def dijkstra_shortest_paths(
    graph: GraphLike,
    source_vertex: VertexId,
    weight: Optional[WeightFunction] = None,
) -> dict[VertexId, GraphPath]:
    """Find the shortest paths from source_vertex to every reachable vertex.

    Unreachable vertices are absent from the result. Raises ValueError on a
    negative edge weight.
    """
    weight = weight or _default_weight
    counter = itertools.count()

    shortest_paths: dict[VertexId, GraphPath] = {
        source_vertex: GraphPath([source_vertex], 0)
    }
    to_explore = [(0, next(counter), source_vertex)]

    while to_explore:
        distance_so_far, _, current = heapq.heappop(to_explore)
        if distance_so_far > shortest_paths[current].total_weight:
            continue

        for neighbor in graph.get_neighbors(current):
            edge_weight = _checked_weight(graph, weight, current, neighbor)
            distance = distance_so_far + edge_weight

            known = shortest_paths.get(neighbor)
            if known is None or distance < known.total_weight:
                shortest_paths[neighbor] = GraphPath(
                    [*shortest_paths[current].vertices, neighbor], distance
                )
                heapq.heappush(to_explore, (distance, next(counter), neighbor))

    return shortest_paths