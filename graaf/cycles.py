"""Cycle detection by depth-first search."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import Optional

from graaf.types import GraphLike, GraphType, VertexId, graph_type_of


class _Color(enum.Enum):
    UNVISITED = enum.auto()
    VISITED = enum.auto()
    NO_CYCLE = enum.auto()


def _has_directed_cycle(graph: GraphLike) -> bool:
    colors: dict[VertexId, _Color] = {}

    for root in graph.get_vertices():
        if colors.get(root, _Color.UNVISITED) is not _Color.UNVISITED:
            continue
        colors[root] = _Color.VISITED
        stack: list[tuple[VertexId, Iterator[VertexId]]] = [
            (root, iter(graph.get_neighbors(root)))
        ]
        while stack:
            current, neighbors = stack[-1]
            for neighbor in neighbors:
                color = colors.get(neighbor, _Color.UNVISITED)
                if color is _Color.VISITED:
                    return True
                if color is _Color.UNVISITED:
                    colors[neighbor] = _Color.VISITED
                    stack.append((neighbor, iter(graph.get_neighbors(neighbor))))
                    break
            else:
                colors[current] = _Color.NO_CYCLE
                stack.pop()

    return False


def _has_undirected_cycle(graph: GraphLike) -> bool:
    # A forest on n vertices has fewer than n edges.
    if graph.vertex_count() > 0 and graph.edge_count() >= graph.vertex_count():
        return True

    visited: set[VertexId] = set()
    for root in graph.get_vertices():
        if root in visited:
            continue
        visited.add(root)
        stack: list[tuple[VertexId, Optional[VertexId], Iterator[VertexId]]] = [
            (root, None, iter(graph.get_neighbors(root)))
        ]
        while stack:
            current, parent, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor == parent:
                    continue
                if neighbor in visited:
                    return True
                visited.add(neighbor)
                stack.append((neighbor, current, iter(graph.get_neighbors(neighbor))))
                break
            else:
                stack.pop()

    return False


def dfs_cycle_detection(graph: GraphLike) -> bool:
    """Return True if the graph contains a cycle."""
    if graph_type_of(graph) is GraphType.DIRECTED:
        return _has_directed_cycle(graph)
    return _has_undirected_cycle(graph)