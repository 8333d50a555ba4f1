"""Strongly connected components of directed graphs."""

from __future__ import annotations

import itertools
from collections.abc import Iterator

from graaf.types import GraphLike, GraphType, VertexId, graph_type_of

StronglyConnectedComponents = list[list[VertexId]]


def _require_directed(graph: GraphLike) -> None:
    if graph_type_of(graph) is not GraphType.DIRECTED:
        raise TypeError("strongly connected components require a directed graph")


def _finishing_order(graph: GraphLike) -> list[VertexId]:
    """Return the vertices in the order a depth-first search finishes them."""
    seen: set[VertexId] = set()
    order: list[VertexId] = []

    for root in graph.get_vertices():
        if root in seen:
            continue
        seen.add(root)
        stack: list[tuple[VertexId, Iterator[VertexId]]] = [
            (root, iter(graph.get_neighbors(root)))
        ]
        while stack:
            current, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor not in seen:
                    seen.add(neighbor)
                    stack.append((neighbor, iter(graph.get_neighbors(neighbor))))
                    break
            else:
                stack.pop()
                order.append(current)

    return order


def _transposed_adjacency(graph: GraphLike) -> dict[VertexId, list[VertexId]]:
    """Return the adjacency of the graph with every edge reversed."""
    transposed: dict[VertexId, list[VertexId]] = {
        vertex_id: [] for vertex_id in graph.get_vertices()
    }
    for source in graph.get_vertices():
        for target in graph.get_neighbors(source):
            transposed.setdefault(target, []).append(source)
    return transposed


def _collect_component(
    start: VertexId,
    adjacency: dict[VertexId, list[VertexId]],
    seen: set[VertexId],
) -> list[VertexId]:
    component = [start]
    seen.add(start)
    stack: list[Iterator[VertexId]] = [iter(adjacency.get(start, ()))]
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in seen:
                seen.add(neighbor)
                component.append(neighbor)
                stack.append(iter(adjacency.get(neighbor, ())))
                break
        else:
            stack.pop()
    return component


def kosarajus_strongly_connected_components(
    graph: GraphLike,
) -> StronglyConnectedComponents:
    """Find the strongly connected components of a directed graph (Kosaraju).

    Returns a list of components, each a list of vertex ids. Raises TypeError
    for an undirected graph.
    """
    _require_directed(graph)
    if not graph.get_vertices():
        return []

    order = _finishing_order(graph)
    transposed = _transposed_adjacency(graph)

    seen: set[VertexId] = set()
    return [
        _collect_component(vertex_id, transposed, seen)
        for vertex_id in reversed(order)
        if vertex_id not in seen
    ]


def tarjans_strongly_connected_components(
    graph: GraphLike,
) -> StronglyConnectedComponents:
    """Find the strongly connected components of a directed graph (Tarjan).

    Returns a list of components, each a list of vertex ids. Raises TypeError
    for an undirected graph.
    """
    _require_directed(graph)

    sccs: StronglyConnectedComponents = []
    indices: dict[VertexId, int] = {}
    low_links: dict[VertexId, int] = {}
    on_stack: set[VertexId] = set()
    stack: list[VertexId] = []
    counter = itertools.count()

    def visit(vertex: VertexId) -> tuple[VertexId, Iterator[VertexId]]:
        indices[vertex] = low_links[vertex] = next(counter)
        stack.append(vertex)
        on_stack.add(vertex)
        return vertex, iter(graph.get_neighbors(vertex))

    for root in graph.get_vertices():
        if root in indices:
            continue
        work = [visit(root)]
        while work:
            vertex, neighbors = work[-1]
            for neighbor in neighbors:
                if neighbor not in indices:
                    work.append(visit(neighbor))
                    break
                if neighbor in on_stack:
                    low_links[vertex] = min(low_links[vertex], indices[neighbor])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low_links[parent] = min(low_links[parent], low_links[vertex])
                if low_links[vertex] == indices[vertex]:
                    component: list[VertexId] = []
                    while True:
                        top = stack.pop()
                        on_stack.discard(top)
                        component.append(top)
                        if top == vertex:
                            break
                    sccs.append(component)

    return sccs