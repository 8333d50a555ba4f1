"""Degree properties of the vertices of a graph."""

from __future__ import annotations

from graaf.types import GraphLike, GraphType, VertexId, graph_type_of


def vertex_outdegree(graph: GraphLike, vertex_id: VertexId) -> int:
    """Return the number of neighbours of a vertex."""
    return len(graph.get_neighbors(vertex_id))


def vertex_indegree(graph: GraphLike, vertex_id: VertexId) -> int:
    """Return the number of vertices that have the vertex as a neighbour.

    For an undirected graph this equals the outdegree.
    """
    if graph_type_of(graph) is GraphType.UNDIRECTED:
        return vertex_outdegree(graph, vertex_id)
    return sum(
        1
        for current in graph.get_vertices()
        if vertex_id in graph.get_neighbors(current)
    )


def vertex_degree(graph: GraphLike, vertex_id: VertexId) -> int:
    """Return the degree of a vertex.

    For a directed graph this is the sum of indegree and outdegree.
    """
    if graph_type_of(graph) is GraphType.UNDIRECTED:
        return vertex_outdegree(graph, vertex_id)
    return vertex_outdegree(graph, vertex_id) + vertex_indegree(graph, vertex_id)