"""Serialization of graphs to the Graphviz dot format."""

from __future__ import annotations

import os
from collections.abc import Callable
from numbers import Real
from typing import Any, Union

from graaf.types import EdgeId, GraphLike, GraphType, VertexId, graph_type_of

VertexWriter = Callable[[VertexId, Any], str]
EdgeWriter = Callable[[EdgeId, Any], str]

_GRAPH_KEYWORDS = {GraphType.DIRECTED: "digraph", GraphType.UNDIRECTED: "graph"}
_EDGE_SPECIFIERS = {GraphType.DIRECTED: "->", GraphType.UNDIRECTED: "--"}


def _to_string(value: Any) -> str:
    """Render a value the way numeric labels are written in dot output."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def _edge_weight(edge: Any) -> Any:
    """Return the weight of an edge; edges without one weigh 1."""
    weight_getter = getattr(edge, "get_weight", None)
    if callable(weight_getter):
        return weight_getter()
    if isinstance(edge, Real):
        return edge
    return 1


def default_vertex_writer(vertex_id: VertexId, vertex: Any) -> str:
    """Label a vertex with its id and its value."""
    return f'label="{vertex_id}: {_to_string(vertex)}"'


def default_edge_writer(edge_id: EdgeId, edge: Any) -> str:
    """Label an edge with its weight."""
    return f'label="{_to_string(_edge_weight(edge))}"'


def to_dot(
    graph: GraphLike,
    path: Union[str, os.PathLike],
    vertex_writer: VertexWriter = default_vertex_writer,
    edge_writer: EdgeWriter = default_edge_writer,
) -> None:
    """Serialize a graph to dot format and write it to the file at path.

    vertex_writer turns a vertex id and vertex value into the attribute list
    of that vertex; edge_writer does the same for an edge id and edge value.
    """
    kind = graph_type_of(graph)
    specifier = _EDGE_SPECIFIERS[kind]

    with open(path, "w", encoding="utf-8") as dot_file:
        dot_file.write(f"{_GRAPH_KEYWORDS[kind]} {{\n")
        for vertex_id, vertex in graph.get_vertices().items():
            dot_file.write(f"\t{vertex_id} [{vertex_writer(vertex_id, vertex)}];\n")
        for edge_id, edge in graph.get_edges().items():
            source_id, target_id = edge_id
            dot_file.write(
                f"\t{source_id} {specifier} {target_id} "
                f"[{edge_writer(edge_id, edge)}];\n"
            )
        dot_file.write("}\n")