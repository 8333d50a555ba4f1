"""Vertex and edge identifiers and the graph interface the algorithms use."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from collections.abc import Set as AbstractSet
from typing import Any, Protocol, Tuple, runtime_checkable

VertexId = int
EdgeId = Tuple[int, int]


class GraphType(enum.Enum):
    """Whether the edges of a graph have a direction."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


@runtime_checkable
class GraphLike(Protocol):
    """The read-only view of a graph that the algorithms rely on.

    Vertices are identified by integer ids; an edge is identified by the pair
    of vertex ids it connects.
    """

    def get_vertices(self) -> Mapping[VertexId, Any]:
        """Return a mapping from vertex id to vertex value."""

    def get_edges(self) -> Mapping[EdgeId, Any]:
        """Return a mapping from edge id to edge value."""

    def get_neighbors(self, vertex_id: VertexId) -> AbstractSet[VertexId]:
        """Return the ids of the vertices reachable over one edge."""

    def get_edge(self, source: VertexId, target: VertexId) -> Any:
        """Return the edge value between two vertices."""

    def vertex_count(self) -> int:
        """Return the number of vertices."""

    def edge_count(self) -> int:
        """Return the number of edges."""

    def is_directed(self) -> bool:
        """Return True if the graph is directed."""


def graph_type_of(graph: GraphLike) -> GraphType:
    """Return the GraphType of a graph.

    Raises TypeError if the object does not provide the graph interface.
    """
    if not isinstance(graph, GraphLike):
        raise TypeError(f"{type(graph).__name__} does not provide the graph interface")
    return GraphType.DIRECTED if graph.is_directed() else GraphType.UNDIRECTED