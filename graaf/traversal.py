"""Breadth-first and depth-first traversal of a graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import Optional

from graaf.types import EdgeId, GraphLike, VertexId

EdgeCallback = Callable[[EdgeId], object]
TerminationStrategy = Callable[[VertexId], bool]


def _should_stop(strategy: Optional[TerminationStrategy], vertex: VertexId) -> bool:
    """Ask the termination strategy about a vertex; without one, never stop."""
    return strategy is not None and bool(strategy(vertex))


def _report(callback: Optional[EdgeCallback], edge: EdgeId) -> None:
    """Hand a traversed edge to the callback, if there is one."""
    if callback is not None:
        callback(edge)


def breadth_first_traverse(
    graph: GraphLike,
    start_vertex: VertexId,
    edge_callback: Optional[EdgeCallback] = None,
    search_termination_strategy: Optional[TerminationStrategy] = None,
) -> None:
    """Visit every vertex reachable from start_vertex in BFS order.

    edge_callback is called with each traversed edge id. The traversal stops
    as soon as search_termination_strategy returns True for a dequeued vertex.
    """
    seen: set[VertexId] = set()
    to_explore: deque[VertexId] = deque([start_vertex])

    while to_explore:
        current = to_explore.popleft()
        if _should_stop(search_termination_strategy, current):
            return
        seen.add(current)
        for neighbor in graph.get_neighbors(current):
            if neighbor not in seen:
                _report(edge_callback, (current, neighbor))
                to_explore.append(neighbor)


def depth_first_traverse(
    graph: GraphLike,
    start_vertex: VertexId,
    edge_callback: Optional[EdgeCallback] = None,
    search_termination_strategy: Optional[TerminationStrategy] = None,
) -> None:
    """Visit every vertex reachable from start_vertex in DFS order.

    edge_callback is called with each traversed edge id before descending
    along it. The whole traversal stops as soon as search_termination_strategy
    returns True for a visited vertex.
    """
    seen = {start_vertex}
    if _should_stop(search_termination_strategy, start_vertex):
        return

    stack = [(start_vertex, iter(graph.get_neighbors(start_vertex)))]
    while stack:
        current, neighbors = stack[-1]
        for neighbor in neighbors:
            if neighbor in seen:
                continue
            _report(edge_callback, (current, neighbor))
            seen.add(neighbor)
            if _should_stop(search_termination_strategy, neighbor):
                return
            stack.append((neighbor, iter(graph.get_neighbors(neighbor))))
            break
        else:
            stack.pop()