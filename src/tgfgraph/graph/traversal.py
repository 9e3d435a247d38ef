"""Traversal - Breadth-first search over the adjacency lists.

Only read access to the graph is needed: vertex lookup and each vertex's
outgoing target ids.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, NamedTuple

from tgfgraph.graph.errors import VertexNotFound

if TYPE_CHECKING:
    from tgfgraph.graph.builder import Graph
    from tgfgraph.graph.Vertex import Vertex


class BfsRecord(NamedTuple):
    """One visited vertex.

    Attributes:
        id: The visited vertex id.
        value: The vertex payload, or None.
        neighbor_ids: Every live neighbor in adjacency order, visited or not.
    """

    id: int
    value: Any
    neighbor_ids: list[int]

    def format(self, show_value: bool = True) -> str:
        """Render as ``id value [n1, n2]`` or ``id [n1, n2]``."""
        neighbors = "[" + ", ".join(str(n) for n in self.neighbor_ids) + "]"
        if show_value and self.value is not None:
            return f"{self.id} {self.value} {neighbors}"
        return f"{self.id} {neighbors}"


def bfs(graph: Graph[Any, Any], start_id: int) -> list[BfsRecord]:
    """Breadth-first traversal from start_id.

    A vertex may be queued more than once; it is processed on its first
    dequeue only. Dangling targets are skipped.

    Args:
        graph: The graph to walk.
        start_id: Id of the first vertex to visit.

    Returns:
        Records in visitation order.

    Raises:
        VertexNotFound: If start_id is not in the graph.
    """
    start_vertex = graph.get_vertex(start_id)
    if start_vertex is None:
        raise VertexNotFound(start_id)

    result: list[BfsRecord] = []
    visited: set[int] = set()
    queue: deque[Vertex[Any, Any]] = deque([start_vertex])

    while queue:
        current = queue.popleft()
        if current.id in visited:
            continue
        visited.add(current.id)

        neighbors = [
            vertex
            for vertex in (graph.get_vertex(t) for t in current.target_ids())
            if vertex is not None
        ]
        queue.extend(v for v in neighbors if v.id not in visited)

        result.append(BfsRecord(current.id, current.value, [v.id for v in neighbors]))

    return result


__all__ = ["BfsRecord", "bfs"]
