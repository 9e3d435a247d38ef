"""Graph Builder - The graph container and its mutation API.

Graph maps vertex ids to Vertex objects and enforces the structural
invariants: unique ids, and for undirected graphs a WEAK mirror for every
STRONG direction, both sharing one payload cell.
"""

from __future__ import annotations

import copy
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterator, TypeVar

from tgfgraph.graph.errors import VertexAlreadyExists, VertexNotFound, WrongVertexIdType
from tgfgraph.graph.relations import EdgeDirection, EdgeDirectionKind, EdgeValue
from tgfgraph.graph.traversal import BfsRecord, bfs
from tgfgraph.graph.Vertex import Vertex

VT = TypeVar("VT")
ET = TypeVar("ET")

MAX_VERTEX_ID = 2**32 - 1


class GraphMode(Enum):
    """Edge semantics of a graph, fixed at construction."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


def check_vertex_id(vertex_id: object) -> int:
    """Validate an id as an unsigned 32-bit integer.

    Raises:
        WrongVertexIdType: If vertex_id is not an int in [0, 2**32 - 1].
    """
    if (
        isinstance(vertex_id, bool)
        or not isinstance(vertex_id, int)
        or not 0 <= vertex_id <= MAX_VERTEX_ID
    ):
        raise WrongVertexIdType(str(vertex_id))
    return vertex_id


@dataclass
class Graph(Generic[VT, ET]):
    """Adjacency-list graph with optional vertex and edge payloads.

    Attributes:
        mode: DIRECTED or UNDIRECTED; never changes after construction.
    """

    mode: GraphMode = GraphMode.UNDIRECTED

    # Internal storage (prefixed) - excluded from constructor
    _vertices: dict[int, Vertex[VT, ET]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.mode, GraphMode):
            self.mode = GraphMode(self.mode)

    @property
    def is_directed(self) -> bool:
        return self.mode is GraphMode.DIRECTED

    # ─────────────────────────────────────────────────────────────────────────
    # Read API
    # ─────────────────────────────────────────────────────────────────────────

    def contains_vertex(self, vertex_id: int) -> bool:
        """Check if a vertex id is in the graph."""
        return vertex_id in self._vertices

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def get_vertex(self, vertex_id: int) -> Vertex[VT, ET] | None:
        """Find vertex by id.

        Returns:
            The matching Vertex, or None if not found.
        """
        return self._vertices.get(vertex_id)

    def all_vertices(self) -> Iterator[Vertex[VT, ET]]:
        """Iterate all vertices in mapping order (unspecified)."""
        yield from self._vertices.values()

    def vertex_ids(self) -> Iterator[int]:
        """Iterate all vertex ids in mapping order (unspecified)."""
        yield from self._vertices.keys()

    def vertex_count(self) -> int:
        """Return total number of vertices."""
        return len(self._vertices)

    def iter_edges(self) -> Iterator[tuple[int, EdgeDirection[ET]]]:
        """Iterate genuine edges as (from_id, direction).

        WEAK mirrors and directions to vertices no longer in the graph are
        skipped.
        """
        for vertex in self._vertices.values():
            for direction in vertex.iter_strong_directions():
                if direction.to_vertex_id in self._vertices:
                    yield vertex.id, direction

    def edge_count(self) -> int:
        """Return number of genuine edges (an undirected edge counts once)."""
        return sum(1 for _ in self.iter_edges())

    def neighbor_ids(self, vertex_id: int) -> list[int]:
        """Live neighbors of a vertex in adjacency order.

        Raises:
            VertexNotFound: If vertex_id is not in the graph.
        """
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            raise VertexNotFound(vertex_id)
        return [t for t in vertex.target_ids() if t in self._vertices]

    def clone(self) -> Graph[VT, ET]:
        """Create a deep copy of this graph.

        Shared payload cells stay shared between mirror halves in the copy.
        """
        return copy.deepcopy(self)

    # ─────────────────────────────────────────────────────────────────────────
    # Vertex Mutation API
    # ─────────────────────────────────────────────────────────────────────────

    def add_vertex(self, vertex: Vertex[VT, ET]) -> None:
        """Insert a vertex.

        Raises:
            VertexAlreadyExists: If the id is already present.
            WrongVertexIdType: If the id is not an unsigned 32-bit integer.
        """
        check_vertex_id(vertex.id)
        if vertex.id in self._vertices:
            raise VertexAlreadyExists(vertex.id)
        self._vertices[vertex.id] = vertex

    def delete_vertex(self, vertex_id: int) -> None:
        """Remove a vertex and every direction pointing at it.

        Deleting an absent vertex is not an error.
        """
        self._vertices.pop(vertex_id, None)
        for vertex in self._vertices.values():
            vertex.remove_direction(vertex_id)

    # ─────────────────────────────────────────────────────────────────────────
    # Edge Mutation API
    # ─────────────────────────────────────────────────────────────────────────

    def add_edge(self, from_id: int, to_id: int, value: ET | None = None) -> None:
        """Add an edge between two existing vertices.

        Undirected graphs store a STRONG from->to and a WEAK to->from that
        share one payload cell. Directed graphs store only the STRONG half.
        An existing direction to the same target is left untouched.

        Args:
            from_id: Source vertex id.
            to_id: Target vertex id.
            value: Optional edge payload.

        Raises:
            VertexNotFound: If either endpoint is missing. Undirected graphs
                report from_id first; directed graphs report to_id first.
        """
        cell: EdgeValue[ET] = EdgeValue(value)

        if self.mode is GraphMode.UNDIRECTED:
            source = self._require(from_id)
            target = self._require(to_id)
            source.add_direction(to_id, cell, EdgeDirectionKind.STRONG)
            target.add_direction(from_id, cell, EdgeDirectionKind.WEAK)
        else:
            if to_id not in self._vertices:
                raise VertexNotFound(to_id)
            source = self._require(from_id)
            source.add_direction(to_id, cell, EdgeDirectionKind.STRONG)

    def delete_edge(self, from_id: int, to_id: int) -> None:
        """Remove an edge; absent edges and vertices are ignored.

        Undirected graphs remove both halves.
        """
        self._delete_edge_direction(from_id, to_id)
        if self.mode is GraphMode.UNDIRECTED:
            self._delete_edge_direction(to_id, from_id)

    def _delete_edge_direction(self, from_id: int, to_id: int) -> None:
        vertex = self._vertices.get(from_id)
        if vertex is not None:
            vertex.remove_direction(to_id)

    def _require(self, vertex_id: int) -> Vertex[VT, ET]:
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            raise VertexNotFound(vertex_id)
        return vertex

    # ─────────────────────────────────────────────────────────────────────────
    # Traversal API
    # ─────────────────────────────────────────────────────────────────────────

    def bfs(self, start_id: int) -> list[BfsRecord]:
        """Breadth-first traversal from start_id (see traversal.bfs).

        Raises:
            VertexNotFound: If start_id is not in the graph.
        """
        return bfs(self, start_id)

    def bfs_random_start(self) -> list[BfsRecord]:
        """Breadth-first traversal from an arbitrary vertex.

        Returns:
            Records in visitation order, or an empty list for an empty graph.
        """
        if not self._vertices:
            return []
        return bfs(self, random.choice(list(self._vertices)))


__all__ = ["Graph", "GraphMode", "MAX_VERTEX_ID", "check_vertex_id"]
