"""Vertex - Node representation for the adjacency-list graph.

A vertex owns its outgoing edge directions. Directions keep no back
reference to their source, so removing a vertex means scrubbing every
other vertex's list (see Graph.delete_vertex).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterator, TypeVar

from tgfgraph.graph.relations import EdgeDirection, EdgeDirectionKind, EdgeValue

VT = TypeVar("VT")
ET = TypeVar("ET")


@dataclass
class Vertex(Generic[VT, ET]):
    """A vertex in the graph.

    Attributes:
        id: Unsigned integer identifier, unique within a graph.
        value: Optional payload.
    """

    id: int
    value: VT | None = None

    # Internal storage (prefixed), in insertion order
    _edge_directions: list[EdgeDirection[ET]] = field(default_factory=list, repr=False)

    # Iterator access
    def iter_edge_directions(self) -> Iterator[EdgeDirection[ET]]:
        """Iterate over all outgoing directions, STRONG and WEAK."""
        yield from self._edge_directions

    def iter_strong_directions(self) -> Iterator[EdgeDirection[ET]]:
        """Iterate over directions that are genuine edges."""
        for direction in self._edge_directions:
            if direction.kind is EdgeDirectionKind.STRONG:
                yield direction

    def target_ids(self) -> Iterator[int]:
        """Iterate over target ids in adjacency order (may be dangling)."""
        for direction in self._edge_directions:
            yield direction.to_vertex_id

    def degree(self) -> int:
        """Return number of outgoing directions."""
        return len(self._edge_directions)

    def has_direction_to(self, vertex_id: int) -> bool:
        """Check if an outgoing direction targets vertex_id."""
        return EdgeDirection(vertex_id) in self._edge_directions

    def get_direction(self, vertex_id: int) -> EdgeDirection[ET] | None:
        """Return the direction targeting vertex_id, or None."""
        for direction in self._edge_directions:
            if direction.to_vertex_id == vertex_id:
                return direction
        return None

    def add_direction(
        self,
        to_vertex_id: int,
        cell: EdgeValue[ET],
        kind: EdgeDirectionKind = EdgeDirectionKind.STRONG,
    ) -> bool:
        """Append a direction unless one to the same target exists.

        Args:
            to_vertex_id: Target vertex id.
            cell: Payload cell (shared with the mirror half if undirected).
            kind: STRONG or WEAK.

        Returns:
            True if the direction was appended, False if it was a duplicate.
        """
        direction = EdgeDirection(to_vertex_id, cell, kind)
        if direction in self._edge_directions:
            return False
        self._edge_directions.append(direction)
        return True

    def remove_direction(self, to_vertex_id: int) -> bool:
        """Remove the first direction to to_vertex_id.

        Returns:
            True if a direction was removed.
        """
        return self._remove_first(lambda d: d.to_vertex_id == to_vertex_id)

    def _remove_first(self, predicate: Callable[[EdgeDirection[ET]], bool]) -> bool:
        for i, direction in enumerate(self._edge_directions):
            if predicate(direction):
                del self._edge_directions[i]
                return True
        return False
