"""Relations - Edge directions and their payload cells.

This module defines the adjacency records stored on each vertex:
- EdgeDirectionKind: STRONG (a real edge) or WEAK (undirected mirror)
- EdgeValue: Payload cell shared by the two halves of an undirected edge
- EdgeDirection: One outgoing adjacency record
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

ET = TypeVar("ET")


class EdgeDirectionKind(Enum):
    """Kinds of edge directions.

    - STRONG: A genuine edge, written on serialization
    - WEAK: The mirror half created for an undirected edge so both
      endpoints see each other; never written on its own
    """

    STRONG = "strong"
    WEAK = "weak"


class EdgeValue(Generic[ET]):
    """Read-only cell holding an optional edge payload.

    Both halves of an undirected edge reference the same cell, so the
    payload is stored once.
    """

    __slots__ = ("_value",)

    def __init__(self, value: ET | None = None) -> None:
        self._value = value

    @property
    def value(self) -> ET | None:
        return self._value

    def is_set(self) -> bool:
        return self._value is not None

    def __repr__(self) -> str:
        return f"EdgeValue({self._value!r})"


@dataclass(eq=False)
class EdgeDirection(Generic[ET]):
    """An outgoing adjacency record.

    Equality compares target ids only. Payload and kind are ignored, which
    is what turns a repeated add_edge into a no-op.

    Attributes:
        to_vertex_id: Id of the vertex this direction points at.
        cell: Payload cell, shared with the mirror half when undirected.
        kind: STRONG or WEAK.
    """

    to_vertex_id: int
    cell: EdgeValue[ET] = field(default_factory=EdgeValue)
    kind: EdgeDirectionKind = EdgeDirectionKind.STRONG

    @classmethod
    def strong(cls, to_vertex_id: int, cell: EdgeValue[ET]) -> EdgeDirection[ET]:
        return cls(to_vertex_id, cell, EdgeDirectionKind.STRONG)

    @classmethod
    def weak(cls, to_vertex_id: int, cell: EdgeValue[ET]) -> EdgeDirection[ET]:
        return cls(to_vertex_id, cell, EdgeDirectionKind.WEAK)

    @property
    def value(self) -> ET | None:
        """The edge payload, or None."""
        return self.cell.value

    @property
    def is_strong(self) -> bool:
        return self.kind is EdgeDirectionKind.STRONG

    def __eq__(self, other: object) -> bool:
        """Check equality based on target id."""
        if not isinstance(other, EdgeDirection):
            return NotImplemented
        return self.to_vertex_id == other.to_vertex_id

    def __hash__(self) -> int:
        """Hash based on target id."""
        return hash(self.to_vertex_id)


__all__ = ["EdgeDirectionKind", "EdgeValue", "EdgeDirection"]
