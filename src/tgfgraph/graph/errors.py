"""Graph errors - Failure taxonomy shared by every graph operation.

All errors derive from GraphError so callers can catch the whole family,
and each also derives from the closest builtin (ValueError, LookupError,
OSError) so generic handlers keep working.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all graph failures."""


class VertexAlreadyExists(GraphError, ValueError):
    """A vertex with the same id is already in the graph."""

    def __init__(self, vertex_id: int) -> None:
        self.vertex_id = vertex_id
        super().__init__(f'vertex with id "{vertex_id}" already exists in the graph')


class VertexNotFound(GraphError, LookupError):
    """An operation referenced a vertex id that is not in the graph."""

    def __init__(self, vertex_id: int) -> None:
        self.vertex_id = vertex_id
        super().__init__(f'vertex id "{vertex_id}" not found in graph')


class ParseVertexId(GraphError, ValueError):
    """A vertex or edge line has no token to read an id from."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f'vertex id in "{line}" not set')


class WrongVertexIdType(GraphError, ValueError):
    """An id token is not an unsigned 32-bit integer."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f'wrong vertex id type in "{line}"')


class GraphIOError(GraphError, OSError):
    """Reading or writing the underlying stream failed.

    The original exception is chained as ``__cause__``.
    """


__all__ = [
    "GraphError",
    "VertexAlreadyExists",
    "VertexNotFound",
    "ParseVertexId",
    "WrongVertexIdType",
    "GraphIOError",
]
