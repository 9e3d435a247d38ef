"""TGF Deserializer - Build a Graph from Trivial Graph Format text.

Document layout, one record per line, fields separated by single spaces:

    <id> [value ...]            vertex lines
    #                           delimiter
    <from_id> <to_id> [value]   edge lines

The format carries no directed/undirected marker. Documents are read as
undirected graphs unless the caller passes ``mode=GraphMode.DIRECTED``;
a directed graph written by serialize() only round-trips faithfully when
read back that way.
"""

from __future__ import annotations

import io
import re
from enum import Enum
from pathlib import Path
from typing import IO, Iterable, Iterator, Union

from tgfgraph.graph.builder import MAX_VERTEX_ID, Graph, GraphMode
from tgfgraph.graph.errors import (
    GraphIOError,
    ParseVertexId,
    VertexNotFound,
    WrongVertexIdType,
)
from tgfgraph.graph.Vertex import Vertex

VERTEX_EDGE_DELIMITER = "#"
DATA_DELIMITER = " "

_ID_RE = re.compile(r"\+?[0-9]+")

LineSource = Union[IO[str], IO[bytes], Iterable[str], Iterable[bytes]]


class ScanState(Enum):
    """Which section of the document is being read."""

    VERTEX = "vertex"
    EDGE = "edge"


def _parse_id(token: str | None, line: str) -> int:
    if not token:
        raise ParseVertexId(line)
    if not _ID_RE.fullmatch(token):
        raise WrongVertexIdType(line)
    value = int(token)
    if value > MAX_VERTEX_ID:
        raise WrongVertexIdType(line)
    return value


def _join_value(tokens: list[str]) -> str | None:
    value = DATA_DELIMITER.join(tokens)
    return value or None


def parse_vertex_line(line: str) -> Vertex[str, str]:
    """Parse ``<id> [value ...]`` into a Vertex.

    Raises:
        ParseVertexId: If the line has no id token.
        WrongVertexIdType: If the id is not an unsigned 32-bit integer.
    """
    tokens = line.split(DATA_DELIMITER)
    vertex_id = _parse_id(tokens[0], line)
    return Vertex(vertex_id, _join_value(tokens[1:]))


def parse_edge_line(
    line: str, graph: Graph[str, str]
) -> tuple[int, int, str | None]:
    """Parse ``<from_id> <to_id> [value ...]``.

    Both endpoints must already be in graph.

    Returns:
        Tuple of (from_id, to_id, value).

    Raises:
        ParseVertexId: If an id token is missing.
        WrongVertexIdType: If an id is not an unsigned 32-bit integer.
        VertexNotFound: If an endpoint is not in graph (from_id checked first).
    """
    tokens = line.split(DATA_DELIMITER)
    from_id = _parse_id(tokens[0], line)
    to_id = _parse_id(tokens[1] if len(tokens) > 1 else None, line)
    value = _join_value(tokens[2:])

    if not graph.contains_vertex(from_id):
        raise VertexNotFound(from_id)
    if not graph.contains_vertex(to_id):
        raise VertexNotFound(to_id)
    return from_id, to_id, value


def is_delimiter(line: str) -> bool:
    """Check if a line is the vertex/edge section delimiter."""
    return line == VERTEX_EDGE_DELIMITER


def _iter_lines(source: LineSource) -> Iterator[str]:
    """Yield decoded lines, wrapping read and decode failures."""
    try:
        for raw in source:
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8")
            yield raw
    except (OSError, UnicodeDecodeError) as e:
        raise GraphIOError(str(e)) from e


def deserialize(
    source: LineSource, mode: GraphMode = GraphMode.UNDIRECTED
) -> Graph[str, str]:
    """Read a TGF document into a new graph.

    Lines are stripped before parsing. Every vertex goes through
    Graph.add_vertex and every edge through Graph.add_edge, so duplicate
    ids and duplicate edges behave exactly as with the mutation API.

    Args:
        source: Open text or binary stream, or any iterable of lines.
            The stream is not closed.
        mode: Mode of the graph to build (the format has no marker).

    Returns:
        The populated graph.

    Raises:
        ParseVertexId: A vertex or edge line has no id token.
        WrongVertexIdType: An id token is not an unsigned 32-bit integer.
        VertexAlreadyExists: A vertex id is declared twice.
        VertexNotFound: An edge references an undeclared vertex.
        GraphIOError: Reading or decoding the source failed.
    """
    graph: Graph[str, str] = Graph(mode)
    scan_state = ScanState.VERTEX

    for raw in _iter_lines(source):
        line = raw.strip()
        if scan_state is ScanState.VERTEX:
            try:
                vertex = parse_vertex_line(line)
            except (ParseVertexId, WrongVertexIdType):
                if is_delimiter(line):
                    scan_state = ScanState.EDGE
                    continue
                raise
            graph.add_vertex(vertex)
        else:
            from_id, to_id, value = parse_edge_line(line, graph)
            graph.add_edge(from_id, to_id, value)

    return graph


def from_tgf(text: str, mode: GraphMode = GraphMode.UNDIRECTED) -> Graph[str, str]:
    """Read a TGF document held in a string.

    Lines break at line feeds only, as when reading a file.
    """
    return deserialize(io.StringIO(text), mode)


def load(path: Path | str, mode: GraphMode = GraphMode.UNDIRECTED) -> Graph[str, str]:
    """Read a TGF file.

    Raises:
        GraphIOError: If the file cannot be opened or read.
    """
    try:
        f = open(path, encoding="utf-8")
    except OSError as e:
        raise GraphIOError(f'error reading file "{path}": {e}') from e
    with f:
        return deserialize(f, mode)


__all__ = [
    "ScanState",
    "VERTEX_EDGE_DELIMITER",
    "DATA_DELIMITER",
    "parse_vertex_line",
    "parse_edge_line",
    "is_delimiter",
    "deserialize",
    "from_tgf",
    "load",
]
