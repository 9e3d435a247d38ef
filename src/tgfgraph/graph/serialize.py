"""TGF Serialization - Write a Graph as Trivial Graph Format text.

Vertex lines come first in mapping order, then the delimiter, then one
line per genuine (STRONG) edge. WEAK mirrors are skipped so an undirected
edge is written once.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Iterator

from tgfgraph.graph.deserializer import DATA_DELIMITER, VERTEX_EDGE_DELIMITER
from tgfgraph.graph.errors import GraphIOError

if TYPE_CHECKING:
    from tgfgraph.graph.builder import Graph


def _render(*fields: Any) -> str:
    parts = [str(f) for f in fields if f is not None and f != ""]
    return DATA_DELIMITER.join(parts)


def iter_lines(graph: Graph[Any, Any]) -> Iterator[str]:
    """Yield the document lines, without line terminators.

    Edges to vertices no longer in the graph are not written.
    """
    for vertex in graph.all_vertices():
        yield _render(vertex.id, vertex.value)

    yield VERTEX_EDGE_DELIMITER

    for from_id, direction in graph.iter_edges():
        yield _render(from_id, direction.to_vertex_id, direction.value)


def _is_binary(writer: Any) -> bool:
    """Decide whether writer takes bytes.

    Text streams are recognised by type or by a mode without "b"; any
    other sink is handed UTF-8 bytes.
    """
    if isinstance(writer, io.TextIOBase):
        return False
    if isinstance(writer, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(writer, "mode", None)
    if isinstance(mode, str):
        return "b" in mode
    return True


def serialize(graph: Graph[Any, Any], writer: IO[str] | IO[bytes]) -> None:
    """Write graph to an open stream.

    Text streams receive str, anything else UTF-8 bytes. The stream is
    neither flushed nor closed.

    Raises:
        GraphIOError: If writing fails.
    """
    binary = _is_binary(writer)
    try:
        for line in iter_lines(graph):
            if binary:
                writer.write((line + "\n").encode("utf-8"))  # type: ignore[arg-type]
            else:
                writer.write(line + "\n")  # type: ignore[arg-type]
    except OSError as e:
        raise GraphIOError(str(e)) from e


def to_tgf(graph: Graph[Any, Any]) -> str:
    """Serialize graph to a TGF string."""
    output = io.StringIO()
    serialize(graph, output)
    return output.getvalue()


def dump(graph: Graph[Any, Any], path: Path | str) -> None:
    """Write graph to a TGF file, replacing any existing content.

    Raises:
        GraphIOError: If the file cannot be opened or written.
    """
    try:
        f = open(path, "w", encoding="utf-8", newline="\n")
    except OSError as e:
        raise GraphIOError(f'error writing file "{path}": {e}') from e
    with f:
        serialize(graph, f)


__all__ = [
    "iter_lines",
    "serialize",
    "to_tgf",
    "dump",
]
