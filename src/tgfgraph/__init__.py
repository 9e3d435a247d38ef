"""
tgfgraph - In-memory graphs with Trivial Graph Format I/O

tgfgraph stores directed or undirected graphs as adjacency lists with
optional vertex and edge payloads, walks them breadth-first, and reads
and writes the line-oriented Trivial Graph Format (TGF).
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tgfgraph")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from tgfgraph.graph import (
    BfsRecord,
    Graph,
    GraphError,
    GraphMode,
    Vertex,
    deserialize,
    serialize,
)

__all__ = [
    "__version__",
    "BfsRecord",
    "Graph",
    "GraphError",
    "GraphMode",
    "Vertex",
    "deserialize",
    "serialize",
]
