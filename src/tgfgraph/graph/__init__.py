"""Graph module - Core graph data structures and codec.

Exports:
- Graph: Adjacency-list container with the mutation and traversal API
- GraphMode: DIRECTED or UNDIRECTED
- Vertex: Vertex with optional payload and outgoing edge directions
- EdgeDirection, EdgeDirectionKind, EdgeValue: Adjacency records
- BfsRecord: One visited vertex in a breadth-first traversal
- deserialize / serialize and friends: Trivial Graph Format codec
- GraphError and subclasses: Failure taxonomy
"""

from tgfgraph.graph.builder import Graph, GraphMode
from tgfgraph.graph.deserializer import deserialize, from_tgf, load
from tgfgraph.graph.errors import (
    GraphError,
    GraphIOError,
    ParseVertexId,
    VertexAlreadyExists,
    VertexNotFound,
    WrongVertexIdType,
)
from tgfgraph.graph.relations import EdgeDirection, EdgeDirectionKind, EdgeValue
from tgfgraph.graph.serialize import dump, serialize, to_tgf
from tgfgraph.graph.traversal import BfsRecord
from tgfgraph.graph.Vertex import Vertex

__all__ = [
    "Graph",
    "GraphMode",
    "Vertex",
    "EdgeDirection",
    "EdgeDirectionKind",
    "EdgeValue",
    "BfsRecord",
    "deserialize",
    "from_tgf",
    "load",
    "serialize",
    "to_tgf",
    "dump",
    "GraphError",
    "GraphIOError",
    "ParseVertexId",
    "VertexAlreadyExists",
    "VertexNotFound",
    "WrongVertexIdType",
]
