"""
Graph subsystem for lwwgraph.

Defines the replicated graph and the pieces it is built from:
- Last-Write-Wins vertex and edge records
- grow-only vertex and edge stores
- validity-aware traversal
- the field-wise merge (join)
"""

from lwwgraph.graph.graph_schema import NEVER, Operation, Vertex, Edge
from lwwgraph.graph.vertex_store import VertexStore
from lwwgraph.graph.edge_store import EdgeStore
from lwwgraph.graph.graph_query import GraphQueryEngine
from lwwgraph.graph.graph_merger import GraphMerger, MergeReport
from lwwgraph.graph.snapshot import GraphSnapshot, VertexSnapshot, EdgeSnapshot
from lwwgraph.graph.lww_graph import LWWElementGraph

__all__ = [
    "NEVER",
    "Operation",
    "Vertex",
    "Edge",
    "VertexStore",
    "EdgeStore",
    "GraphQueryEngine",
    "GraphMerger",
    "MergeReport",
    "GraphSnapshot",
    "VertexSnapshot",
    "EdgeSnapshot",
    "LWWElementGraph",
]
