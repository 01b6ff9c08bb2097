from __future__ import annotations

import logging
from dataclasses import dataclass

from lwwgraph.errors import IncompatibleGraphsError
from lwwgraph.graph.edge_store import EdgeStore
from lwwgraph.graph.vertex_store import VertexStore


@dataclass(frozen=True)
class MergeReport:
    """
    Counts of records copied in as new and records joined in place.
    """

    new_vertices: int = 0
    joined_vertices: int = 0
    new_edges: int = 0
    joined_edges: int = 0


class GraphMerger:
    """
    Joins a peer replica's stores into a local replica's stores.

    Each key's creation and removal timestamps are maxed independently,
    which makes the join commutative, associative and idempotent. The
    peer's stores are only read.
    """

    def __init__(
        self,
        *,
        vertices: VertexStore,
        edges: EdgeStore,
    ) -> None:
        self.vertices = vertices
        self.edges = edges

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def merge(
        self,
        *,
        other_vertices: VertexStore,
        other_edges: EdgeStore,
    ) -> MergeReport:
        if other_edges.directed != self.edges.directed:
            raise IncompatibleGraphsError(
                "Cannot merge a directed graph with an undirected graph "
                f"(local directed={self.edges.directed}, "
                f"peer directed={other_edges.directed})"
            )

        new_vertices = joined_vertices = 0
        # snapshot first so merging a replica into itself is safe
        for vertex in list(other_vertices.records()):
            if self.vertices.join(vertex):
                new_vertices += 1
            else:
                joined_vertices += 1

        new_edges = joined_edges = 0
        for edge in list(other_edges.records()):
            if self.edges.join(edge):
                new_edges += 1
            else:
                joined_edges += 1

        report = MergeReport(
            new_vertices=new_vertices,
            joined_vertices=joined_vertices,
            new_edges=new_edges,
            joined_edges=joined_edges,
        )
        logging.getLogger("lwwgraph.merge").info(
            "merged vertices new=%d joined=%d edges new=%d joined=%d",
            report.new_vertices,
            report.joined_vertices,
            report.new_edges,
            report.joined_edges,
        )
        return report
