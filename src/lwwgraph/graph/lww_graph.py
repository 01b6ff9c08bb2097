from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Set, Union

from lwwgraph.config.loader import build_clock
from lwwgraph.config.settings import GraphConfig
from lwwgraph.errors import GraphError, OperationResult
from lwwgraph.graph.edge_store import EdgeStore
from lwwgraph.graph.graph_merger import GraphMerger
from lwwgraph.graph.graph_query import GraphQueryEngine
from lwwgraph.graph.graph_schema import Edge, EdgeKey, Operation, Vertex
from lwwgraph.graph.snapshot import EdgeSnapshot, GraphSnapshot, VertexSnapshot
from lwwgraph.graph.vertex_store import VertexStore
from lwwgraph.utils.time import Clock

DUMP_SEPARATOR = "*" * 39


class LWWElementGraph:
    """
    Last-Write-Wins Element Graph replica.

    A state-based CRDT: replicas accept local vertex and edge writes
    independently and converge through ``merge``, whatever the order or
    number of merges. Directedness is fixed at construction.

    Mutating calls return an ``OperationResult``. A rejected call is a
    no-op; it is logged, and re-raised when ``config.strict`` is set.
    """

    def __init__(
        self,
        directed: Optional[bool] = None,
        *,
        clock: Optional[Clock] = None,
        config: Optional[GraphConfig] = None,
    ) -> None:
        self.config = config or GraphConfig()
        self._directed = self.config.directed if directed is None else directed
        self.clock = clock or build_clock(self.config)

        self._vertices = VertexStore()
        self._edges = EdgeStore(directed=self._directed)

    @property
    def directed(self) -> bool:
        return self._directed

    def is_directed(self) -> bool:
        return self._directed

    # -------------------- Vertices --------------------

    def add_vertex(self, label: str, timestamp: Optional[int] = None) -> OperationResult:
        return self._run(
            "add_vertex",
            lambda: self._vertices.upsert(label, self._stamp(timestamp), Operation.CREATE),
        )

    def remove_vertex(self, label: str, timestamp: Optional[int] = None) -> OperationResult:
        return self._run(
            "remove_vertex",
            lambda: self._vertices.upsert(label, self._stamp(timestamp), Operation.REMOVE),
        )

    def check_vertex_exists(self, label: str) -> bool:
        return self._vertices.exists(label)

    def get_vertex_creation_timestamp(self, label: str) -> int:
        return self._vertices.creation_time(label)

    def get_vertex_removal_timestamp(self, label: str) -> int:
        return self._vertices.removal_time(label)

    # -------------------- Edges --------------------

    def add_edge(
        self,
        source: str,
        target: str,
        timestamp: Optional[int] = None,
    ) -> OperationResult:
        return self._run(
            "add_edge",
            lambda: self._edges.add_edge(source, target, self._stamp(timestamp)),
        )

    def remove_edge(
        self,
        source: str,
        target: str,
        timestamp: Optional[int] = None,
    ) -> OperationResult:
        return self._run(
            "remove_edge",
            lambda: self._edges.remove_edge(source, target, self._stamp(timestamp)),
        )

    def get_edge_creation_timestamp(self, source: str, target: str) -> int:
        return self._edges.creation_time(source, target)

    def get_edge_removal_timestamp(self, source: str, target: str) -> int:
        return self._edges.removal_time(source, target)

    # -------------------- Traversal --------------------

    def get_adjacent_vertices(self, label: str) -> Set[str]:
        return self._query().adjacent_vertices(label)

    def find_path(self, source: str, target: str) -> List[str]:
        return self._query().find_path(source, target)

    def vertices(self) -> Set[str]:
        """
        Labels of currently active vertices.
        """
        return {v.label for v in self._vertices.records() if v.is_active}

    def edges(self) -> Set[EdgeKey]:
        """
        Keys of edges currently visible to traversal.
        """
        return set(self._query().valid_edges())

    def vertex_records(self) -> Dict[str, Vertex]:
        return {v.label: v for v in self._vertices.records()}

    def edge_records(self) -> Dict[EdgeKey, Edge]:
        return self._edges.as_dict()

    def _query(self) -> GraphQueryEngine:
        return GraphQueryEngine(self._vertices, self._edges)

    # -------------------- Merge --------------------

    def merge(self, other: "LWWElementGraph") -> OperationResult:
        if not isinstance(other, LWWElementGraph):
            raise TypeError(
                f"Can only merge another LWWElementGraph, got {type(other).__name__}"
            )

        merger = GraphMerger(vertices=self._vertices, edges=self._edges)
        return self._run(
            "merge",
            lambda: merger.merge(
                other_vertices=other._vertices,
                other_edges=other._edges,
            ),
        )

    # -------------------- Cloning / snapshots --------------------

    def clone(self) -> "LWWElementGraph":
        g = LWWElementGraph(self._directed, clock=self.clock, config=self.config)
        g._vertices = self._vertices.clone()
        g._edges = self._edges.clone()
        return g

    def to_snapshot(self) -> GraphSnapshot:
        return GraphSnapshot(
            directed=self._directed,
            vertices=[VertexSnapshot.from_record(v) for v in self._vertices.records()],
            edges=[EdgeSnapshot.from_record(e) for e in self._edges.records()],
        )

    @classmethod
    def from_snapshot(
        cls,
        snapshot: Union[GraphSnapshot, Mapping[str, Any]],
        *,
        clock: Optional[Clock] = None,
        config: Optional[GraphConfig] = None,
    ) -> "LWWElementGraph":
        if not isinstance(snapshot, GraphSnapshot):
            snapshot = GraphSnapshot.model_validate(snapshot)

        g = cls(snapshot.directed, clock=clock, config=config)
        for vertex in snapshot.vertices:
            g._vertices.join(vertex.to_record())
        for edge in snapshot.edges:
            g._edges.join(edge.to_record())
        return g

    def dump(self) -> str:
        """
        ``label:created:removed`` per vertex, a separator line, then
        ``source-target:created:removed`` per edge. Lines are sorted.
        """
        lines = [
            f"{v.label}:{v.creation_timestamp}:{v.removal_timestamp}"
            for v in sorted(self._vertices.records(), key=lambda v: v.label)
        ]
        lines.append(DUMP_SEPARATOR)
        lines.extend(
            f"{e.source}-{e.target}:{e.creation_timestamp}:{e.removal_timestamp}"
            for e in sorted(self._edges.records(), key=lambda e: e.key)
        )
        return "\n".join(lines) + "\n"

    # -------------------- Internals --------------------

    def _stamp(self, timestamp: Optional[int]) -> int:
        return self.clock.now() if timestamp is None else timestamp

    def _run(self, name: str, action: Callable[[], Any]) -> OperationResult:
        try:
            action()
        except GraphError as exc:
            logging.getLogger("lwwgraph.graph").warning("%s rejected: %s", name, exc)
            if self.config.strict:
                raise
            return OperationResult.failure(exc)
        return OperationResult.success()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LWWElementGraph):
            return NotImplemented
        return (
            self._directed == other._directed
            and self._vertices == other._vertices
            and self._edges == other._edges
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return (
            f"LWWElementGraph(directed={self._directed}, "
            f"vertices={len(self._vertices)}, edges={len(self._edges)})"
        )
