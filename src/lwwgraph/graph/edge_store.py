from __future__ import annotations

from typing import Dict, Iterator, List, Optional

import networkx as nx

from lwwgraph.errors import InvalidArgumentError
from lwwgraph.graph.graph_schema import NEVER, Edge, EdgeKey, Operation
from lwwgraph.utils.text import is_blank, is_valid_timestamp


def _as_operation(operation) -> Operation:
    try:
        return Operation(operation)
    except ValueError:
        raise InvalidArgumentError(f"Unknown operation {operation!r}") from None


class EdgeStore:
    """
    Grow-only map from (source, target) to the edge's Last-Write-Wins record.

    Backed by a ``networkx.DiGraph`` whose edges carry the record under the
    ``data`` attribute. Graph nodes here are only edge endpoints and say
    nothing about vertex validity.

    Undirected graphs mirror every write onto the reverse key. The two
    directions are independent records afterwards, and a merge may leave
    them out of step.
    """

    def __init__(self, *, directed: bool) -> None:
        self.directed = directed
        self._graph = nx.DiGraph()

    # -------------------- Writes --------------------

    def add_edge(self, source: str, target: str, timestamp: int) -> None:
        self._write(source, target, timestamp, Operation.CREATE)

    def remove_edge(self, source: str, target: str, timestamp: int) -> None:
        self._write(source, target, timestamp, Operation.REMOVE)

    def _write(
        self,
        source: str,
        target: str,
        timestamp: int,
        operation: Operation,
    ) -> None:
        self._validate(source, target, timestamp)
        self.upsert(source, target, timestamp, operation)
        if not self.directed:
            self.upsert(target, source, timestamp, operation)

    def upsert(
        self,
        source: str,
        target: str,
        timestamp: int,
        operation: Operation,
    ) -> None:
        """
        Apply a write to the single key (source, target), without mirroring.
        """
        self._validate(source, target, timestamp)
        operation = _as_operation(operation)

        current = self.get(source, target)
        if current is None:
            record = Edge.create(source, target, operation, timestamp)
        else:
            record = current.apply(operation, timestamp)
        self._graph.add_edge(source, target, data=record)

    def join(self, record: Edge) -> bool:
        """
        Fold a peer's record into this store. Returns True if the key was new.
        """
        current = self.get(record.source, record.target)
        if current is None:
            self._graph.add_edge(record.source, record.target, data=record)
            return True
        self._graph.add_edge(record.source, record.target, data=current.join(record))
        return False

    @staticmethod
    def _validate(source: str, target: str, timestamp: int) -> None:
        if is_blank(source) or is_blank(target):
            raise InvalidArgumentError(
                f"Edge labels must be non-blank, got {source!r} -> {target!r}"
            )
        if not is_valid_timestamp(timestamp):
            raise InvalidArgumentError(
                f"Edge timestamp must be a non-negative integer, got {timestamp!r}"
            )

    # -------------------- Reads --------------------

    def get(self, source: str, target: str) -> Optional[Edge]:
        if not self._graph.has_edge(source, target):
            return None
        return self._graph.edges[source, target]["data"]

    def creation_time(self, source: str, target: str) -> int:
        record = self.get(source, target)
        return NEVER if record is None else record.creation_timestamp

    def removal_time(self, source: str, target: str) -> int:
        record = self.get(source, target)
        return NEVER if record is None else record.removal_timestamp

    def out_edges(self, source: str) -> List[Edge]:
        if source not in self._graph:
            return []
        return [
            data
            for _, _, data in self._graph.out_edges(source, data="data")
        ]

    def records(self) -> Iterator[Edge]:
        for _, _, data in self._graph.edges(data="data"):
            yield data

    def as_dict(self) -> Dict[EdgeKey, Edge]:
        return {record.key: record for record in self.records()}

    def __len__(self) -> int:
        return self._graph.number_of_edges()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeStore):
            return NotImplemented
        return self.directed == other.directed and self.as_dict() == other.as_dict()

    __hash__ = None  # type: ignore[assignment]

    # -------------------- Cloning --------------------

    def clone(self) -> "EdgeStore":
        store = EdgeStore(directed=self.directed)
        store._graph = self._graph.copy()
        return store
