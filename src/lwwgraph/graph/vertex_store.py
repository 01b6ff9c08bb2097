from __future__ import annotations

from typing import Dict, Iterator, Optional

from lwwgraph.errors import InvalidArgumentError
from lwwgraph.graph.graph_schema import NEVER, Operation, Vertex
from lwwgraph.utils.text import is_blank, is_valid_timestamp


def _as_operation(operation) -> Operation:
    try:
        return Operation(operation)
    except ValueError:
        raise InvalidArgumentError(f"Unknown operation {operation!r}") from None


class VertexStore:
    """
    Grow-only map from vertex label to its Last-Write-Wins record.

    Records are replaced, never deleted: removing a vertex only raises
    its removal timestamp.
    """

    def __init__(self) -> None:
        self._records: Dict[str, Vertex] = {}

    # -------------------- Writes --------------------

    def upsert(self, label: str, timestamp: int, operation: Operation) -> None:
        if is_blank(label):
            raise InvalidArgumentError(f"Vertex label must be non-blank, got {label!r}")
        if not is_valid_timestamp(timestamp):
            raise InvalidArgumentError(
                f"Vertex timestamp must be a non-negative integer, got {timestamp!r}"
            )
        operation = _as_operation(operation)

        current = self._records.get(label)
        if current is None:
            self._records[label] = Vertex.create(label, operation, timestamp)
        else:
            self._records[label] = current.apply(operation, timestamp)

    def join(self, record: Vertex) -> bool:
        """
        Fold a peer's record into this store. Returns True if the label was new.
        """
        current = self._records.get(record.label)
        if current is None:
            # records are immutable, sharing them is a deep copy
            self._records[record.label] = record
            return True
        self._records[record.label] = current.join(record)
        return False

    # -------------------- Reads --------------------

    def get(self, label: str) -> Optional[Vertex]:
        return self._records.get(label)

    def exists(self, label: str) -> bool:
        record = self._records.get(label)
        return record is not None and record.is_active

    def creation_time(self, label: str) -> int:
        record = self._records.get(label)
        return NEVER if record is None else record.creation_timestamp

    def removal_time(self, label: str) -> int:
        record = self._records.get(label)
        return NEVER if record is None else record.removal_timestamp

    def records(self) -> Iterator[Vertex]:
        yield from self._records.values()

    def __contains__(self, label: object) -> bool:
        return label in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VertexStore):
            return NotImplemented
        return self._records == other._records

    __hash__ = None  # type: ignore[assignment]

    # -------------------- Cloning --------------------

    def clone(self) -> "VertexStore":
        store = VertexStore()
        store._records = dict(self._records)
        return store
