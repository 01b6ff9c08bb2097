from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple, TypeVar

NEVER = -1

EdgeKey = Tuple[str, str]

R = TypeVar("R", bound="_Record")


class Operation(str, Enum):
    """
    Kind of timestamped write applied to a vertex or edge record.
    """

    CREATE = "create"
    REMOVE = "remove"


@dataclass(frozen=True)
class _Record:
    """
    Pair of Last-Write-Wins registers: one for creation, one for removal.

    Both fields only ever grow. A record is active while its creation
    timestamp is strictly later than its removal timestamp, so removal
    wins ties.
    """

    creation_timestamp: int = NEVER
    removal_timestamp: int = NEVER

    @property
    def is_active(self) -> bool:
        return self.creation_timestamp > self.removal_timestamp

    def apply(self: R, operation: Operation, timestamp: int) -> R:
        """
        Return the record after a write, or ``self`` when the write is stale.
        """
        if operation is Operation.CREATE:
            if timestamp <= self.creation_timestamp:
                return self
            return replace(self, creation_timestamp=timestamp)

        if operation is Operation.REMOVE:
            if timestamp <= self.removal_timestamp:
                return self
            return replace(self, removal_timestamp=timestamp)

        raise ValueError(f"Unknown operation {operation!r}")

    def join(self: R, other: "_Record") -> R:
        """
        Field-wise maximum of two records for the same key.
        """
        creation = max(self.creation_timestamp, other.creation_timestamp)
        removal = max(self.removal_timestamp, other.removal_timestamp)
        if (
            creation == self.creation_timestamp
            and removal == self.removal_timestamp
        ):
            return self
        return replace(
            self,
            creation_timestamp=creation,
            removal_timestamp=removal,
        )


@dataclass(frozen=True)
class Vertex(_Record):
    """
    Vertex record keyed by its label.
    """

    label: str = ""

    @staticmethod
    def create(label: str, operation: Operation, timestamp: int) -> "Vertex":
        return Vertex(label=label).apply(operation, timestamp)


@dataclass(frozen=True)
class Edge(_Record):
    """
    Directed edge record keyed by the ordered pair (source, target).

    Undirected graphs hold one record per direction.
    """

    source: str = ""
    target: str = ""

    @property
    def key(self) -> EdgeKey:
        return (self.source, self.target)

    @staticmethod
    def create(
        source: str,
        target: str,
        operation: Operation,
        timestamp: int,
    ) -> "Edge":
        return Edge(source=source, target=target).apply(operation, timestamp)
