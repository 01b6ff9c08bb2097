"""
Failure taxonomy for lwwgraph.

Every failure is local and leaves the replica untouched, so callers can
simply re-issue a corrected call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class GraphError(Exception):
    """
    Base class for rejected graph operations.
    """


class InvalidArgumentError(GraphError, ValueError):
    """
    Blank label or negative timestamp.
    """


class IncompatibleGraphsError(GraphError, ValueError):
    """
    Merge attempted between a directed and an undirected replica.
    """


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a mutating call on a replica.

    A failed result means the call was a no-op.
    """

    ok: bool
    error: Optional[GraphError] = None

    def __bool__(self) -> bool:
        return self.ok

    @staticmethod
    def success() -> "OperationResult":
        return _SUCCESS

    @staticmethod
    def failure(error: GraphError) -> "OperationResult":
        return OperationResult(ok=False, error=error)


_SUCCESS = OperationResult(ok=True)
