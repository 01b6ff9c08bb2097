from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from lwwgraph.graph.graph_schema import NEVER, Edge, Vertex


def _check_label(value: str) -> str:
    if not value.strip():
        raise ValueError("label must be non-blank")
    return value


def _check_written(creation_timestamp: int, removal_timestamp: int) -> None:
    # every record is born from a create or remove write
    if creation_timestamp == NEVER and removal_timestamp == NEVER:
        raise ValueError("record must carry a creation or removal timestamp")


class VertexSnapshot(BaseModel):
    label: str
    creation_timestamp: int = Field(default=NEVER, ge=NEVER)
    removal_timestamp: int = Field(default=NEVER, ge=NEVER)

    @field_validator("label")
    @classmethod
    def check_label(cls, value: str) -> str:
        return _check_label(value)

    @model_validator(mode="after")
    def check_written(self) -> "VertexSnapshot":
        _check_written(self.creation_timestamp, self.removal_timestamp)
        return self

    @staticmethod
    def from_record(record: Vertex) -> "VertexSnapshot":
        return VertexSnapshot(
            label=record.label,
            creation_timestamp=record.creation_timestamp,
            removal_timestamp=record.removal_timestamp,
        )

    def to_record(self) -> Vertex:
        return Vertex(
            label=self.label,
            creation_timestamp=self.creation_timestamp,
            removal_timestamp=self.removal_timestamp,
        )


class EdgeSnapshot(BaseModel):
    source: str
    target: str
    creation_timestamp: int = Field(default=NEVER, ge=NEVER)
    removal_timestamp: int = Field(default=NEVER, ge=NEVER)

    @field_validator("source", "target")
    @classmethod
    def check_labels(cls, value: str) -> str:
        return _check_label(value)

    @model_validator(mode="after")
    def check_written(self) -> "EdgeSnapshot":
        _check_written(self.creation_timestamp, self.removal_timestamp)
        return self

    @staticmethod
    def from_record(record: Edge) -> "EdgeSnapshot":
        return EdgeSnapshot(
            source=record.source,
            target=record.target,
            creation_timestamp=record.creation_timestamp,
            removal_timestamp=record.removal_timestamp,
        )

    def to_record(self) -> Edge:
        return Edge(
            source=self.source,
            target=self.target,
            creation_timestamp=self.creation_timestamp,
            removal_timestamp=self.removal_timestamp,
        )


class GraphSnapshot(BaseModel):
    """
    Full state of one replica, tombstones included.

    Plain data, so a peer's state can arrive as dicts or JSON and be
    rebuilt with ``LWWElementGraph.from_snapshot``.
    """

    directed: bool
    vertices: List[VertexSnapshot] = Field(default_factory=list)
    edges: List[EdgeSnapshot] = Field(default_factory=list)
