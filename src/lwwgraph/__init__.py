"""
lwwgraph
========

A Last-Write-Wins Element Graph: a state-based CRDT graph whose vertices
and edges can be added and removed concurrently on independent replicas
and reconciled with an order-independent merge.

Core idea:
- Never delete, only timestamp. Validity is derived from the timestamps.

Public API:
- LWWElementGraph
- GraphConfig
- OperationResult
- LogicalClock / WallClock
"""

from lwwgraph.config.settings import GraphConfig
from lwwgraph.config.loader import load_config
from lwwgraph.errors import (
    GraphError,
    IncompatibleGraphsError,
    InvalidArgumentError,
    OperationResult,
)
from lwwgraph.graph.lww_graph import LWWElementGraph
from lwwgraph.graph.snapshot import GraphSnapshot
from lwwgraph.utils.time import Clock, FixedClock, LogicalClock, WallClock

__all__ = [
    "LWWElementGraph",
    "GraphConfig",
    "GraphSnapshot",
    "load_config",
    "GraphError",
    "InvalidArgumentError",
    "IncompatibleGraphsError",
    "OperationResult",
    "Clock",
    "FixedClock",
    "LogicalClock",
    "WallClock",
]

__version__ = "0.1.0"
