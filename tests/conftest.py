from __future__ import annotations

import pytest

from lwwgraph.graph.lww_graph import LWWElementGraph
from lwwgraph.utils.time import LogicalClock


@pytest.fixture()
def replica() -> LWWElementGraph:
    return LWWElementGraph()


@pytest.fixture()
def directed() -> LWWElementGraph:
    return LWWElementGraph(directed=True, clock=LogicalClock(start=1))


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for name in (
        "LWWGRAPH_DIRECTED",
        "LWWGRAPH_STRICT",
        "LWWGRAPH_CLOCK",
        "LWWGRAPH_LOGICAL_CLOCK_START",
    ):
        monkeypatch.delenv(name, raising=False)
