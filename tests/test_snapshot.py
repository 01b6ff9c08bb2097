import pytest
from pydantic import ValidationError

from lwwgraph.graph.graph_schema import Vertex
from lwwgraph.graph.lww_graph import DUMP_SEPARATOR, LWWElementGraph
from lwwgraph.graph.snapshot import GraphSnapshot


def _history() -> LWWElementGraph:
    g = LWWElementGraph(directed=True)
    g.add_vertex("A", 1)
    g.add_vertex("B", 2)
    g.remove_vertex("B", 3)
    g.add_edge("A", "B", 4)
    g.remove_edge("B", "A", 5)
    return g


def test_snapshot_round_trip_keeps_tombstones():
    original = _history()

    payload = original.to_snapshot().model_dump()
    restored = LWWElementGraph.from_snapshot(payload)

    assert restored == original
    assert restored.vertex_records()["B"] == Vertex(
        label="B", creation_timestamp=2, removal_timestamp=3
    )


def test_snapshot_json_round_trip():
    original = _history()

    snapshot = GraphSnapshot.model_validate_json(original.to_snapshot().model_dump_json())

    assert LWWElementGraph.from_snapshot(snapshot) == original


@pytest.mark.parametrize(
    "vertex",
    [
        {"label": "  ", "creation_timestamp": 1},
        {"label": "A", "creation_timestamp": -2},
        {"label": "A", "removal_timestamp": "soon"},
        {"label": "A"},
        {"label": "A", "creation_timestamp": -1, "removal_timestamp": -1},
    ],
)
def test_snapshot_rejects_malformed_records(vertex):
    with pytest.raises(ValidationError):
        GraphSnapshot.model_validate({"directed": False, "vertices": [vertex]})


def test_snapshot_can_be_merged_into_a_replica():
    local = LWWElementGraph(directed=True)
    local.add_vertex("A", 10)

    local.merge(LWWElementGraph.from_snapshot(_history().to_snapshot()))

    assert local.get_vertex_creation_timestamp("A") == 10
    assert local.get_edge_creation_timestamp("A", "B") == 4


def test_dump_format():
    expected = "\n".join(
        [
            "A:1:-1",
            "B:2:3",
            DUMP_SEPARATOR,
            "A-B:4:-1",
            "B-A:-1:5",
        ]
    ) + "\n"

    assert _history().dump() == expected
    assert str(_history()) == expected


def test_clone_is_independent():
    original = _history()
    copy = original.clone()

    copy.add_vertex("C", 9)
    copy.add_edge("A", "C", 9)

    assert original != copy
    assert not original.check_vertex_exists("C")
    assert original.get_edge_creation_timestamp("A", "C") == -1


def test_snapshot_rejects_edges_without_any_write():
    with pytest.raises(ValidationError):
        GraphSnapshot.model_validate(
            {"directed": True, "edges": [{"source": "A", "target": "B"}]}
        )

    with pytest.raises(ValidationError):
        LWWElementGraph.from_snapshot(
            {"directed": False, "vertices": [{"label": "A"}]}
        )
