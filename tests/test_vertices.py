import logging

import pytest

from lwwgraph.config.settings import GraphConfig
from lwwgraph.errors import InvalidArgumentError
from lwwgraph.graph.lww_graph import LWWElementGraph
from lwwgraph.utils.time import FixedClock


def test_add_vertex(replica):
    assert replica.add_vertex("A", 10)
    assert replica.check_vertex_exists("A")
    assert replica.get_vertex_creation_timestamp("A") == 10
    assert replica.get_vertex_removal_timestamp("A") == -1

    # past timestamp: no change
    replica.add_vertex("A", 5)
    assert replica.get_vertex_creation_timestamp("A") == 10

    replica.add_vertex("A", 15)
    assert replica.get_vertex_creation_timestamp("A") == 15


@pytest.mark.parametrize(
    "label, timestamp",
    [("B", -5), ("", 0), ("   ", 3), (None, 1), ("B", True)],
)
def test_invalid_vertex_input_is_a_noop(replica, label, timestamp):
    result = replica.add_vertex(label, timestamp)

    assert not result.ok
    assert isinstance(result.error, InvalidArgumentError)
    assert replica == LWWElementGraph()
    assert not replica.check_vertex_exists(label)
    assert replica.get_vertex_creation_timestamp(label) == -1


def test_invalid_input_logs_a_warning(replica, caplog):
    with caplog.at_level(logging.WARNING, logger="lwwgraph.graph"):
        replica.remove_vertex("", 1)

    assert "remove_vertex rejected" in caplog.text


def test_strict_mode_raises_without_mutating():
    replica = LWWElementGraph(config=GraphConfig(strict=True))
    replica.add_vertex("A", 1)

    with pytest.raises(InvalidArgumentError):
        replica.add_vertex("B", -1)

    assert replica.vertices() == {"A"}


def test_remove_vertex(replica):
    # removing an unseen vertex still records the removal
    replica.remove_vertex("A", 5)
    assert not replica.check_vertex_exists("A")
    assert replica.get_vertex_creation_timestamp("A") == -1
    assert replica.get_vertex_removal_timestamp("A") == 5

    replica.add_vertex("A", 10)
    replica.add_vertex("B", 11)
    replica.add_vertex("C", 12)
    replica.add_vertex("D", 13)

    replica.remove_vertex("A", 13)
    assert replica.get_vertex_removal_timestamp("A") == 13
    assert not replica.check_vertex_exists("A")

    replica.remove_vertex("A", 12)
    assert replica.get_vertex_removal_timestamp("A") == 13

    # removal that predates creation does not hide the vertex
    replica.remove_vertex("B", 10)
    assert replica.check_vertex_exists("B")
    assert replica.get_vertex_removal_timestamp("B") == 10
    assert replica.get_vertex_creation_timestamp("B") == 11

    # tie goes to removal
    replica.remove_vertex("B", 11)
    assert not replica.check_vertex_exists("B")

    replica.remove_vertex("B", 12)
    assert replica.get_vertex_removal_timestamp("B") == 12
    assert replica.get_vertex_creation_timestamp("B") == 11

    replica.add_vertex("B", 13)
    assert replica.check_vertex_exists("B")
    assert replica.get_vertex_removal_timestamp("B") == 12

    replica.remove_vertex("B", 20)
    replica.remove_vertex("B", 25)
    assert not replica.check_vertex_exists("B")
    assert replica.get_vertex_removal_timestamp("B") == 25


def test_vertex_operations_commute():
    one = LWWElementGraph()
    two = LWWElementGraph()

    one.add_vertex("A", 1)
    one.add_vertex("B", 5)
    one.remove_vertex("C", 10)
    one.add_vertex("C", 3)

    two.add_vertex("C", 3)
    two.remove_vertex("C", 10)
    two.add_vertex("B", 5)
    two.add_vertex("A", 1)

    assert one == two


@pytest.mark.parametrize("order", [(1, 2), (2, 1)])
def test_repeated_writes_keep_the_maximum(order):
    replica = LWWElementGraph()
    for ts in order:
        replica.add_vertex("A", ts)
        replica.remove_vertex("A", ts + 10)

    expected = LWWElementGraph()
    expected.add_vertex("A", 2)
    expected.remove_vertex("A", 12)

    assert replica == expected


def test_add_then_remove_order_independent():
    one = LWWElementGraph()
    two = LWWElementGraph()

    one.add_vertex("A", 1)
    one.remove_vertex("A", 2)
    two.remove_vertex("A", 2)
    two.add_vertex("A", 1)

    assert one == two
    assert not one.check_vertex_exists("A")
    assert one.get_vertex_creation_timestamp("A") == 1
    assert one.get_vertex_removal_timestamp("A") == 2


def test_omitted_timestamp_comes_from_clock():
    replica = LWWElementGraph(clock=FixedClock(42))
    replica.add_vertex("A")

    assert replica.get_vertex_creation_timestamp("A") == 42

    replica.remove_vertex("A")
    assert not replica.check_vertex_exists("A")


def test_equality_includes_tombstones():
    one = LWWElementGraph()
    two = LWWElementGraph()

    one.add_vertex("A", 1)
    two.add_vertex("A", 1)
    two.add_vertex("B", 2)
    two.remove_vertex("B", 3)

    assert one.vertices() == two.vertices() == {"A"}
    assert one != two
