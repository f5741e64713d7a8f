import pytest

from path_finder.graph import (
    EdgeAlreadyExistsError,
    Graph,
    GraphError,
    NodeNotFoundError,
)
from path_finder.models import Distance, Location


@pytest.fixture
def graph():
    return Graph()


def test_add_node_returns_unique_increasing_ids(graph):
    ids = [graph.add_node(name) for name in "abcd"]
    assert ids == sorted(ids)
    assert len(set(ids)) == 4
    assert [graph.nodes[i].data for i in ids] == list("abcd")


def test_first_node_id_is_one(graph):
    assert graph.add_node("x") == 1


def test_new_node_has_no_connections(graph):
    node_id = graph.add_node("x")
    node = graph.nodes[node_id]
    assert node.incoming == {}
    assert node.outgoing == {}


def test_add_edge_links_both_nodes(graph):
    a = graph.add_node("a")
    b = graph.add_node("b")
    edge_id = graph.add_edge(a, b, "ab")
    assert graph.nodes[a].outgoing == {b: edge_id}
    assert graph.nodes[b].incoming == {a: edge_id}
    assert graph.nodes[a].incoming == {}
    edge = graph.edges[edge_id]
    assert (edge.from_id, edge.to_id, edge.data, edge.reverse) == (a, b, "ab", None)


def test_add_edge_missing_from_node(graph):
    b = graph.add_node("b")
    with pytest.raises(NodeNotFoundError) as info:
        graph.add_edge(b + 10, b, "x")
    assert info.value.node_id == b + 10
    assert graph.edges == {}


def test_add_edge_missing_to_node(graph):
    a = graph.add_node("a")
    with pytest.raises(NodeNotFoundError) as info:
        graph.add_edge(a, a + 5, "x")
    assert info.value.node_id == a + 5


def test_duplicate_edge_reports_existing(graph):
    a = graph.add_node("a")
    b = graph.add_node("b")
    first = graph.add_edge(a, b, 1)
    with pytest.raises(EdgeAlreadyExistsError) as info:
        graph.add_edge(a, b, 2)
    assert (info.value.from_id, info.value.to_id, info.value.edge_id) == (a, b, first)
    assert isinstance(info.value, GraphError)
    assert graph.edges[first].data == 1


def test_opposite_direction_is_a_separate_edge(graph):
    a = graph.add_node("a")
    b = graph.add_node("b")
    forward = graph.add_edge(a, b, 1)
    backward = graph.add_edge(b, a, 2)
    assert forward != backward
    assert len(graph.edges) == 2


def test_bidirectional_edge_sets_reverses(graph):
    a = graph.add_node("a")
    b = graph.add_node("b")
    distance = Distance(10, 3)
    e1, e2 = graph.add_bidirectional_edge(a, b, distance)
    assert graph.edges[e1].reverse == e2
    assert graph.edges[e2].reverse == e1
    assert graph.edges[e1].data == graph.edges[e2].data == distance
    assert graph.nodes[a].outgoing[b] == e1
    assert graph.nodes[b].outgoing[a] == e2


def test_bidirectional_self_loop_fails_on_second_edge(graph):
    a = graph.add_node("a")
    with pytest.raises(EdgeAlreadyExistsError):
        graph.add_bidirectional_edge(a, a, "loop")
    assert len(graph.edges) == 1


def test_bidirectional_duplicate_raises(graph):
    a = graph.add_node("a")
    b = graph.add_node("b")
    graph.add_bidirectional_edge(a, b, 1)
    with pytest.raises(EdgeAlreadyExistsError):
        graph.add_bidirectional_edge(b, a, 1)


def test_nodes_view_is_read_only(graph):
    graph.add_node("a")
    with pytest.raises(TypeError):
        graph.nodes[99] = None
    assert 99 not in graph.nodes


def test_get_node_id_by_id_and_code(graph):
    lib = graph.add_node(Location("B1", "LIB", True, "Library"))
    gym = graph.add_node(Location("B2", "GYM", False, "Gym"))
    assert graph.get_node_id("B1") == lib
    assert graph.get_node_id("GYM") == gym
    assert graph.get_node_id("nowhere") is None


def test_get_node_id_prefers_id_over_code(graph):
    by_code = graph.add_node(Location("X1", "SHARED", False, "First"))
    by_id = graph.add_node(Location("SHARED", "Y", False, "Second"))
    assert graph.get_node_id("SHARED") == by_id
    assert by_id != by_code