import pytest

from fairnest.network.errors import GraphFrozenError, NotFound, UnknownStation
from fairnest.network.graph import TransitGraph
from fairnest.network.models import Station


def _station(sid: str, rent: int = 100000, safety: int = 3) -> Station:
    return Station(id=sid, name=sid.title(), rent=rent, safety_score=safety)


def _graph(*ids: str) -> TransitGraph:
    graph = TransitGraph()
    for sid in ids:
        graph.add_station(_station(sid))
    return graph


# ── Stations ─────────────────────────────────────────────────────────────


def test_add_station_is_idempotent():
    graph = TransitGraph()
    graph.add_station(_station("x", rent=100))
    graph.add_station(_station("x", rent=999))

    assert len(graph) == 1
    assert graph.get_station("x").rent == 100
    assert graph.neighbors("x") == ()


def test_list_stations_keeps_insertion_order():
    graph = _graph("c", "a", "b")
    assert [s.id for s in graph.list_stations()] == ["c", "a", "b"]


def test_get_station_unknown_raises():
    graph = _graph("a")
    with pytest.raises(UnknownStation):
        graph.get_station("zzz")


def test_contains_and_has_station():
    graph = _graph("a")
    assert "a" in graph
    assert graph.has_station("a")
    assert "b" not in graph


@pytest.mark.parametrize(
    "kwargs",
    [
        {"id": "", "name": "Empty", "rent": 1, "safety_score": 3},
        {"id": "x", "name": "X", "rent": -1, "safety_score": 3},
        {"id": "x", "name": "X", "rent": 1, "safety_score": 0},
        {"id": "x", "name": "X", "rent": 1, "safety_score": 6},
        {"id": "x", "name": "X", "rent": 1.5, "safety_score": 3},
    ],
)
def test_station_rejects_invalid_fields(kwargs):
    with pytest.raises(ValueError):
        Station(**kwargs)


# ── Edges ────────────────────────────────────────────────────────────────


def test_add_edge_is_symmetric():
    graph = _graph("a", "b")
    graph.add_edge("a", "b", 7)

    assert ("b", 7) in graph.neighbors("a")
    assert ("a", 7) in graph.neighbors("b")
    assert graph.edge_count == 1


def test_add_edge_unknown_endpoint_raises():
    graph = _graph("a")
    with pytest.raises(UnknownStation) as excinfo:
        graph.add_edge("a", "ghost", 3)
    assert excinfo.value.station_id == "ghost"
    assert graph.neighbors("a") == ()


def test_unknown_station_is_a_not_found():
    graph = _graph("a")
    with pytest.raises(NotFound):
        graph.add_edge("ghost", "a", 3)


@pytest.mark.parametrize("weight", [0, -2, 2.5, True, "3"])
def test_add_edge_rejects_non_positive_integer_weight(weight):
    graph = _graph("a", "b")
    with pytest.raises(ValueError):
        graph.add_edge("a", "b", weight)


def test_parallel_edges_are_kept():
    graph = _graph("a", "b")
    graph.add_edge("a", "b", 5)
    graph.add_edge("a", "b", 2)

    assert graph.neighbors("a") == (("b", 5), ("b", 2))
    assert graph.edge_count == 2


def test_every_edge_has_both_directions():
    graph = _graph("a", "b", "c")
    graph.add_edge("a", "b", 1)
    graph.add_edge("b", "c", 4)
    graph.add_edge("c", "a", 9)

    for edge in graph.edges():
        assert (edge.target, edge.weight) in graph.neighbors(edge.source)
        assert (edge.source, edge.weight) in graph.neighbors(edge.target)


# ── Freezing ─────────────────────────────────────────────────────────────


def test_frozen_graph_rejects_mutation():
    graph = _graph("a", "b").freeze()

    assert graph.frozen
    with pytest.raises(GraphFrozenError):
        graph.add_station(_station("c"))
    with pytest.raises(GraphFrozenError):
        graph.add_edge("a", "b", 1)


def test_frozen_graph_still_answers_queries():
    graph = _graph("a", "b")
    graph.add_edge("a", "b", 1)
    graph.freeze()

    assert graph.get_station("a").id == "a"
    assert graph.neighbors("b") == (("a", 1),)
