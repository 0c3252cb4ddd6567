from pathlib import Path

import pytest

from fairnest.network import data_store
from fairnest.network.config import NetworkConfig
from fairnest.network.data_store import get_graph, get_lines, load_graph
from fairnest.network.errors import GraphFrozenError, UnknownStation
from fairnest.network.models import Station


def _write(tmp_path: Path, stations: str, edges: str) -> NetworkConfig:
    stations_path = tmp_path / "stations.csv"
    edges_path = tmp_path / "edges.csv"
    stations_path.write_text(stations, encoding="utf-8")
    edges_path.write_text(edges, encoding="utf-8")
    return NetworkConfig(stations_path=stations_path, edges_path=edges_path)


def test_load_graph_from_csv(tmp_path: Path):
    cfg = _write(
        tmp_path,
        "id,name,rent,safety_score\nx,X,100000,3\ny,Y,90000,4\nz,Z,80000,5\n",
        "source,target,weight,line\nx,y,3,Test\ny,z,4,Test\n",
    )

    graph = load_graph(cfg)

    assert [s.id for s in graph.list_stations()] == ["x", "y", "z"]
    assert graph.get_station("y") == Station(id="y", name="Y", rent=90000, safety_score=4)
    assert graph.edge_count == 2
    assert graph.frozen


def test_loaded_graph_is_frozen(tmp_path: Path):
    cfg = _write(tmp_path, "id,name,rent,safety_score\nx,X,1,3\n", "source,target,weight\n")
    graph = load_graph(cfg)
    with pytest.raises(GraphFrozenError):
        graph.add_station(Station(id="y", name="Y", rent=1, safety_score=3))


def test_duplicate_station_rows_keep_first(tmp_path: Path):
    cfg = _write(
        tmp_path,
        "id,name,rent,safety_score\nx,X,100,3\nx,X again,999,5\n",
        "source,target,weight\n",
    )
    graph = load_graph(cfg)
    assert len(graph) == 1
    assert graph.get_station("x").rent == 100


def test_edge_to_unknown_station_fails(tmp_path: Path):
    cfg = _write(
        tmp_path,
        "id,name,rent,safety_score\nx,X,100,3\n",
        "source,target,weight\nx,ghost,3\n",
    )
    with pytest.raises(UnknownStation):
        load_graph(cfg)


def test_missing_columns_fail(tmp_path: Path):
    cfg = _write(tmp_path, "id,name,rent\nx,X,100\n", "source,target,weight\n")
    with pytest.raises(ValueError, match="safety_score"):
        load_graph(cfg)


def test_fractional_edge_weight_fails(tmp_path: Path):
    cfg = _write(
        tmp_path,
        "id,name,rent,safety_score\nx,X,100,3\ny,Y,100,3\n",
        "source,target,weight\nx,y,2.5\n",
    )
    with pytest.raises(ValueError, match="edges line 2: weight must be an integer, got 2.5"):
        load_graph(cfg)


def test_sub_minute_edge_weight_is_not_truncated(tmp_path: Path):
    cfg = _write(
        tmp_path,
        "id,name,rent,safety_score\nx,X,100,3\ny,Y,100,3\n",
        "source,target,weight\nx,y,3\ny,x,0.5\n",
    )
    with pytest.raises(ValueError, match="edges line 3: weight must be an integer, got 0.5"):
        load_graph(cfg)


def test_fractional_rent_fails(tmp_path: Path):
    cfg = _write(
        tmp_path,
        "id,name,rent,safety_score\nx,X,100000,3\ny,Y,100.7,4\n",
        "source,target,weight\nx,y,2\n",
    )
    with pytest.raises(ValueError, match="stations line 3: rent must be an integer"):
        load_graph(cfg)


def test_blank_safety_score_fails(tmp_path: Path):
    cfg = _write(tmp_path, "id,name,rent,safety_score\nx,X,100,\n", "source,target,weight\n")
    with pytest.raises(ValueError, match="safety_score must be an integer"):
        load_graph(cfg)


def test_whole_number_floats_load(tmp_path: Path):
    cfg = _write(
        tmp_path,
        "id,name,rent,safety_score\nx,X,100000.0,3\ny,Y,90000,4\n",
        "source,target,weight\nx,y,3.0\n",
    )
    graph = load_graph(cfg)
    assert graph.get_station("x").rent == 100000
    assert graph.neighbors("x") == (("y", 3),)


def test_bundled_network_loads():
    data_store.reset()
    graph = get_graph()

    assert len(graph) > 90
    assert graph.has_station("tokyo")
    assert graph.get_station("shinjuku").name == "新宿"
    assert get_graph() is graph


def test_bundled_lines():
    assert get_lines() == ["Chuo Rapid", "Keihin-Tohoku", "Tokyu Toyoko", "Yamanote"]
