from __future__ import annotations

import logging
import math

import pandas as pd

from .config import DEFAULT_NETWORK_CONFIG, NetworkConfig
from .graph import TransitGraph
from .models import Station

logger = logging.getLogger(__name__)

STATION_COLUMNS = ["id", "name", "rent", "safety_score"]
EDGE_COLUMNS = ["source", "target", "weight"]

_graph: TransitGraph | None = None
_edges_df: pd.DataFrame | None = None


def _read_csv(path, required: list[str]) -> pd.DataFrame:
    # ids stay strings even when they look numeric
    df = pd.read_csv(path, dtype={c: str for c in required if c in ("id", "source", "target")})
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{path}: missing required columns {missing}")
    return df


def _as_int(value, table: str, column: str, index: int) -> int:
    """Return ``value`` as an int, rejecting blanks and fractional numbers."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = math.nan
    if not math.isfinite(number) or not number.is_integer():
        # +2: header line, 1-based numbering
        raise ValueError(f"{table} line {index + 2}: {column} must be an integer, got {value}")
    return int(number)


def build_graph(stations_df: pd.DataFrame, edges_df: pd.DataFrame) -> TransitGraph:
    """Assemble and freeze a graph from station and edge tables, in row order."""
    graph = TransitGraph()

    for row in stations_df.itertuples():
        graph.add_station(Station(
            id=str(row.id).strip(),
            name=str(row.name).strip(),
            rent=_as_int(row.rent, "stations", "rent", row.Index),
            safety_score=_as_int(row.safety_score, "stations", "safety_score", row.Index),
        ))

    for row in edges_df.itertuples():
        graph.add_edge(
            str(row.source).strip(),
            str(row.target).strip(),
            _as_int(row.weight, "edges", "weight", row.Index),
        )

    return graph.freeze()


def load_graph(config: NetworkConfig = DEFAULT_NETWORK_CONFIG) -> TransitGraph:
    stations_df = _read_csv(config.stations_path, STATION_COLUMNS)
    edges_df = _read_csv(config.edges_path, EDGE_COLUMNS)
    graph = build_graph(stations_df, edges_df)
    logger.info(
        "Transit network loaded: %d stations, %d edges from %s",
        len(graph), graph.edge_count, config.stations_path.parent,
    )
    return graph


def get_graph() -> TransitGraph:
    """Return the process-wide transit graph, loading it on first call."""
    global _graph
    if _graph is None:
        _graph = load_graph()
    return _graph


def get_lines() -> list[str]:
    """Return the sorted line names listed in the edge table, if any."""
    global _edges_df
    if _edges_df is None:
        _edges_df = _read_csv(DEFAULT_NETWORK_CONFIG.edges_path, EDGE_COLUMNS)
    if "line" not in _edges_df.columns:
        return []
    return sorted(_edges_df["line"].dropna().astype(str).unique().tolist())


def reset() -> None:
    global _graph, _edges_df
    _graph = None
    _edges_df = None
