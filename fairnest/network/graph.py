from __future__ import annotations

import uuid
from typing import Iterator

from .errors import GraphFrozenError, UnknownStation
from .models import Edge, Station, _is_int


class TransitGraph:
    """
    Station/edge repository with adjacency lookup.

    Stations keep their insertion order, which downstream code uses as the
    deterministic tie-break. Every edge is stored as two directed adjacency
    entries carrying the same weight. Parallel edges are kept as-is.

    The graph is built once, then ``freeze()`` publishes it; after that it
    only answers queries and can be shared between requests without locking.
    """

    def __init__(self) -> None:
        self._stations: dict[str, Station] = {}
        self._adjacency: dict[str, list[tuple[str, int]]] = {}
        self._edges: list[Edge] = []
        self._frozen = False
        # Distinguishes this graph from any other built in the same process
        self._token = uuid.uuid4().hex

    # ── Construction ─────────────────────────────────────────────────────

    def add_station(self, station: Station) -> None:
        """Insert ``station``; a station whose id is already present is ignored."""
        self._check_mutable()
        if station.id in self._stations:
            return
        self._stations[station.id] = station
        self._adjacency[station.id] = []

    def add_edge(self, a: str, b: str, weight: int) -> None:
        """Connect ``a`` and ``b`` in both directions with ``weight`` minutes."""
        self._check_mutable()
        for station_id in (a, b):
            if station_id not in self._stations:
                raise UnknownStation(station_id)
        if not _is_int(weight) or weight <= 0:
            raise ValueError(f"Edge {a!r}-{b!r}: weight must be a positive integer, got {weight!r}")

        self._adjacency[a].append((b, weight))
        self._adjacency[b].append((a, weight))
        self._edges.append(Edge(source=a, target=b, weight=weight))

    def freeze(self) -> "TransitGraph":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def token(self) -> str:
        return self._token

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Transit graph is frozen; build a new graph instead")

    # ── Queries ──────────────────────────────────────────────────────────

    def get_station(self, station_id: str) -> Station:
        try:
            return self._stations[station_id]
        except KeyError:
            raise UnknownStation(station_id) from None

    def has_station(self, station_id: str) -> bool:
        return station_id in self._stations

    def list_stations(self) -> list[Station]:
        return list(self._stations.values())

    def neighbors(self, station_id: str) -> tuple[tuple[str, int], ...]:
        try:
            return tuple(self._adjacency[station_id])
        except KeyError:
            raise UnknownStation(station_id) from None

    def edges(self) -> Iterator[Edge]:
        return iter(self._edges)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __contains__(self, station_id: object) -> bool:
        return station_id in self._stations

    def __len__(self) -> int:
        return len(self._stations)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "building"
        return f"<TransitGraph stations={len(self)} edges={self.edge_count} {state}>"
