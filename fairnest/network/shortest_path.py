"""
Single-source commute times over a ``TransitGraph``.

Two interchangeable Dijkstra variants are provided:

* ``shortest_distances`` - dense selection (no priority queue). O(V^2)
  selection plus O(E) relaxations, which is fine for networks of a few
  hundred stations. Ties during selection go to the station listed first
  in the graph, so visitation order is reproducible.
* ``heap_shortest_distances`` - binary-heap variant for larger networks.

Both return a distance map covering every station. Stations outside the
source's connected component map to ``UNREACHABLE``. Distance values do not
depend on the variant or on tie resolution.
"""
from __future__ import annotations

import math
from heapq import heappop, heappush
from typing import Callable, Dict

from .config import DEFAULT_NETWORK_CONFIG
from .errors import NotFound
from .graph import TransitGraph

UNREACHABLE = math.inf

DistanceMap = Dict[str, float]


def shortest_distances(graph: TransitGraph, source: str) -> DistanceMap:
    if not graph.has_station(source):
        raise NotFound(source)

    order = [station.id for station in graph.list_stations()]
    distances: DistanceMap = {station_id: UNREACHABLE for station_id in order}
    distances[source] = 0

    # dict keeps listing order, and min() returns the first minimal key
    unvisited = dict.fromkeys(order)

    while unvisited:
        current = min(unvisited, key=distances.__getitem__)
        current_distance = distances[current]
        if current_distance == UNREACHABLE:
            break

        del unvisited[current]

        for neighbor, weight in graph.neighbors(current):
            if neighbor not in unvisited:
                continue
            candidate = current_distance + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate

    return distances


def heap_shortest_distances(graph: TransitGraph, source: str) -> DistanceMap:
    if not graph.has_station(source):
        raise NotFound(source)

    distances: DistanceMap = {station.id: UNREACHABLE for station in graph.list_stations()}
    distances[source] = 0
    pq = [(0, source)]

    while pq:
        current_distance, current = heappop(pq)

        if current_distance > distances[current]:
            continue

        for neighbor, weight in graph.neighbors(current):
            candidate = current_distance + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                heappush(pq, (candidate, neighbor))

    return distances


ALGORITHMS: dict[str, Callable[[TransitGraph, str], DistanceMap]] = {
    "dense": shortest_distances,
    "heap": heap_shortest_distances,
}


def compute_distances(graph: TransitGraph, source: str, algorithm: str | None = None) -> DistanceMap:
    """Run the named shortest-path variant from ``source`` (configured one by default)."""
    algorithm = algorithm or DEFAULT_NETWORK_CONFIG.shortest_path_algorithm
    try:
        func = ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown shortest-path algorithm {algorithm!r}; expected one of {sorted(ALGORITHMS)}"
        ) from None
    return func(graph, source)


def is_reachable(distance: float) -> bool:
    return distance != UNREACHABLE
