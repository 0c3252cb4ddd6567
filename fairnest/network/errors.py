from __future__ import annotations


class NotFound(LookupError):
    """Raised when a station id does not exist in the graph."""

    label = "Station not found"

    def __init__(self, station_id: str) -> None:
        super().__init__(f"{self.label}: {station_id!r}")
        self.station_id = station_id


class UnknownStation(NotFound):
    """Raised when an edge endpoint or a workplace id is not in the graph."""

    label = "Unknown station"


class GraphFrozenError(RuntimeError):
    """Raised when a published graph is mutated."""
