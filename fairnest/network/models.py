from __future__ import annotations

from dataclasses import dataclass


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Station:
    id: str
    name: str
    rent: int
    safety_score: int

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("Station id must be a non-empty string")
        if not _is_int(self.rent) or self.rent < 0:
            raise ValueError(f"Station {self.id!r}: rent must be a non-negative integer")
        if not _is_int(self.safety_score) or not 1 <= self.safety_score <= 5:
            raise ValueError(f"Station {self.id!r}: safety_score must be an integer 1-5")


@dataclass(frozen=True)
class Edge:
    """Undirected connection between two stations, weighted in minutes."""

    source: str
    target: str
    weight: int
