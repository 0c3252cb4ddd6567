from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class NetworkConfig:
    """
    Where the transit network is read from and how commute times are computed.
    """

    stations_path: Path = Path(os.getenv("FAIRNEST_STATIONS_CSV", str(_DATA_DIR / "stations.csv")))
    edges_path: Path = Path(os.getenv("FAIRNEST_EDGES_CSV", str(_DATA_DIR / "edges.csv")))
    shortest_path_algorithm: str = os.getenv("FAIRNEST_SHORTEST_PATH", "dense")


DEFAULT_NETWORK_CONFIG = NetworkConfig()
