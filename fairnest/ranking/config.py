from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class RankingConfig:
    # Blended commute cost that maps to a score of 0
    calibration_minutes: float = 120.0
    budget_penalty: float = 15.0
    top_n: int = 10
    # Max |timeA - timeB| still considered a balanced commute
    balanced_threshold_minutes: int = 5
    cache_ttl_seconds: int = int(os.getenv("FAIRNEST_CACHE_TTL", "300"))
    cache_max_entries: int = 256


DEFAULT_RANKING_CONFIG = RankingConfig()
