"""
Fairness-aware scoring of candidate stations.

Each station reachable from both workplaces gets a 0-100 score built from
two weighted commute times:

    sum    = wA * timeA + wB * timeB
    fair   = max(wA * timeA, wB * timeB)
    cost   = lam * fair + (1 - lam) * sum
    score  = 100 - cost / calibration * 100   (- penalty if rent > budget)

``lam`` blends "minimise total time" (0) against "minimise the worse-off
commuter's time" (1). The ratio dial skews the weights towards one person.
Scores are clamped to [0, 100] after the rent penalty is applied.

Ordering is by score, highest first. Equal scores keep the graph's station
listing order, so the same inputs always give the same shortlist.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

import numpy as np
import pandas as pd

from ..network.models import Station
from ..network.shortest_path import UNREACHABLE
from .config import DEFAULT_RANKING_CONFIG, RankingConfig
from .explanations import ExplanationCategory, explanation_category


@dataclass(frozen=True)
class CommuteWeights:
    a: float
    b: float


@dataclass(frozen=True)
class ScoredStation:
    station: Station
    time_a: int
    time_b: int
    score: float
    category: ExplanationCategory


@dataclass(frozen=True)
class RankingResult:
    stations: list[ScoredStation]
    total_candidates: int
    weights: CommuteWeights


def derive_weights(ratio: float) -> CommuteWeights:
    """
    Piecewise-linear weights around the equal point ``ratio == 50``.

    Below 50 A's commute counts more (up to 3x at 0) and B's less (down to
    0.5); above 50 the roles swap.
    """
    if ratio < 50:
        skew = 50 - ratio
        return CommuteWeights(a=1.0 + skew / 25, b=max(0.5, 1.0 - skew / 50))
    if ratio > 50:
        skew = ratio - 50
        return CommuteWeights(a=max(0.5, 1.0 - skew / 50), b=1.0 + skew / 25)
    return CommuteWeights(a=1.0, b=1.0)


def blended_cost(time_a: float, time_b: float, weights: CommuteWeights, lam: float) -> float:
    weighted_a = weights.a * time_a
    weighted_b = weights.b * time_b
    score_sum = weighted_a + weighted_b
    score_fair = max(weighted_a, weighted_b)
    return lam * score_fair + (1 - lam) * score_sum


def raw_score(
    time_a: float,
    time_b: float,
    rent: int,
    weights: CommuteWeights,
    lam: float,
    budget: float,
    config: RankingConfig = DEFAULT_RANKING_CONFIG,
) -> float:
    """Score before clamping, including the over-budget penalty."""
    cost = blended_cost(time_a, time_b, weights, lam)
    score = 100 - (cost / config.calibration_minutes) * 100
    if rent > budget:
        score -= config.budget_penalty
    return score


def score_station(
    time_a: float,
    time_b: float,
    rent: int,
    weights: CommuteWeights,
    lam: float,
    budget: float,
    config: RankingConfig = DEFAULT_RANKING_CONFIG,
) -> float:
    score = raw_score(time_a, time_b, rent, weights, lam, budget, config)
    return float(np.clip(score, 0.0, 100.0))


def validate_parameters(ratio: float, lam: float, budget: float) -> None:
    """Reject out-of-range tuning parameters instead of coercing them."""
    if not 0 <= ratio <= 100:
        raise ValueError(f"ratio must be within [0, 100], got {ratio!r}")
    if not 0 <= lam <= 1:
        raise ValueError(f"lambda must be within [0, 1], got {lam!r}")
    if not budget >= 0:
        raise ValueError(f"budget must be non-negative, got {budget!r}")


def _score_row(
    row: pd.Series,
    weights: CommuteWeights,
    lam: float,
    budget: float,
    config: RankingConfig,
) -> float:
    return score_station(row["time_a"], row["time_b"], row["rent"], weights, lam, budget, config)


def rank_stations(
    dist_a: Mapping[str, float],
    dist_b: Mapping[str, float],
    stations: Sequence[Station],
    ratio: float,
    lam: float,
    budget: float,
    config: RankingConfig = DEFAULT_RANKING_CONFIG,
) -> RankingResult:
    """
    Score and rank ``stations`` given commute maps from both workplaces.

    ``stations`` must be in graph listing order; that order breaks score ties.
    Stations missing from either map, or unreachable in it, are excluded.
    """
    validate_parameters(ratio, lam, budget)
    weights = derive_weights(ratio)

    frame = pd.DataFrame({
        "order": range(len(stations)),
        "time_a": [dist_a.get(s.id, UNREACHABLE) for s in stations],
        "time_b": [dist_b.get(s.id, UNREACHABLE) for s in stations],
        "rent": [s.rent for s in stations],
    }, columns=["order", "time_a", "time_b", "rent"])

    # --- Hard filter: reachable from both workplaces ---
    mask = np.isfinite(frame["time_a"].astype(float)) & np.isfinite(frame["time_b"].astype(float))
    candidates = frame.loc[mask].copy()
    total_candidates = len(candidates)

    if candidates.empty:
        return RankingResult(stations=[], total_candidates=0, weights=weights)

    candidates["score"] = candidates.apply(
        _score_row,
        axis=1,
        weights=weights,
        lam=lam,
        budget=budget,
        config=config,
    )

    # Score descending, then listing order ascending
    top = candidates.sort_values(
        ["score", "order"], ascending=[False, True], kind="mergesort",
    ).head(config.top_n)

    ranked: list[ScoredStation] = []
    for row in top.itertuples(index=False):
        time_a = int(row.time_a)
        time_b = int(row.time_b)
        ranked.append(ScoredStation(
            station=stations[int(row.order)],
            time_a=time_a,
            time_b=time_b,
            score=float(row.score),
            category=explanation_category(time_a, time_b, config.balanced_threshold_minutes),
        ))

    return RankingResult(stations=ranked, total_candidates=total_candidates, weights=weights)
