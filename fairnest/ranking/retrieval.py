from __future__ import annotations

import logging
import time

from ..analytics.store import record_event
from ..llm.groq_client import explain_recommendations
from ..network.data_store import get_graph
from ..network.errors import UnknownStation
from ..network.graph import TransitGraph
from ..network.shortest_path import compute_distances
from .cache import cache_get, cache_set
from .config import DEFAULT_RANKING_CONFIG, RankingConfig
from .explanations import explanation_text
from .models import (
    RecommendationItem,
    RecommendationRequest,
    RecommendationResponse,
    StationOut,
    WeightsOut,
)
from .scoring import RankingResult, rank_stations

logger = logging.getLogger(__name__)


def compute_best_stations(
    graph: TransitGraph,
    workplace_a: str,
    workplace_b: str,
    ratio: float,
    lam: float,
    budget: float,
    config: RankingConfig = DEFAULT_RANKING_CONFIG,
    algorithm: str | None = None,
) -> RankingResult:
    """
    Rank stations for a couple working at ``workplace_a`` and ``workplace_b``.

    Raises ``UnknownStation`` if either workplace is not in ``graph`` and
    ``ValueError`` for out-of-range tuning parameters. A pair of workplaces
    with no commonly reachable station yields an empty result.
    """
    for workplace in (workplace_a, workplace_b):
        if not graph.has_station(workplace):
            raise UnknownStation(workplace)

    # Independent read-only traversals over the frozen graph
    dist_a = compute_distances(graph, workplace_a, algorithm)
    dist_b = compute_distances(graph, workplace_b, algorithm)

    return rank_stations(dist_a, dist_b, graph.list_stations(), ratio, lam, budget, config)


def _search_event(request: RecommendationRequest, response: RecommendationResponse,
                  elapsed_ms: float, cache_hit: bool) -> dict:
    return {
        "workplace_a": request.workplace_a,
        "workplace_b": request.workplace_b,
        "ratio": request.ratio,
        "lambda": request.lambda_,
        "budget": request.budget,
        "total_candidates": response.total_candidates,
        "results_returned": len(response.recommendations),
        "response_time_ms": elapsed_ms,
        "cache_hit": cache_hit,
    }


def get_recommendations(
    request: RecommendationRequest,
    graph: TransitGraph | None = None,
) -> RecommendationResponse:
    start_time = time.time()

    if graph is None:
        graph = get_graph()

    # Unknown workplaces are reported even when a matching entry is cached
    for workplace in (request.workplace_a, request.workplace_b):
        if not graph.has_station(workplace):
            raise UnknownStation(workplace)

    # --- Cache check ---
    request_dict = request.model_dump(by_alias=True)
    cached = cache_get(graph.token, request_dict)
    if cached is not None:
        elapsed_ms = round((time.time() - start_time) * 1000, 1)
        record_event("search", _search_event(request, cached, elapsed_ms, cache_hit=True))
        return cached

    # --- Ranking ---
    result = compute_best_stations(
        graph,
        request.workplace_a,
        request.workplace_b,
        ratio=request.ratio,
        lam=request.lambda_,
        budget=request.budget,
    )
    logger.debug(
        "Ranked %d of %d candidates for %s / %s",
        len(result.stations), result.total_candidates,
        request.workplace_a, request.workplace_b,
    )

    # --- LLM explanations (ordering stays as ranked) ---
    candidate_dicts = [
        {
            "id": scored.station.id,
            "name": scored.station.name,
            "time_a": scored.time_a,
            "time_b": scored.time_b,
            "rent": scored.station.rent,
            "safety_score": scored.station.safety_score,
            "score": round(scored.score, 1),
        }
        for scored in result.stations
    ]
    llm_reasons = explain_recommendations(request_dict, candidate_dicts)

    # --- Assemble response ---
    items: list[RecommendationItem] = []
    for scored in result.stations:
        station = scored.station
        reason = llm_reasons.get(station.id) or explanation_text(
            station.name, scored.category, scored.time_a, scored.time_b,
        )
        items.append(RecommendationItem(
            station=StationOut(
                id=station.id,
                name=station.name,
                rent=station.rent,
                safety_score=station.safety_score,
            ),
            time_a=scored.time_a,
            time_b=scored.time_b,
            score=round(scored.score, 2),
            category=scored.category,
            reason=reason,
        ))

    response = RecommendationResponse(
        recommendations=items,
        total_candidates=result.total_candidates,
        weights=WeightsOut(a=result.weights.a, b=result.weights.b),
    )

    cache_set(graph.token, request_dict, response)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("search", _search_event(request, response, elapsed_ms, cache_hit=False))

    return response
