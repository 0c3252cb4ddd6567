from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .network.data_store import get_graph, get_lines
from .network.errors import NotFound
from .network.shortest_path import compute_distances, is_reachable
from .ranking.cache import get_cache_stats
from .ranking.models import (
    DistancesResponse,
    RecommendationRequest,
    RecommendationResponse,
    StationOut,
)
from .ranking.retrieval import get_recommendations

logger = logging.getLogger(__name__)

app = FastAPI(title="FairNest Station Recommendation API", version="1.0.0")

_MIN_QUERY_LENGTH = 2


@app.exception_handler(NotFound)
def station_not_found(request: Request, exc: NotFound) -> JSONResponse:
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=404,
        content={"detail": str(exc.args[0]), "station_id": exc.station_id},
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    graph = get_graph()
    return {
        "stations": len(graph),
        "edges": graph.edge_count,
        "lines": get_lines(),
    }


@app.get("/stations", response_model=list[StationOut])
def search_stations(q: str = Query(default="", max_length=100)) -> list[StationOut]:
    query = q.strip()
    if len(query) < _MIN_QUERY_LENGTH:
        return []
    needle = query.lower()
    return [
        StationOut(id=s.id, name=s.name, rent=s.rent, safety_score=s.safety_score)
        for s in get_graph().list_stations()
        if needle in s.name.lower() or needle in s.id.lower()
    ]


@app.get("/stations/{station_id}", response_model=StationOut)
def station_detail(station_id: str) -> StationOut:
    s = get_graph().get_station(station_id)
    return StationOut(id=s.id, name=s.name, rent=s.rent, safety_score=s.safety_score)


@app.get("/distances/{station_id}", response_model=DistancesResponse)
def distances(station_id: str) -> DistancesResponse:
    dist = compute_distances(get_graph(), station_id)
    return DistancesResponse(
        source=station_id,
        distances={sid: int(d) for sid, d in dist.items() if is_reachable(d)},
    )


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(body: RecommendationRequest) -> RecommendationResponse:
    try:
        return get_recommendations(body)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


# ── Stats endpoints ──────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
