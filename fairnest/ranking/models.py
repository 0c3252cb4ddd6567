from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .explanations import ExplanationCategory


class RecommendationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    workplace_a: str = Field(..., min_length=1, description="Station id of A's workplace")
    workplace_b: str = Field(..., min_length=1, description="Station id of B's workplace")
    ratio: float = Field(
        default=50.0, ge=0.0, le=100.0,
        description="0 favours A's commute, 100 favours B's, 50 weighs both equally",
    )
    lambda_: float = Field(
        default=0.5, ge=0.0, le=1.0, alias="lambda",
        description="0 minimises total time, 1 minimises the longer commute",
    )
    budget: int = Field(default=150000, ge=0, description="Monthly rent budget")


class StationOut(BaseModel):
    id: str
    name: str
    rent: int
    safety_score: int


class RecommendationItem(BaseModel):
    station: StationOut
    time_a: int
    time_b: int
    score: float
    category: ExplanationCategory
    reason: str


class WeightsOut(BaseModel):
    a: float
    b: float


class RecommendationResponse(BaseModel):
    recommendations: list[RecommendationItem]
    total_candidates: int
    weights: WeightsOut


class DistancesResponse(BaseModel):
    source: str
    distances: dict[str, int]
