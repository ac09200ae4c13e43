from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class RouteRequestSchema(BaseModel):
    start: str = Field(..., min_length=1)
    end: str = Field(..., min_length=1)
    attractions: list[str] = []


class PlannedRouteSchema(BaseModel):
    strategy: Literal["optimal", "heuristic"]
    cities: list[str]
    total_distance: float
    waypoints: list[str] = []
    visit_order: list[str] = []
    skipped_attractions: list[str] = []


class StrategyOutcomeSchema(BaseModel):
    route: PlannedRouteSchema | None = None
    elapsed_ms: float
    error: str | None = None


class RouteComparisonSchema(BaseModel):
    start: str
    end: str
    attractions: list[str] = []
    optimal: StrategyOutcomeSchema
    heuristic: StrategyOutcomeSchema
    distance_gap: float | None = None


class CitiesSchema(BaseModel):
    count: int
    cities: list[str]
