from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PlanStrategy(str, Enum):
    OPTIMAL = "optimal"
    HEURISTIC = "heuristic"


@dataclass(frozen=True, slots=True)
class PlannedRoute:
    """A continuous city sequence from start to end visiting every waypoint."""

    strategy: PlanStrategy
    cities: tuple[str, ...]
    total_distance: float
    waypoints: tuple[str, ...] = ()
    visit_order: tuple[str, ...] = ()
    skipped_attractions: tuple[str, ...] = field(default_factory=tuple)

    @property
    def start(self) -> str:
        return self.cities[0]

    @property
    def end(self) -> str:
        return self.cities[-1]


@dataclass(frozen=True, slots=True)
class RouteComparison:
    """Outcome of running both strategies for the same request."""

    start: str
    end: str
    attraction_names: tuple[str, ...]
    optimal: PlannedRoute | None = None
    heuristic: PlannedRoute | None = None
    optimal_ms: float = 0.0
    heuristic_ms: float = 0.0
    optimal_error: str | None = None
    heuristic_error: str | None = None

    @property
    def distance_gap(self) -> float | None:
        # How much longer the greedy route is than the exact one.
        if self.optimal is None or self.heuristic is None:
            return None
        return float(self.heuristic.total_distance - self.optimal.total_distance)
