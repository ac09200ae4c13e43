from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Sequence

from route_planner.app.ports.output import IAttractionMapper
from route_planner.domain.algorithms.dijkstra import shortest_paths
from route_planner.domain.algorithms.ordering import (
    WaypointOrdering,
    best_ordering,
    nearest_neighbor_ordering,
)
from route_planner.domain.algorithms.path_table import (
    PathTable,
    ShortestPathRunner,
    assemble_route,
    build_path_table,
)
from route_planner.domain.exceptions import (
    Infeasible,
    RoutingError,
    TooManyWaypoints,
    UnknownCity,
)
from route_planner.domain.models import (
    PlannedRoute,
    PlanStrategy,
    RoadNetwork,
    RouteComparison,
)

from .key_point_resolver import WaypointResolution, resolve_waypoints

logger = logging.getLogger(__name__)

DEFAULT_MAX_EXACT_WAYPOINTS = 9


@dataclass(slots=True)
class RoutePlanningService:
    """Application service (use case) for multi-stop route planning.

    Both strategies resolve attractions to waypoint cities, run one shortest
    path search per key point (start, end, waypoints) and stitch the chosen
    legs together:

    - ``plan_optimal`` tries every waypoint ordering (k! orderings, bounded by
      ``max_exact_waypoints``).
    - ``plan_heuristic`` greedily visits the nearest remaining waypoint.

    The network must not be mutated while a call is running.
    """

    network: RoadNetwork
    attraction_mapper: IAttractionMapper
    max_exact_waypoints: int = DEFAULT_MAX_EXACT_WAYPOINTS
    shortest_path_runner: ShortestPathRunner = shortest_paths

    # Redundant reporting state; the returned PlannedRoute is authoritative.
    _last_optimal_distance: float | None = field(default=None, init=False)
    _last_heuristic_distance: float | None = field(default=None, init=False)

    @property
    def last_optimal_distance(self) -> float | None:
        return self._last_optimal_distance

    @property
    def last_heuristic_distance(self) -> float | None:
        return self._last_heuristic_distance

    def plan_optimal(
        self, *, start: str, end: str, attraction_names: Sequence[str] | None = None
    ) -> PlannedRoute:
        self._last_optimal_distance = None

        self._require_city(start, role="start")
        self._require_city(end, role="end")
        resolution = self._resolve(start, end, attraction_names)

        k = len(resolution.waypoints)
        if k > self.max_exact_waypoints:
            raise TooManyWaypoints(k, self.max_exact_waypoints)

        table = self._precompute(start, end, resolution.waypoints)

        logger.info(
            "Evaluating %d orderings of %d waypoints", math.factorial(k), k
        )
        ordering = best_ordering(
            table, start=start, end=end, waypoints=resolution.waypoints
        )
        if ordering is None:
            raise Infeasible(
                _infeasible_message(start, end, resolution.waypoints)
            )

        route = self._build_route(
            PlanStrategy.OPTIMAL, table, start, end, ordering, resolution
        )
        self._last_optimal_distance = route.total_distance
        return route

    def plan_heuristic(
        self, *, start: str, end: str, attraction_names: Sequence[str] | None = None
    ) -> PlannedRoute:
        self._last_heuristic_distance = None

        self._require_city(start, role="start")
        self._require_city(end, role="end")
        resolution = self._resolve(start, end, attraction_names)

        table = self._precompute(start, end, resolution.waypoints)

        ordering = nearest_neighbor_ordering(
            table, start=start, end=end, waypoints=resolution.waypoints
        )
        if ordering is None:
            raise Infeasible(
                _infeasible_message(start, end, resolution.waypoints)
            )

        route = self._build_route(
            PlanStrategy.HEURISTIC, table, start, end, ordering, resolution
        )
        self._last_heuristic_distance = route.total_distance
        return route

    def compare(
        self, *, start: str, end: str, attraction_names: Sequence[str] | None = None
    ) -> RouteComparison:
        """Run both strategies and record their routes, timings and failures."""

        names = tuple(attraction_names or ())

        optimal: PlannedRoute | None = None
        optimal_error: str | None = None
        t0 = time.perf_counter()
        try:
            optimal = self.plan_optimal(start=start, end=end, attraction_names=names)
        except RoutingError as exc:
            optimal_error = f"{type(exc).__name__}: {exc}"
        optimal_ms = (time.perf_counter() - t0) * 1000.0

        heuristic: PlannedRoute | None = None
        heuristic_error: str | None = None
        t0 = time.perf_counter()
        try:
            heuristic = self.plan_heuristic(
                start=start, end=end, attraction_names=names
            )
        except RoutingError as exc:
            heuristic_error = f"{type(exc).__name__}: {exc}"
        heuristic_ms = (time.perf_counter() - t0) * 1000.0

        return RouteComparison(
            start=start,
            end=end,
            attraction_names=names,
            optimal=optimal,
            heuristic=heuristic,
            optimal_ms=optimal_ms,
            heuristic_ms=heuristic_ms,
            optimal_error=optimal_error,
            heuristic_error=heuristic_error,
        )

    def _require_city(self, city: str, *, role: str) -> None:
        if city not in self.network:
            raise UnknownCity(city, role)

    def _resolve(
        self, start: str, end: str, attraction_names: Sequence[str] | None
    ) -> WaypointResolution:
        resolution = resolve_waypoints(
            self.attraction_mapper,
            start=start,
            end=end,
            attraction_names=attraction_names,
        )
        logger.info(
            "Planning %s -> %s via %s",
            start,
            end,
            list(resolution.waypoints) or "no waypoints",
        )
        return resolution

    def _precompute(
        self, start: str, end: str, waypoints: Sequence[str]
    ) -> PathTable:
        key_points = [start, end, *waypoints]
        logger.debug("Pre-computing shortest paths for %d key points", len(key_points))
        return build_path_table(
            self.network, key_points, runner=self.shortest_path_runner
        )

    def _build_route(
        self,
        strategy: PlanStrategy,
        table: PathTable,
        start: str,
        end: str,
        ordering: WaypointOrdering,
        resolution: WaypointResolution,
    ) -> PlannedRoute:
        cities = assemble_route(table, ordering.sequence(start, end))
        logger.info(
            "%s route via %s: %.1f",
            strategy.value,
            list(ordering.visit_order) or "direct",
            ordering.total_distance,
        )
        return PlannedRoute(
            strategy=strategy,
            cities=tuple(cities),
            total_distance=ordering.total_distance,
            waypoints=resolution.waypoints,
            visit_order=ordering.visit_order,
            skipped_attractions=resolution.skipped,
        )


def _infeasible_message(start: str, end: str, waypoints: Sequence[str]) -> str:
    if not waypoints:
        return f"'{end}' is unreachable from '{start}'"
    return (
        f"No connected route from '{start}' to '{end}' visits all of "
        f"{', '.join(waypoints)}"
    )
