from __future__ import annotations

import logging
import os
import sys
from typing import Sequence

from route_planner.adapters.config import PlannerSettings
from route_planner.adapters.persistence import (
    CsvAttractionMapper,
    CsvRoadNetworkRepository,
)
from route_planner.app.services.route_planning_service import RoutePlanningService
from route_planner.domain.models import PlannedRoute, RouteComparison

USAGE = "usage: route-planner-compare START END [ATTRACTION ...]"


def _format_outcome(
    label: str, route: PlannedRoute | None, elapsed_ms: float, error: str | None
) -> list[str]:
    lines = [f"{label}:"]
    if route is not None:
        lines.append(f"  Route: {' -> '.join(route.cities)}")
        lines.append(f"  Distance: {route.total_distance:.1f} miles")
        if route.visit_order:
            lines.append(f"  Visit order: {', '.join(route.visit_order)}")
    else:
        lines.append(f"  Route: not found ({error or 'unknown error'})")
        lines.append("  Distance: N/A")
    lines.append(f"  Execution time: {elapsed_ms:.3f} ms")
    return lines


def format_comparison(result: RouteComparison) -> str:
    via = ", ".join(result.attraction_names) or "None"
    lines = [
        f"From: {result.start}",
        f"To:   {result.end}",
        f"Via:  {via}",
        "",
        *_format_outcome(
            "Optimal (Dijkstra + permutations)",
            result.optimal,
            result.optimal_ms,
            result.optimal_error,
        ),
        "",
        *_format_outcome(
            "Heuristic (nearest neighbour)",
            result.heuristic,
            result.heuristic_ms,
            result.heuristic_error,
        ),
    ]
    reported = result.optimal or result.heuristic
    if reported is not None and reported.skipped_attractions:
        lines.append("")
        lines.append(f"Skipped attractions: {', '.join(reported.skipped_attractions)}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(USAGE, file=sys.stderr)
        return 2

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = PlannerSettings.from_env()
    network = CsvRoadNetworkRepository(path=settings.roads_path).load_network()
    mapper = CsvAttractionMapper(path=settings.attractions_path)

    service = RoutePlanningService(
        network=network,
        attraction_mapper=mapper,
        max_exact_waypoints=settings.max_exact_waypoints,
    )

    start, end, *attractions = args
    result = service.compare(start=start, end=end, attraction_names=attractions)
    print(format_comparison(result))
    return 0 if result.optimal or result.heuristic else 1


if __name__ == "__main__":
    sys.exit(main())
