from __future__ import annotations

from functools import lru_cache

from route_planner.adapters.config import PlannerSettings
from route_planner.adapters.persistence import (
    CsvAttractionMapper,
    CsvRoadNetworkRepository,
)
from route_planner.app.services.route_planning_service import RoutePlanningService
from route_planner.app.services.shortest_path_cache import ShortestPathCache
from route_planner.domain.algorithms.dijkstra import shortest_paths
from route_planner.domain.models import RoadNetwork


@lru_cache(maxsize=1)
def get_settings() -> PlannerSettings:
    return PlannerSettings.from_env()


@lru_cache(maxsize=1)
def get_road_network() -> RoadNetwork:
    # Built once per process; planning only reads it.
    return CsvRoadNetworkRepository(path=get_settings().roads_path).load_network()


@lru_cache(maxsize=1)
def get_attraction_mapper() -> CsvAttractionMapper:
    return CsvAttractionMapper(path=get_settings().attractions_path)


@lru_cache(maxsize=1)
def get_shortest_path_cache() -> ShortestPathCache:
    return ShortestPathCache()


def get_planning_service() -> RoutePlanningService:
    settings = get_settings()
    runner = get_shortest_path_cache() if settings.cache_enabled else shortest_paths
    return RoutePlanningService(
        network=get_road_network(),
        attraction_mapper=get_attraction_mapper(),
        max_exact_waypoints=settings.max_exact_waypoints,
        shortest_path_runner=runner,
    )
