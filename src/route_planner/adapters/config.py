from __future__ import annotations

import os
from dataclasses import dataclass

from route_planner.adapters.aws import env_bool
from route_planner.app.services.route_planning_service import (
    DEFAULT_MAX_EXACT_WAYPOINTS,
)


@dataclass(frozen=True, slots=True)
class PlannerSettings:
    """Runtime settings, read from the environment.

    Env vars:
      - ROADS_CSV_PATH: roads CSV, local path or s3://bucket/key
        (default: data/roads.csv)
      - ATTRACTIONS_CSV_PATH: attractions CSV, local path or s3://bucket/key
        (default: data/attractions.csv)
      - MAX_EXACT_WAYPOINTS: waypoint ceiling of the exact optimizer (default 9)
      - PLANNER_CACHE_ENABLED: reuse shortest-path trees across requests
        (default: off)
    """

    roads_path: str = "data/roads.csv"
    attractions_path: str = "data/attractions.csv"
    max_exact_waypoints: int = DEFAULT_MAX_EXACT_WAYPOINTS
    cache_enabled: bool = False

    @staticmethod
    def from_env() -> "PlannerSettings":
        max_raw = (os.getenv("MAX_EXACT_WAYPOINTS") or "").strip()
        max_exact = int(max_raw) if max_raw else DEFAULT_MAX_EXACT_WAYPOINTS
        if max_exact < 0:
            raise ValueError(f"Invalid MAX_EXACT_WAYPOINTS: {max_raw}")

        return PlannerSettings(
            roads_path=(os.getenv("ROADS_CSV_PATH") or "").strip()
            or "data/roads.csv",
            attractions_path=(os.getenv("ATTRACTIONS_CSV_PATH") or "").strip()
            or "data/attractions.csv",
            max_exact_waypoints=max_exact,
            cache_enabled=env_bool("PLANNER_CACHE_ENABLED", False),
        )
