from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from route_planner.app.ports.output import IAttractionMapper

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WaypointResolution:
    waypoints: tuple[str, ...]
    skipped: tuple[str, ...] = ()


def resolve_waypoints(
    mapper: IAttractionMapper,
    *,
    start: str,
    end: str,
    attraction_names: Iterable[str] | None,
) -> WaypointResolution:
    """Map attraction names to the intermediate cities a route must visit.

    Unknown names are logged and skipped. Cities equal to start or end are
    already on the route and dropped. Remaining cities are deduplicated keeping
    the order in which they first appear.
    """

    waypoints: list[str] = []
    seen: set[str] = set()
    skipped: list[str] = []

    for raw in attraction_names or ():
        name = (raw or "").strip()
        if not name:
            continue

        city = mapper.resolve(name)
        if city is None:
            logger.warning("Attraction %r not found; skipping", name)
            skipped.append(name)
            continue

        if city in (start, end) or city in seen:
            continue
        seen.add(city)
        waypoints.append(city)

    return WaypointResolution(waypoints=tuple(waypoints), skipped=tuple(skipped))
