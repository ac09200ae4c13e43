from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .path_table import PathTable
from .permutations import swap_permutations


@dataclass(frozen=True, slots=True)
class WaypointOrdering:
    visit_order: tuple[str, ...]
    total_distance: float
    evaluated: int = 0

    def sequence(self, start: str, end: str) -> list[str]:
        return [start, *self.visit_order, end]


def best_ordering(
    table: PathTable, *, start: str, end: str, waypoints: Sequence[str]
) -> WaypointOrdering | None:
    """Exhaustively search waypoint orderings for the shortest feasible tour.

    Orderings come from ``swap_permutations`` starting at the given waypoint
    order; on equal totals the first ordering found is kept. An ordering with an
    unreachable leg is skipped. Returns None if no ordering is feasible.
    """

    best: tuple[str, ...] | None = None
    best_total = math.inf
    evaluated = 0

    for ordering in swap_permutations(waypoints):
        evaluated += 1
        total = 0.0
        prev = start
        for point in (*ordering, end):
            total += table.distance(prev, point)
            # Also catches unreachable legs, since inf >= anything.
            if total >= best_total:
                break
            prev = point
        else:
            best = ordering
            best_total = total

    if best is None:
        return None
    return WaypointOrdering(
        visit_order=best, total_distance=float(best_total), evaluated=evaluated
    )


def nearest_neighbor_ordering(
    table: PathTable, *, start: str, end: str, waypoints: Sequence[str]
) -> WaypointOrdering | None:
    """Greedy tour: always move to the closest waypoint not yet visited.

    Ties go to the waypoint listed first. Returns None as soon as the next
    step or the final leg to ``end`` is unreachable.
    """

    unvisited = list(waypoints)
    order: list[str] = []
    total = 0.0
    current = start

    while unvisited:
        nearest: str | None = None
        nearest_d = math.inf
        for candidate in unvisited:
            d = table.distance(current, candidate)
            if d < nearest_d:
                nearest = candidate
                nearest_d = d

        if nearest is None:
            return None

        total += nearest_d
        order.append(nearest)
        unvisited.remove(nearest)
        current = nearest

    final_leg = table.distance(current, end)
    if final_leg == math.inf:
        return None

    return WaypointOrdering(
        visit_order=tuple(order),
        total_distance=float(total + final_leg),
        evaluated=len(order),
    )
