from __future__ import annotations

import heapq
import math
from dataclasses import dataclass

from route_planner.domain.models import RoadNetwork


@dataclass(frozen=True, slots=True)
class DijkstraResult:
    source: str
    distances: dict[str, float]
    predecessors: dict[str, str]

    def distance_to(self, city: str) -> float:
        return self.distances.get(city, math.inf)

    def reaches(self, city: str) -> bool:
        return self.distance_to(city) < math.inf


def shortest_paths(network: RoadNetwork, source: str) -> DijkstraResult:
    """Single-source shortest distances and predecessors (Dijkstra).

    This implementation assumes:
        - road distances are non-negative
        - a source missing from the network yields empty maps (callers check)

    The heap is keyed by ``(distance, city)`` and stale entries for already
    finalised cities are dropped when popped (lazy deletion).
    """

    if source not in network:
        return DijkstraResult(source=source, distances={}, predecessors={})

    distances: dict[str, float] = {city: math.inf for city in network.cities()}
    predecessors: dict[str, str] = {}
    distances[source] = 0.0

    heap: list[tuple[float, str]] = [(0.0, source)]
    finalized: set[str] = set()

    while heap:
        dist, city = heapq.heappop(heap)
        if city in finalized:
            continue
        finalized.add(city)

        for neighbor, weight in network.neighbors(city):
            if neighbor in finalized:
                continue
            candidate = dist + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                predecessors[neighbor] = city
                heapq.heappush(heap, (candidate, neighbor))

    return DijkstraResult(source=source, distances=distances, predecessors=predecessors)


def reconstruct_path(result: DijkstraResult, *, target: str) -> list[str] | None:
    """Walk predecessors back from target to the result's source.

    Returns None when the target is unreachable.
    """

    source = result.source
    if target == source:
        return [source] if source in result.distances else None
    if target not in result.predecessors:
        return None

    out: list[str] = [target]
    cur = target
    while cur != source:
        prev = result.predecessors.get(cur)
        if prev is None:
            return None
        out.append(prev)
        cur = prev
    out.reverse()
    return out
