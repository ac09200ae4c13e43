from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from route_planner.domain.models import RoadNetwork

from .dijkstra import DijkstraResult, reconstruct_path, shortest_paths
from .segments import concatenate_segments

ShortestPathRunner = Callable[[RoadNetwork, str], DijkstraResult]


@dataclass(frozen=True, slots=True)
class PathTable:
    """Shortest-path trees for every key point of a planning request.

    Built once per request so that leg distances and paths are dictionary
    lookups while orderings are evaluated.
    """

    results_by_source: dict[str, DijkstraResult]

    def distance(self, origin: str, destination: str) -> float:
        result = self.results_by_source.get(origin)
        if result is None:
            return math.inf
        return result.distance_to(destination)

    def path(self, origin: str, destination: str) -> list[str] | None:
        result = self.results_by_source.get(origin)
        if result is None or not result.reaches(destination):
            return None
        return reconstruct_path(result, target=destination)


def build_path_table(
    network: RoadNetwork,
    key_points: Iterable[str],
    *,
    runner: ShortestPathRunner = shortest_paths,
) -> PathTable:
    results: dict[str, DijkstraResult] = {}
    for point in key_points:
        if point not in results:
            results[point] = runner(network, point)
    return PathTable(results_by_source=results)


def assemble_route(table: PathTable, sequence: Sequence[str]) -> list[str]:
    """Concatenate the shortest-path segment of every consecutive key-point pair."""

    if len(sequence) < 2:
        return list(sequence)
    segments = [table.path(a, b) for a, b in zip(sequence, sequence[1:])]
    return concatenate_segments(segments)
