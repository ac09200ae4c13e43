from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

import networkx as nx


@dataclass(frozen=True, slots=True)
class Road:
    """A single undirected road record (one line of the roads CSV)."""

    city_a: str
    city_b: str
    distance: float


@dataclass(slots=True)
class RoadNetwork:
    """Undirected weighted multigraph of cities.

    Parallel roads between the same pair of cities are kept as separate edges.
    Cities only exist once a road references them. ``revision`` increases on
    every mutation so cached shortest-path trees can be invalidated.
    """

    graph: nx.MultiGraph = field(default_factory=nx.MultiGraph)
    revision: int = 0

    @classmethod
    def from_roads(cls, roads: Iterable[Road]) -> "RoadNetwork":
        network = cls()
        for road in roads:
            network.add_road(road.city_a, road.city_b, road.distance)
        return network

    def add_road(self, city_a: str, city_b: str, distance: float) -> None:
        # Distance is trusted to be finite and non-negative; loaders filter input.
        self.graph.add_edge(city_a, city_b, distance=float(distance))
        self.revision += 1

    def neighbors(self, city: str) -> list[tuple[str, float]]:
        if city not in self.graph:
            return []
        return [
            (neighbor, float(data["distance"]))
            for _, neighbor, data in self.graph.edges(city, data=True)
        ]

    def cities(self) -> set[str]:
        return set(self.graph.nodes)

    @property
    def road_count(self) -> int:
        return int(self.graph.number_of_edges())

    def edge_distance(self, city_a: str, city_b: str) -> float | None:
        """Shortest direct road between two cities, or None if not adjacent."""

        if city_a not in self.graph or not self.graph.has_edge(city_a, city_b):
            return None
        parallel = self.graph.get_edge_data(city_a, city_b) or {}
        return min(float(data["distance"]) for data in parallel.values())

    def route_distance(self, cities: Sequence[str]) -> float | None:
        """Sum of direct road distances along a city sequence.

        Returns None if any consecutive pair is not directly connected.
        """

        if not cities or cities[0] not in self.graph:
            return None
        total = 0.0
        for a, b in zip(cities, cities[1:]):
            d = self.edge_distance(a, b)
            if d is None:
                return None
            total += d
        return total

    def __contains__(self, city: object) -> bool:
        return city in self.graph

    def __len__(self) -> int:
        return int(self.graph.number_of_nodes())
