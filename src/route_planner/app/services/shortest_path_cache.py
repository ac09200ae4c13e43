from __future__ import annotations

from dataclasses import dataclass, field

from route_planner.domain.algorithms.dijkstra import DijkstraResult, shortest_paths
from route_planner.domain.models import RoadNetwork


@dataclass(slots=True)
class ShortestPathCache:
    """Opt-in cross-call cache of shortest-path trees, keyed by source city.

    Entries are tagged with the network revision they were computed on; a
    network mutation bumps the revision and the whole cache is dropped on the
    next lookup. Not part of the default planning path.
    """

    max_entries: int = 256

    _revision: int | None = None
    _network_id: int | None = None
    _results: dict[str, DijkstraResult] = field(default_factory=dict)
    hits: int = 0
    misses: int = 0

    def __call__(self, network: RoadNetwork, source: str) -> DijkstraResult:
        if self._network_id != id(network) or self._revision != network.revision:
            self._results.clear()
            self._network_id = id(network)
            self._revision = network.revision

        cached = self._results.get(source)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        result = shortest_paths(network, source)
        if len(self._results) >= self.max_entries:
            # Drop the oldest entry (dicts keep insertion order).
            self._results.pop(next(iter(self._results)))
        self._results[source] = result
        return result

    def clear(self) -> None:
        self._results.clear()
        self._revision = None
        self._network_id = None
