from __future__ import annotations

from abc import ABC, abstractmethod

from route_planner.domain.models import RoadNetwork


class IRoadNetworkRepository(ABC):
    """Port for loading the road network into memory."""

    @abstractmethod
    def load_network(self) -> RoadNetwork:
        raise NotImplementedError
