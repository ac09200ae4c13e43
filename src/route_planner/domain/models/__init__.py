from .road_network import Road, RoadNetwork
from .route import PlannedRoute, PlanStrategy, RouteComparison

__all__ = [
    "PlanStrategy",
    "PlannedRoute",
    "Road",
    "RoadNetwork",
    "RouteComparison",
]
