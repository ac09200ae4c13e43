from .routing import (
    Infeasible,
    InvalidSegmentJoin,
    RoutingError,
    TooManyWaypoints,
    UnknownAttraction,
    UnknownCity,
)

__all__ = [
    "Infeasible",
    "InvalidSegmentJoin",
    "RoutingError",
    "TooManyWaypoints",
    "UnknownAttraction",
    "UnknownCity",
]
