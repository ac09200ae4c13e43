from __future__ import annotations


class RoutingError(Exception):
    """Base exception for route planning failures."""


class UnknownCity(RoutingError):
    """Raised when the start or end city is not part of the road network."""

    def __init__(self, city: str, role: str | None = None, detail: str | None = None):
        label = f"{role.capitalize()} city" if role else "City"
        message = detail or f"{label} '{city}' not found in the road network"
        super().__init__(message)
        self.city = city
        self.role = role


class UnknownAttraction(RoutingError):
    """An attraction name the mapper cannot resolve.

    Planning never raises this; unknown names are skipped and reported.
    """


class Infeasible(RoutingError):
    """Raised when no connecting route exists for the requested stops."""


class InvalidSegmentJoin(RoutingError):
    """Raised when path segments do not share their join city."""


class TooManyWaypoints(RoutingError):
    """Raised when the exact optimizer is asked for more waypoints than allowed."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(
            f"{count} waypoints exceed the exact optimizer limit of {limit}"
        )
        self.count = count
        self.limit = limit
