from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from route_planner.adapters.api.dependencies import get_planning_service
from route_planner.adapters.api.schemas.routes import (
    CitiesSchema,
    PlannedRouteSchema,
    RouteComparisonSchema,
    RouteRequestSchema,
    StrategyOutcomeSchema,
)
from route_planner.app.services.city_names import resolve_city_name
from route_planner.app.services.route_planning_service import RoutePlanningService
from route_planner.domain.exceptions import (
    Infeasible,
    TooManyWaypoints,
    UnknownCity,
)
from route_planner.domain.models import PlannedRoute

router = APIRouter(tags=["routes"])


def _route_to_schema(route: PlannedRoute) -> PlannedRouteSchema:
    return PlannedRouteSchema(
        strategy=route.strategy.value,
        cities=list(route.cities),
        total_distance=route.total_distance,
        waypoints=list(route.waypoints),
        visit_order=list(route.visit_order),
        skipped_attractions=list(route.skipped_attractions),
    )


def _resolve_endpoints(
    req: RouteRequestSchema, service: RoutePlanningService
) -> tuple[str, str]:
    cities = service.network.cities()
    try:
        start = resolve_city_name(cities, req.start, role="start")
        end = resolve_city_name(cities, req.end, role="end")
    except UnknownCity as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return start, end


@router.get("/cities", response_model=CitiesSchema)
def list_cities(
    service: RoutePlanningService = Depends(get_planning_service),
) -> CitiesSchema:
    cities = sorted(service.network.cities())
    return CitiesSchema(count=len(cities), cities=cities)


@router.post("/routes/optimal", response_model=PlannedRouteSchema)
def plan_optimal_route(
    req: RouteRequestSchema,
    service: RoutePlanningService = Depends(get_planning_service),
) -> PlannedRouteSchema:
    start, end = _resolve_endpoints(req, service)
    try:
        route = service.plan_optimal(
            start=start, end=end, attraction_names=req.attractions
        )
    except UnknownCity as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (Infeasible, TooManyWaypoints) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _route_to_schema(route)


@router.post("/routes/heuristic", response_model=PlannedRouteSchema)
def plan_heuristic_route(
    req: RouteRequestSchema,
    service: RoutePlanningService = Depends(get_planning_service),
) -> PlannedRouteSchema:
    start, end = _resolve_endpoints(req, service)
    try:
        route = service.plan_heuristic(
            start=start, end=end, attraction_names=req.attractions
        )
    except UnknownCity as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Infeasible as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _route_to_schema(route)


@router.post("/routes/compare", response_model=RouteComparisonSchema)
def compare_routes(
    req: RouteRequestSchema,
    service: RoutePlanningService = Depends(get_planning_service),
) -> RouteComparisonSchema:
    start, end = _resolve_endpoints(req, service)
    result = service.compare(start=start, end=end, attraction_names=req.attractions)
    return RouteComparisonSchema(
        start=result.start,
        end=result.end,
        attractions=list(result.attraction_names),
        optimal=StrategyOutcomeSchema(
            route=_route_to_schema(result.optimal) if result.optimal else None,
            elapsed_ms=result.optimal_ms,
            error=result.optimal_error,
        ),
        heuristic=StrategyOutcomeSchema(
            route=_route_to_schema(result.heuristic) if result.heuristic else None,
            elapsed_ms=result.heuristic_ms,
            error=result.heuristic_error,
        ),
        distance_gap=result.distance_gap,
    )
