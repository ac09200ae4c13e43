from __future__ import annotations

from dataclasses import dataclass

import httpx
import pytest

from route_planner.adapters.api.dependencies import get_planning_service
from route_planner.app.services.route_planning_service import RoutePlanningService
from route_planner.domain.models import Road, RoadNetwork
from route_planner.main import app


@dataclass(slots=True)
class FakeAttractionMapper:
    city_by_attraction: dict[str, str]

    def resolve(self, attraction_name: str) -> str | None:
        return self.city_by_attraction.get(attraction_name)


def _service() -> RoutePlanningService:
    network = RoadNetwork.from_roads(
        [
            Road("Austin TX", "Bryan TX", 5.0),
            Road("Bryan TX", "Conroe TX", 5.0),
            Road("Conroe TX", "Phoenix AZ", 5.0),
            Road("Austin TX", "Phoenix AZ", 20.0),
            Road("Reno NV", "Elko NV", 3.0),
        ]
    )
    mapper = FakeAttractionMapper(
        {"Campus": "Bryan TX", "Lake": "Conroe TX", "Casino": "Reno NV"}
    )
    return RoutePlanningService(
        network=network, attraction_mapper=mapper, max_exact_waypoints=1
    )


async def _post(path: str, payload: dict) -> httpx.Response:
    app.dependency_overrides[get_planning_service] = _service

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post(path, json=payload)

    app.dependency_overrides.clear()
    return resp


@pytest.mark.unit
@pytest.mark.anyio
async def test_health() -> None:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.unit
@pytest.mark.anyio
async def test_list_cities() -> None:
    app.dependency_overrides[get_planning_service] = _service

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/cities")

    app.dependency_overrides.clear()

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["count"] == 6
    assert payload["cities"][0] == "Austin TX"


@pytest.mark.unit
@pytest.mark.anyio
async def test_post_optimal_route_resolves_state_code() -> None:
    resp = await _post(
        "/routes/optimal",
        {"start": "Austin TX", "end": "AZ", "attractions": ["Lake"]},
    )

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["strategy"] == "optimal"
    assert payload["cities"] == ["Austin TX", "Bryan TX", "Conroe TX", "Phoenix AZ"]
    assert payload["total_distance"] == 15.0
    assert payload["waypoints"] == ["Conroe TX"]


@pytest.mark.unit
@pytest.mark.anyio
async def test_post_heuristic_route_reports_skipped_attractions() -> None:
    resp = await _post(
        "/routes/heuristic",
        {
            "start": "Austin TX",
            "end": "Phoenix AZ",
            "attractions": ["Campus", "Lake", "Nope"],
        },
    )

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["visit_order"] == ["Bryan TX", "Conroe TX"]
    assert payload["skipped_attractions"] == ["Nope"]


@pytest.mark.unit
@pytest.mark.anyio
async def test_unknown_start_is_404() -> None:
    resp = await _post("/routes/optimal", {"start": "Atlantis", "end": "Phoenix AZ"})

    assert resp.status_code == 404
    assert "Atlantis" in resp.json()["detail"]


@pytest.mark.unit
@pytest.mark.anyio
async def test_unreachable_waypoint_is_422() -> None:
    resp = await _post(
        "/routes/heuristic",
        {"start": "Austin TX", "end": "Phoenix AZ", "attractions": ["Casino"]},
    )

    assert resp.status_code == 422


@pytest.mark.unit
@pytest.mark.anyio
async def test_waypoint_ceiling_is_422_for_optimal() -> None:
    resp = await _post(
        "/routes/optimal",
        {"start": "Austin TX", "end": "Phoenix AZ", "attractions": ["Campus", "Lake"]},
    )

    assert resp.status_code == 422
    assert "limit" in resp.json()["detail"]


@pytest.mark.unit
@pytest.mark.anyio
async def test_compare_returns_both_outcomes() -> None:
    resp = await _post(
        "/routes/compare",
        {"start": "Austin TX", "end": "Phoenix AZ", "attractions": ["Campus", "Lake"]},
    )

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["optimal"]["route"] is None
    assert payload["optimal"]["error"].startswith("TooManyWaypoints")
    assert payload["heuristic"]["route"]["total_distance"] == 15.0
    assert payload["distance_gap"] is None
