from __future__ import annotations

from pathlib import Path

import pytest

from route_planner.compare import format_comparison, main
from route_planner.domain.models import PlannedRoute, PlanStrategy, RouteComparison


@pytest.fixture()
def data_files(tmp_path: Path, monkeypatch) -> Path:
    roads = tmp_path / "roads.csv"
    roads.write_text(
        "Austin TX,Bryan TX,5\nBryan TX,Conroe TX,5\nConroe TX,Dallas TX,5\n"
        "Austin TX,Dallas TX,20\n",
        encoding="utf-8",
    )
    attractions = tmp_path / "attractions.csv"
    attractions.write_text(
        "Campus,Bryan TX\nLake,Conroe TX\n", encoding="utf-8"
    )
    monkeypatch.setenv("ROADS_CSV_PATH", str(roads))
    monkeypatch.setenv("ATTRACTIONS_CSV_PATH", str(attractions))
    monkeypatch.delenv("MAX_EXACT_WAYPOINTS", raising=False)
    return tmp_path


def test_main_prints_both_strategies(data_files: Path, capsys) -> None:
    code = main(["Austin TX", "Dallas TX", "Campus", "Lake", "Unknown Museum"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Austin TX -> Bryan TX -> Conroe TX -> Dallas TX" in out
    assert out.count("Distance: 15.0 miles") == 2
    assert "Skipped attractions: Unknown Museum" in out


def test_main_reports_unreachable_routes(data_files: Path, capsys) -> None:
    code = main(["Austin TX", "Nowhere TX"])

    out = capsys.readouterr().out
    assert code == 1
    assert "UnknownCity" in out
    assert "Distance: N/A" in out


def test_main_requires_start_and_end(capsys) -> None:
    assert main(["Austin TX"]) == 2
    assert "usage" in capsys.readouterr().err


def test_format_comparison_without_attractions() -> None:
    route = PlannedRoute(
        strategy=PlanStrategy.OPTIMAL, cities=("A", "B"), total_distance=3.0
    )
    text = format_comparison(
        RouteComparison(
            start="A",
            end="B",
            attraction_names=(),
            optimal=route,
            heuristic=None,
            heuristic_error="Infeasible: nope",
        )
    )

    assert "Via:  None" in text
    assert "Route: A -> B" in text
    assert "Route: not found (Infeasible: nope)" in text
