from __future__ import annotations

import csv
import io
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path

from route_planner.app.ports.output import IRoadNetworkRepository
from route_planner.domain.models import Road, RoadNetwork

from .text_source import read_text_source

logger = logging.getLogger(__name__)


def parse_roads(text: str) -> list[Road]:
    """Parse ``city_a,city_b,distance`` records.

    Blank lines are ignored. Records with the wrong number of columns, an
    unparsable distance or a negative/non-finite distance are skipped with a
    warning.
    """

    roads: list[Road] = []
    reader = csv.reader(io.StringIO(text))
    for line_num, row in enumerate(reader, start=1):
        if not row or not any(cell.strip() for cell in row):
            continue
        if len(row) != 3:
            logger.warning(
                "Skipping roads line %d: expected 3 columns, got %d: %r",
                line_num,
                len(row),
                row,
            )
            continue

        city_a, city_b, raw_distance = (cell.strip() for cell in row)
        try:
            distance = float(raw_distance)
        except ValueError:
            logger.warning(
                "Skipping roads line %d: invalid distance %r", line_num, raw_distance
            )
            continue

        if not city_a or not city_b or not math.isfinite(distance) or distance < 0:
            logger.warning("Skipping roads line %d: invalid record %r", line_num, row)
            continue

        roads.append(Road(city_a=city_a, city_b=city_b, distance=distance))
    return roads


@dataclass(slots=True)
class CsvRoadNetworkRepository(IRoadNetworkRepository):
    """Loads the road network from a headerless CSV of roads.

    Env vars:
      - ROADS_CSV_PATH: local path or s3://bucket/key (default: data/roads.csv)
    """

    path: str | Path | None = None

    def _location(self) -> str | Path:
        return self.path or os.getenv("ROADS_CSV_PATH") or "data/roads.csv"

    def load_network(self) -> RoadNetwork:
        location = self._location()
        network = RoadNetwork.from_roads(parse_roads(read_text_source(location)))
        logger.info(
            "Loaded %d roads between %d cities from %s",
            network.road_count,
            len(network),
            location,
        )
        return network
