from __future__ import annotations

import csv
import io
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from route_planner.app.ports.output import IAttractionMapper

from .text_source import read_text_source

logger = logging.getLogger(__name__)


def parse_attractions(text: str) -> dict[str, str]:
    """Parse ``attraction,city`` records; later duplicates win."""

    city_by_attraction: dict[str, str] = {}
    reader = csv.reader(io.StringIO(text))
    for line_num, row in enumerate(reader, start=1):
        if not row or not any(cell.strip() for cell in row):
            continue
        if len(row) != 2:
            logger.warning(
                "Skipping attractions line %d: expected 2 columns, got %d: %r",
                line_num,
                len(row),
                row,
            )
            continue

        name, city = (cell.strip() for cell in row)
        if not name or not city:
            logger.warning(
                "Skipping attractions line %d: empty field %r", line_num, row
            )
            continue
        city_by_attraction[name] = city
    return city_by_attraction


@dataclass(slots=True)
class CsvAttractionMapper(IAttractionMapper):
    """Attraction lookup backed by a headerless ``attraction,city`` CSV.

    The file is read on first lookup and kept in memory.

    Env vars:
      - ATTRACTIONS_CSV_PATH: local path or s3://bucket/key
        (default: data/attractions.csv)
    """

    path: str | Path | None = None

    _city_by_attraction: dict[str, str] | None = field(default=None, repr=False)

    def _location(self) -> str | Path:
        return self.path or os.getenv("ATTRACTIONS_CSV_PATH") or "data/attractions.csv"

    def _load(self) -> dict[str, str]:
        if self._city_by_attraction is None:
            location = self._location()
            self._city_by_attraction = parse_attractions(read_text_source(location))
            logger.info(
                "Loaded %d attractions from %s",
                len(self._city_by_attraction),
                location,
            )
        return self._city_by_attraction

    def resolve(self, attraction_name: str) -> str | None:
        return self._load().get(attraction_name.strip())
