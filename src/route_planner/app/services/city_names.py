from __future__ import annotations

import re
from typing import Collection

from route_planner.domain.exceptions import UnknownCity

_STATE_CODE = re.compile(r"[A-Z]{2}")


def resolve_city_name(cities: Collection[str], raw: str, *, role: str) -> str:
    """Resolve user input to a city identifier of the network.

    Accepts an exact city name (``"Houston TX"``) or a two-letter state code
    when exactly one ``"City ST"`` city of that state exists.
    """

    value = (raw or "").strip()
    if not value:
        raise UnknownCity(value, role, detail=f"{role.capitalize()} city is empty")

    if value in cities:
        return value

    if _STATE_CODE.fullmatch(value):
        matches = sorted(c for c in cities if c.endswith(" " + value))
        if len(matches) == 1:
            return matches[0]
        if matches:
            raise UnknownCity(
                value,
                role,
                detail=(
                    f"State code '{value}' matches several cities "
                    f"({', '.join(matches)}); use the full 'City ST' name"
                ),
            )

    raise UnknownCity(value, role)
