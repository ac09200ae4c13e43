from __future__ import annotations

from typing import Sequence

from route_planner.domain.exceptions import InvalidSegmentJoin


def concatenate_segments(segments: Sequence[Sequence[str] | None]) -> list[str]:
    """Join consecutive path segments into one continuous city sequence.

    The last city of each segment must be the first city of the next one; the
    duplicated join city is kept once.
    """

    out: list[str] = []
    for i, segment in enumerate(segments):
        if not segment:
            raise InvalidSegmentJoin(f"Segment {i} is empty")
        if i == 0:
            out.extend(segment)
            continue
        if out[-1] != segment[0]:
            raise InvalidSegmentJoin(
                f"Segment {i} starts at '{segment[0]}' but the route ends at "
                f"'{out[-1]}'"
            )
        out.extend(segment[1:])
    return out
