"""Arrival-time propagation along an ordered route."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Sequence

from ...config import settings
from ...models.domain import Waypoint
from ..geospatial import distance_km, estimate_minutes


def calculate_waypoint_etas(
    route: Sequence[Waypoint],
    departure_time: datetime,
    *,
    dwell_minutes: float | None = None,
) -> list[Waypoint]:
    """Return copies of the route's waypoints with ``estimated_time`` filled in.

    The first stop is stamped with the departure time itself. Every later
    stop adds the leg's travel estimate plus the per-stop dwell allowance to
    the previous stop's estimate, so the sequence never decreases.
    """

    dwell = settings.dwell_minutes if dwell_minutes is None else dwell_minutes
    stamped: list[Waypoint] = []
    current_time = departure_time

    for idx, waypoint in enumerate(route):
        if idx > 0:
            leg_minutes = estimate_minutes(distance_km(route[idx - 1], waypoint))
            current_time = current_time + timedelta(minutes=leg_minutes + dwell)
        stamped.append(replace(waypoint, estimated_time=current_time))

    return stamped
