"""Marginal cost of inserting one more stop into a route."""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import DetourResult, Waypoint
from ..geospatial import estimate_minutes
from .metrics import total_distance_km


def _insertion_index(route: Sequence[Waypoint], insert_after_index: int) -> int:
    # Origin and destination stay put: new stops land strictly between them.
    if len(route) < 2:
        return len(route)
    after = min(max(insert_after_index, 0), len(route) - 2)
    if after != insert_after_index:
        logging.debug(f"Clamped insert_after_index {insert_after_index} to {after} for {len(route)} stops")
    return after + 1


def calculate_detour(
    route: Sequence[Waypoint],
    new_waypoint: Waypoint,
    insert_after_index: int,
) -> DetourResult:
    """Preview the extra distance of inserting ``new_waypoint`` after ``insert_after_index``.

    The caller's route is left untouched.
    """

    original_distance = total_distance_km(route)
    position = _insertion_index(route, insert_after_index)
    candidate = [*route[:position], new_waypoint, *route[position:]]

    new_total = total_distance_km(candidate)
    detour = new_total - original_distance
    return DetourResult(
        detour_km=detour,
        detour_minutes=estimate_minutes(detour),
        new_total_distance_km=new_total,
    )
