"""Nearest-neighbor reordering of intermediate stops.

The first and last stops of a route are the fixed origin and destination.
Everything in between is greedily reordered starting from the origin: at
each step the closest unvisited stop is taken, with ties going to the stop
that appears first in the original route. This is a heuristic, not an exact
TSP solver, and its cost is quadratic in the number of intermediate stops.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ...config import settings
from ...models.domain import RouteOptimizationResult, Waypoint
from ..geospatial import distance_km, estimate_minutes
from .metrics import total_distance_km
from .sequence import renumber


def nearest_neighbor_sort(waypoints: Sequence[Waypoint], start: Waypoint) -> list[Waypoint]:
    """Greedy visiting order of ``waypoints`` beginning at ``start``."""

    remaining = list(waypoints)
    ordered: list[Waypoint] = []
    current = start

    while remaining:
        # min() keeps the first of equally distant candidates.
        nearest_idx = min(range(len(remaining)), key=lambda i: distance_km(current, remaining[i]))
        current = remaining.pop(nearest_idx)
        ordered.append(current)

    return ordered


def optimize_route(
    route: Sequence[Waypoint],
    *,
    min_saving_km: float | None = None,
) -> RouteOptimizationResult:
    """Propose a shorter ordering of the intermediate stops of ``route``.

    The input is never modified. ``applied`` is only set when the saving
    exceeds ``min_saving_km``; smaller gains are treated as noise.
    """

    threshold = settings.min_saving_km if min_saving_km is None else min_saving_km
    original = tuple(route)

    if len(original) <= 3:
        return RouteOptimizationResult(
            original_route=original,
            optimized_route=original,
            distance_saved_km=0.0,
            time_saved_min=0,
            applied=False,
        )

    first, last = original[0], original[-1]
    intermediate = nearest_neighbor_sort(original[1:-1], first)
    proposal = tuple(renumber([first, *intermediate, last]))

    distance_saved = max(0.0, total_distance_km(original) - total_distance_km(proposal))
    applied = distance_saved > threshold
    logging.debug(
        f"Nearest-neighbor proposal for {len(original)} stops saves {distance_saved:.3f} km (applied={applied})"
    )

    return RouteOptimizationResult(
        original_route=original,
        optimized_route=proposal,
        distance_saved_km=distance_saved,
        time_saved_min=estimate_minutes(distance_saved),
        applied=applied,
    )
