"""Distance totals and display summaries for ordered routes."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import RouteSummary, Waypoint
from ..geospatial import distance_km, estimate_minutes, haversine_km


def total_distance_km(route: Sequence[Waypoint]) -> float:
    """Sum of leg distances; zero for routes with fewer than two stops."""
    return sum(distance_km(route[i], route[i + 1]) for i in range(len(route) - 1))


def format_route_summary(route: Sequence[Waypoint]) -> str:
    if not route:
        return ""
    if len(route) == 1:
        return route[0].location
    if len(route) == 2:
        return f"{route[0].location} → {route[1].location}"

    stop_count = len(route) - 2
    plural = "s" if stop_count > 1 else ""
    return f"{route[0].location} → {stop_count} stop{plural} → {route[-1].location}"


def summarize_route(route: Sequence[Waypoint]) -> RouteSummary:
    total = total_distance_km(route)
    return RouteSummary(
        total_distance_km=round(total, 2),
        total_duration_min=estimate_minutes(total),
        stop_count=len(route),
        text=format_route_summary(route),
    )


def route_passes_through(route: Sequence[Waypoint], lat: float, lng: float, radius_km: float) -> bool:
    """True when any stop of the route lies within ``radius_km`` of the given point."""
    return any(haversine_km(wp.lat, wp.lng, lat, lng) <= radius_km for wp in route)
