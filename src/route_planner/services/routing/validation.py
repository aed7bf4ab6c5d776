"""Structural validation for waypoints coming from the route editor."""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from typing import Any, Sequence

from ...config import settings
from ...models.domain import Waypoint


def _field(waypoint: Waypoint | Mapping[str, Any], *names: str) -> Any:
    for name in names:
        if isinstance(waypoint, Mapping):
            if waypoint.get(name) is not None:
                return waypoint[name]
        else:
            value = getattr(waypoint, name, None)
            if value is not None:
                return value
    return None


def _coordinate(value: Any, name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    return float(value)


def validate_waypoint(
    waypoint: Waypoint | Mapping[str, Any],
    *,
    max_flexible_radius_m: float | None = None,
) -> list[str]:
    """Return every problem with a (possibly partial) waypoint.

    An empty list means the waypoint is valid. Missing coordinates are
    reported as invalid; coordinates that are not numbers at all raise
    ``TypeError`` since no editor should ever produce them.
    """

    max_radius = settings.max_flexible_radius_m if max_flexible_radius_m is None else max_flexible_radius_m
    errors: list[str] = []

    location = _field(waypoint, "location", "label")
    if not str(location or "").strip():
        errors.append("Location is required")

    lat = _coordinate(_field(waypoint, "lat"), "lat")
    if lat is None or not -90 <= lat <= 90:
        errors.append("Invalid latitude")

    lng = _coordinate(_field(waypoint, "lng"), "lng")
    if lng is None or not -180 <= lng <= 180:
        errors.append("Invalid longitude")

    radius = _coordinate(_field(waypoint, "flexible_radius"), "flexible_radius")
    if radius is not None and not 0 <= radius <= max_radius:
        errors.append(f"Flexible radius must be between 0 and {max_radius:g} meters")

    return errors


def validate_route(route: Sequence[Waypoint | Mapping[str, Any]]) -> list[str]:
    """Validate every stop of a route; messages are prefixed with the 1-based stop number."""

    errors: list[str] = []
    if len(route) < 2:
        errors.append("A route needs an origin and a destination")
    for position, waypoint in enumerate(route, start=1):
        errors.extend(f"Stop {position}: {message}" for message in validate_waypoint(waypoint))
    return errors
