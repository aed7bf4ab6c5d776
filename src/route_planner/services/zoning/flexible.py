"""Flexible pickup zones: alternative meeting points around an exact stop."""

from __future__ import annotations

from ...config import settings
from ...models.domain import FlexiblePickupZone, GeoPoint, SuggestedLocation
from ..geospatial import distance_km, offset_point, round_half_up

CARDINAL_DIRECTIONS: tuple[tuple[float, str], ...] = (
    (0.0, "North"),
    (90.0, "East"),
    (180.0, "South"),
    (270.0, "West"),
)


def generate_flexible_zone(
    center_lat: float,
    center_lng: float,
    radius_m: float | None = None,
    *,
    walking_speed_m_per_min: float | None = None,
) -> FlexiblePickupZone:
    """Suggest one pickup point per cardinal direction, ``radius_m`` away from the center."""

    radius = settings.default_zone_radius_m if radius_m is None else radius_m
    walking_speed = walking_speed_m_per_min or settings.walking_speed_m_per_min
    walking_time = round_half_up(radius / walking_speed)

    suggestions = []
    for bearing, name in CARDINAL_DIRECTIONS:
        point = offset_point(center_lat, center_lng, radius / 1000, bearing)
        suggestions.append(
            SuggestedLocation(
                location=f"Pickup Point {name}",
                lat=point.lat,
                lng=point.lng,
                walking_time_min=walking_time,
            )
        )

    return FlexiblePickupZone(
        centroid=GeoPoint(center_lat, center_lng),
        radius_m=radius,
        suggested_locations=tuple(suggestions),
    )


def is_within_zone(point, center, radius_m: float) -> bool:
    """True iff ``point`` lies within ``radius_m`` meters of ``center``."""
    return distance_km(point, center) * 1000 <= radius_m
