"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..config import settings
from ..models.domain import GeoPoint

EARTH_RADIUS_KM = 6371.0
KM_PER_DEGREE = 111.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(a, b) -> float:
    """Great-circle distance between two objects exposing ``lat`` and ``lng``."""

    return haversine_km(a.lat, a.lng, b.lat, b.lng)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_minutes(distance: float, *, average_speed_kmh: float | None = None) -> int:
    """Travel-time estimate in whole minutes at a constant average speed."""

    speed = average_speed_kmh or settings.average_speed_kmh
    return round_half_up(distance / speed * 60)


def offset_point(lat: float, lng: float, distance: float, bearing_deg: float) -> GeoPoint:
    """Move ``distance`` km from a point along a bearing using a flat-earth approximation.

    Good for the few hundred meters used by pickup zones. The longitude
    offset is scaled by the cosine of the latitude so east/west offsets
    cover the same ground distance as north/south ones.
    """

    radians = math.radians(bearing_deg)
    lat_offset = distance / KM_PER_DEGREE * math.cos(radians)
    lng_scale = KM_PER_DEGREE * math.cos(math.radians(lat))
    # At the poles every longitude is the same point.
    lng_offset = distance / lng_scale * math.sin(radians) if abs(lng_scale) > 1e-9 else 0.0

    # Clamp at the poles, wrap across the antimeridian.
    new_lat = min(max(lat + lat_offset, -90.0), 90.0)
    new_lng = ((lng + lng_offset + 180.0) % 360.0) - 180.0
    return GeoPoint(new_lat, new_lng)
