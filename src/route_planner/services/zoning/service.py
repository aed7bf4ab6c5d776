"""Flexible pickup zone orchestration."""

from __future__ import annotations

import logging

from ...models.domain import GeoPoint
from ...schemas.zoning import (
    CoordinateModel,
    FlexibleZoneRequest,
    FlexibleZoneResponse,
    SuggestedLocationModel,
    ZoneMembershipRequest,
    ZoneMembershipResponse,
)
from ..export.geojson import zone_to_geojson
from ..geospatial import distance_km
from .flexible import generate_flexible_zone, is_within_zone


def build_flexible_zone(payload: FlexibleZoneRequest) -> FlexibleZoneResponse:
    zone = generate_flexible_zone(payload.center.lat, payload.center.lng, payload.radius_m)
    logging.info(
        f"Generated flexible zone at ({zone.centroid.lat:.6f}, {zone.centroid.lng:.6f}) radius={zone.radius_m:g}m"
    )
    return FlexibleZoneResponse(
        centroid=CoordinateModel(lat=zone.centroid.lat, lng=zone.centroid.lng),
        radius_m=zone.radius_m,
        suggested_locations=[
            SuggestedLocationModel(
                location=suggestion.location,
                lat=suggestion.lat,
                lng=suggestion.lng,
                walking_time_min=suggestion.walking_time_min,
            )
            for suggestion in zone.suggested_locations
        ],
        geojson=zone_to_geojson(zone),
    )


def check_membership(payload: ZoneMembershipRequest) -> ZoneMembershipResponse:
    point = GeoPoint(payload.point.lat, payload.point.lng)
    center = GeoPoint(payload.center.lat, payload.center.lng)
    return ZoneMembershipResponse(
        within_zone=is_within_zone(point, center, payload.radius_m),
        distance_m=round(distance_km(point, center) * 1000, 1),
    )
