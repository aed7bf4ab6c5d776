"""GeoJSON export of route previews and flexible pickup zones."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from shapely.geometry import LineString, Point, Polygon, mapping

from ...models.domain import FlexiblePickupZone, Waypoint
from ..geospatial import offset_point

ROLE_COLORS = {
    "pickup": "#38e000",
    "dropoff": "#e0003e",
    "both": "#13aae0",
}


def route_to_geojson(route: Sequence[Waypoint]) -> Dict[str, Any]:
    """Build a FeatureCollection with the route path and one point per stop."""
    features: List[Dict[str, Any]] = []

    if len(route) >= 2:
        path = LineString([(wp.lng, wp.lat) for wp in route])
        features.append(
            {
                "type": "Feature",
                "geometry": mapping(path),
                "properties": {"kind": "route", "stop_count": len(route)},
            }
        )

    for wp in route:
        properties: Dict[str, Any] = {
            "kind": "stop",
            "id": wp.id,
            "location": wp.location,
            "order": wp.order,
            "type": wp.type,
            "color": ROLE_COLORS.get(wp.type, ROLE_COLORS["both"]),
        }
        if wp.estimated_time is not None:
            properties["estimated_time"] = wp.estimated_time.isoformat()
        if wp.flexible_radius:
            properties["flexible_radius"] = wp.flexible_radius
        features.append(
            {
                "type": "Feature",
                "geometry": mapping(Point(wp.lng, wp.lat)),
                "properties": properties,
            }
        )

    return {"type": "FeatureCollection", "features": features}


def zone_outline(zone: FlexiblePickupZone, segments: int = 32) -> Polygon:
    """Approximate the zone's circle as a polygon in lon/lat space."""
    ring = []
    for step in range(segments):
        point = offset_point(zone.centroid.lat, zone.centroid.lng, zone.radius_m / 1000, 360.0 * step / segments)
        ring.append((point.lng, point.lat))
    return Polygon(ring)


def zone_to_geojson(zone: FlexiblePickupZone) -> Dict[str, Any]:
    features: List[Dict[str, Any]] = []
    if zone.radius_m > 0:
        features.append(
            {
                "type": "Feature",
                "geometry": mapping(zone_outline(zone)),
                "properties": {"kind": "zone", "radius_m": zone.radius_m},
            }
        )
    features.append(
        {
            "type": "Feature",
            "geometry": mapping(Point(zone.centroid.lng, zone.centroid.lat)),
            "properties": {"kind": "centroid"},
        }
    )
    for suggestion in zone.suggested_locations:
        features.append(
            {
                "type": "Feature",
                "geometry": mapping(Point(suggestion.lng, suggestion.lat)),
                "properties": {
                    "kind": "suggestion",
                    "location": suggestion.location,
                    "walking_time_min": suggestion.walking_time_min,
                },
            }
        )
    return {"type": "FeatureCollection", "features": features}
