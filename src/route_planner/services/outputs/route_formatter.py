"""Serializers for route previews."""

from __future__ import annotations

import csv
import io
from typing import Sequence

from ...models.domain import Waypoint
from ..geospatial import distance_km
from ..routing.metrics import summarize_route


def route_to_json(route: Sequence[Waypoint]) -> dict:
    summary = summarize_route(route)
    return {
        "summary": summary.text,
        "total_distance_km": summary.total_distance_km,
        "total_duration_min": summary.total_duration_min,
        "stops": [
            {
                "id": wp.id,
                "order": wp.order,
                "location": wp.location,
                "lat": wp.lat,
                "lng": wp.lng,
                "type": wp.type,
                "estimated_time": wp.estimated_time.isoformat() if wp.estimated_time else None,
                "distance_from_prev_km": round(distance_km(route[idx - 1], wp), 2) if idx else 0.0,
            }
            for idx, wp in enumerate(route)
        ],
    }


def route_to_csv(route: Sequence[Waypoint]) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "order",
        "id",
        "location",
        "type",
        "lat",
        "lng",
        "estimated_time",
        "distance_from_prev_km",
        "flexible_radius",
        "notes",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for idx, wp in enumerate(route):
        writer.writerow(
            {
                "order": wp.order,
                "id": wp.id,
                "location": wp.location,
                "type": wp.type,
                "lat": wp.lat,
                "lng": wp.lng,
                "estimated_time": wp.estimated_time.isoformat() if wp.estimated_time else "",
                "distance_from_prev_km": round(distance_km(route[idx - 1], wp), 2) if idx else 0.0,
                "flexible_radius": wp.flexible_radius if wp.flexible_radius is not None else "",
                "notes": wp.notes or "",
            }
        )
    return buffer.getvalue()
