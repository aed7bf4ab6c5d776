"""Domain models for waypoints, routes and derived route proposals."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

WaypointType = Literal["pickup", "dropoff", "both"]


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lng: float


@dataclass(slots=True)
class Waypoint:
    """A single stop on a route.

    ``id`` is assigned once and identifies the stop regardless of where it
    sits in the route. ``order`` is derived and always equals the stop's
    index in the route that holds it.
    """

    id: str
    location: str
    lat: float
    lng: float
    order: int = 0
    type: WaypointType = "both"
    estimated_time: Optional[datetime] = None
    flexible_radius: Optional[float] = None
    notes: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RouteOptimizationResult:
    """Disposable proposal produced by the optimizer; applying it is up to the caller."""

    original_route: tuple[Waypoint, ...]
    optimized_route: tuple[Waypoint, ...]
    distance_saved_km: float
    time_saved_min: int
    applied: bool


@dataclass(frozen=True, slots=True)
class DetourResult:
    detour_km: float
    detour_minutes: int
    new_total_distance_km: float


@dataclass(frozen=True, slots=True)
class RouteSummary:
    total_distance_km: float
    total_duration_min: int
    stop_count: int
    text: str


@dataclass(frozen=True, slots=True)
class SuggestedLocation:
    location: str
    lat: float
    lng: float
    walking_time_min: int


@dataclass(frozen=True, slots=True)
class FlexiblePickupZone:
    centroid: GeoPoint
    radius_m: float
    suggested_locations: tuple[SuggestedLocation, ...]
