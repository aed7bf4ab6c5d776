"""Routing request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field


class WaypointModel(BaseModel):
    id: str = Field(..., min_length=1, description="Stable waypoint identifier, independent of position.")
    location: str = Field(
        default="",
        validation_alias=AliasChoices("location", "label"),
        description="Human-readable location label.",
    )
    lat: float
    lng: float
    order: Optional[int] = Field(default=None, ge=0, description="Ignored on input; recomputed from position.")
    type: Literal["pickup", "dropoff", "both"] = Field(
        default="both",
        validation_alias=AliasChoices("type", "role"),
    )
    estimated_time: Optional[datetime] = None
    flexible_radius: Optional[float] = Field(default=None, description="Tolerance around the stop in meters.")
    notes: Optional[str] = None


class RoutePlanRequest(BaseModel):
    waypoints: List[WaypointModel] = Field(..., min_length=2)
    departure_time: Optional[datetime] = Field(
        default=None,
        description="When provided, arrival estimates are computed for every stop.",
    )


class OptimizationModel(BaseModel):
    route: List[WaypointModel]
    applied: bool
    distance_saved_km: float
    time_saved_minutes: int


class RoutePlanResponse(BaseModel):
    optimized: OptimizationModel
    etas: Optional[List[datetime]] = None
    summary: str
    total_distance_km: float
    total_duration_min: int


class WaypointDraftModel(BaseModel):
    """A partially filled waypoint as edited in the route editor."""

    location: Optional[str] = Field(default=None, validation_alias=AliasChoices("location", "label"))
    lat: Optional[float] = None
    lng: Optional[float] = None
    flexible_radius: Optional[float] = None


class WaypointValidationResponse(BaseModel):
    valid: bool
    errors: List[str]


class DetourRequest(BaseModel):
    waypoints: List[WaypointModel] = Field(..., min_length=2)
    new_waypoint: WaypointModel
    insert_after_index: int = Field(..., ge=0)


class DetourResponse(BaseModel):
    detour_km: float
    detour_minutes: int
    new_total_distance_km: float
