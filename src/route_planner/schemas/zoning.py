"""Flexible pickup zone schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..config import settings


class CoordinateModel(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class FlexibleZoneRequest(BaseModel):
    center: CoordinateModel
    radius_m: Optional[float] = Field(default=None, ge=0, le=settings.max_flexible_radius_m)


class SuggestedLocationModel(BaseModel):
    location: str
    lat: float
    lng: float
    walking_time_min: int


class FlexibleZoneResponse(BaseModel):
    centroid: CoordinateModel
    radius_m: float
    suggested_locations: List[SuggestedLocationModel]
    geojson: dict = Field(default_factory=dict, description="Zone outline and suggestions for map display.")


class ZoneMembershipRequest(BaseModel):
    point: CoordinateModel
    center: CoordinateModel
    radius_m: float = Field(..., ge=0)


class ZoneMembershipResponse(BaseModel):
    within_zone: bool
    distance_m: float
