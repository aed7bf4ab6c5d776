"""Flexible pickup zone endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...schemas.zoning import (
    FlexibleZoneRequest,
    FlexibleZoneResponse,
    ZoneMembershipRequest,
    ZoneMembershipResponse,
)
from ...services.zoning.service import build_flexible_zone, check_membership

router = APIRouter(prefix="/zones", tags=["zones"])


@router.post("/flexible", response_model=FlexibleZoneResponse, status_code=status.HTTP_200_OK)
def flexible_zone(payload: FlexibleZoneRequest) -> FlexibleZoneResponse:
    return build_flexible_zone(payload)


@router.post("/contains", response_model=ZoneMembershipResponse, status_code=status.HTTP_200_OK)
def contains(payload: ZoneMembershipRequest) -> ZoneMembershipResponse:
    return check_membership(payload)
