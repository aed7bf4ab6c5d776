"""Routing endpoints."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from ...schemas.routing import (
    DetourRequest,
    DetourResponse,
    RoutePlanRequest,
    RoutePlanResponse,
    WaypointDraftModel,
    WaypointValidationResponse,
)
from ...services.routing.service import check_waypoint, export_route, plan_route, preview_detour

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/plan", response_model=RoutePlanResponse, status_code=status.HTTP_200_OK)
def plan(payload: RoutePlanRequest) -> RoutePlanResponse:
    try:
        return plan_route(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error planning route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to plan route: {str(exc)}"
        ) from exc


@router.post("/validate", response_model=WaypointValidationResponse, status_code=status.HTTP_200_OK)
def validate(payload: WaypointDraftModel) -> WaypointValidationResponse:
    """Report every problem with a single (possibly partial) waypoint."""
    return check_waypoint(payload)


@router.post("/detour", response_model=DetourResponse, status_code=status.HTTP_200_OK)
def detour(payload: DetourRequest) -> DetourResponse:
    """Preview the cost of inserting a stop without changing the route."""
    try:
        return preview_detour(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error previewing detour: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to preview detour: {str(exc)}"
        ) from exc


@router.post("/export", status_code=status.HTTP_200_OK)
def export(
    payload: RoutePlanRequest,
    format: Literal["geojson", "json", "csv"] = Query(default="geojson", description="Output format"),
):
    try:
        rendered = export_route(payload, format)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error exporting route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export route: {str(exc)}"
        ) from exc

    if format == "csv":
        return PlainTextResponse(rendered, media_type="text/csv")
    return rendered
