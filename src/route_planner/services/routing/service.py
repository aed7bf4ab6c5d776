"""Routing orchestration service."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Sequence

from ...config import settings
from ...models.domain import Waypoint
from ...schemas.routing import (
    DetourRequest,
    DetourResponse,
    OptimizationModel,
    RoutePlanRequest,
    RoutePlanResponse,
    WaypointDraftModel,
    WaypointModel,
    WaypointValidationResponse,
)
from ..export.geojson import route_to_geojson
from ..outputs.route_formatter import route_to_csv, route_to_json
from .detour import calculate_detour
from .eta import calculate_waypoint_etas
from .metrics import summarize_route
from .optimizer import optimize_route
from .sequence import renumber
from .validation import validate_route, validate_waypoint


def _to_domain(model: WaypointModel) -> Waypoint:
    return Waypoint(
        id=model.id,
        location=model.location,
        lat=model.lat,
        lng=model.lng,
        order=model.order or 0,
        type=model.type,
        estimated_time=model.estimated_time,
        flexible_radius=model.flexible_radius,
        notes=model.notes,
    )


def _to_model(waypoint: Waypoint) -> WaypointModel:
    return WaypointModel.model_validate(asdict(waypoint))


def _load_route(waypoints: Sequence[WaypointModel]) -> list[Waypoint]:
    if len(waypoints) > settings.max_waypoints:
        raise ValueError(f"A route can have at most {settings.max_waypoints} stops, got {len(waypoints)}.")

    ids = [wp.id for wp in waypoints]
    if len(set(ids)) != len(ids):
        raise ValueError("Waypoint ids must be unique within a route.")

    route = renumber([_to_domain(wp) for wp in waypoints])
    errors = validate_route(route)
    if errors:
        raise ValueError("; ".join(errors))
    return route


def plan_route(payload: RoutePlanRequest) -> RoutePlanResponse:
    """Optimize, time and summarize a route submitted by the editor.

    ETAs and the summary describe the route as submitted; the optimization
    is only a proposal until the caller applies it.
    """

    route = _load_route(payload.waypoints)
    logging.info(f"Planning route with {len(route)} stops")

    result = optimize_route(route)
    if result.applied:
        logging.info(
            f"Reordering saves {result.distance_saved_km:.2f} km (~{result.time_saved_min} min); proposing it"
        )

    etas = None
    if payload.departure_time is not None:
        timed = calculate_waypoint_etas(route, payload.departure_time)
        etas = [wp.estimated_time for wp in timed]

    summary = summarize_route(route)
    return RoutePlanResponse(
        optimized=OptimizationModel(
            route=[_to_model(wp) for wp in result.optimized_route],
            applied=result.applied,
            distance_saved_km=round(result.distance_saved_km, 2),
            time_saved_minutes=result.time_saved_min,
        ),
        etas=etas,
        summary=summary.text,
        total_distance_km=summary.total_distance_km,
        total_duration_min=summary.total_duration_min,
    )


def check_waypoint(payload: WaypointDraftModel) -> WaypointValidationResponse:
    errors = validate_waypoint(payload.model_dump())
    return WaypointValidationResponse(valid=not errors, errors=errors)


def preview_detour(payload: DetourRequest) -> DetourResponse:
    route = _load_route(payload.waypoints)
    new_waypoint = _to_domain(payload.new_waypoint)
    errors = validate_waypoint(new_waypoint)
    if errors:
        raise ValueError("New stop: " + "; ".join(errors))

    detour = calculate_detour(route, new_waypoint, payload.insert_after_index)
    logging.info(
        f"Detour preview for '{new_waypoint.location}' after stop {payload.insert_after_index}: "
        f"{detour.detour_km:.2f} km"
    )
    return DetourResponse(
        detour_km=round(detour.detour_km, 2),
        detour_minutes=detour.detour_minutes,
        new_total_distance_km=round(detour.new_total_distance_km, 2),
    )


def export_route(payload: RoutePlanRequest, fmt: str = "geojson") -> dict | str:
    """Render the submitted route for the preview display as GeoJSON, JSON or CSV."""

    route = _load_route(payload.waypoints)
    if payload.departure_time is not None:
        route = calculate_waypoint_etas(route, payload.departure_time)

    if fmt == "geojson":
        return route_to_geojson(route)
    if fmt == "json":
        return route_to_json(route)
    if fmt == "csv":
        return route_to_csv(route)
    raise ValueError(f"Unsupported export format '{fmt}'.")
