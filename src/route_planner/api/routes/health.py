"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/config", status_code=status.HTTP_200_OK)
def health_config() -> dict:
    """Expose the tunable planning constants currently in effect."""
    return {
        "average_speed_kmh": settings.average_speed_kmh,
        "walking_speed_m_per_min": settings.walking_speed_m_per_min,
        "min_saving_km": settings.min_saving_km,
        "dwell_minutes": settings.dwell_minutes,
        "default_zone_radius_m": settings.default_zone_radius_m,
        "max_waypoints": settings.max_waypoints,
    }
