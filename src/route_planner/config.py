"""Application configuration and settings management."""

from typing import Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTE_PLANNER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Multi-Stop Route Planner API"
    api_prefix: str = "/api"
    average_speed_kmh: float = Field(
        default=40.0,
        gt=0.0,
        description="Average urban driving speed used for travel-time estimates.",
    )
    walking_speed_m_per_min: float = Field(
        default=80.0,
        gt=0.0,
        description="Average walking speed used for flexible pickup suggestions.",
    )
    min_saving_km: float = Field(
        default=0.5,
        ge=0.0,
        description="Smallest distance saving worth proposing a reordered route for.",
    )
    dwell_minutes: float = Field(
        default=2.0,
        ge=0.0,
        description="Per-stop allowance for pickup/dropoff handling.",
    )
    default_zone_radius_m: float = Field(default=500.0, ge=0.0)
    max_flexible_radius_m: float = Field(default=5000.0, ge=0.0)
    max_waypoints: int = Field(
        default=5,
        ge=2,
        description="Largest route accepted by the HTTP layer.",
    )
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
