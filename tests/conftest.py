import pytest

from src.route_planner.models.domain import Waypoint


@pytest.fixture
def london_route() -> list[Waypoint]:
    """Origin, stop A, stop B, destination; B is closer to the origin than A."""
    points = [
        ("origin", 51.50, -0.10),
        ("A", 51.52, -0.08),
        ("B", 51.49, -0.12),
        ("destination", 51.45, -0.20),
    ]
    return [
        Waypoint(id=wid, location=f"Stop {wid}", lat=lat, lng=lng, order=idx)
        for idx, (wid, lat, lng) in enumerate(points)
    ]
