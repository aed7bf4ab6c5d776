import pytest

from src.route_planner.models.domain import GeoPoint
from src.route_planner.services.geospatial import (
    distance_km,
    estimate_minutes,
    haversine_km,
    offset_point,
    round_half_up,
)

LONDON = GeoPoint(51.5074, -0.1278)
PARIS = GeoPoint(48.8566, 2.3522)
BERLIN = GeoPoint(52.52, 13.405)


def test_haversine_london_paris():
    assert haversine_km(LONDON.lat, LONDON.lng, PARIS.lat, PARIS.lng) == pytest.approx(343.5, abs=1.0)


def test_distance_is_symmetric():
    assert distance_km(LONDON, PARIS) == distance_km(PARIS, LONDON)
    assert distance_km(PARIS, BERLIN) == distance_km(BERLIN, PARIS)


def test_distance_to_self_is_zero():
    assert distance_km(LONDON, LONDON) == 0
    assert distance_km(GeoPoint(-33.9, 151.2), GeoPoint(-33.9, 151.2)) == 0


def test_triangle_inequality():
    direct = distance_km(LONDON, BERLIN)
    via_paris = distance_km(LONDON, PARIS) + distance_km(PARIS, BERLIN)
    assert direct <= via_paris + 1e-9


def test_estimate_minutes_uses_average_speed():
    assert estimate_minutes(40) == 60
    assert estimate_minutes(10) == 15
    assert estimate_minutes(0) == 0
    assert estimate_minutes(10, average_speed_kmh=60) == 10


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2.49) == 2


def test_offset_point_north_keeps_longitude():
    moved = offset_point(10.0, 20.0, 1.0, 0.0)
    assert moved.lng == pytest.approx(20.0)
    assert moved.lat > 10.0
