import pytest

from src.route_planner.models.domain import Waypoint
from src.route_planner.services.geospatial import estimate_minutes
from src.route_planner.services.routing.metrics import total_distance_km
from src.route_planner.services.routing.optimizer import nearest_neighbor_sort, optimize_route


def _route(*points: tuple[str, float, float]) -> list[Waypoint]:
    return [
        Waypoint(id=wid, location=f"Stop {wid}", lat=lat, lng=lng, order=idx)
        for idx, (wid, lat, lng) in enumerate(points)
    ]


def _ids(route) -> list[str]:
    return [wp.id for wp in route]


def test_short_routes_are_returned_unchanged():
    for route in (
        _route(("o", 0, 0), ("d", 0, 1)),
        _route(("o", 0, 0), ("m", 0, 0.5), ("d", 0, 1)),
    ):
        result = optimize_route(route)
        assert result.applied is False
        assert list(result.optimized_route) == route
        assert list(result.original_route) == route
        assert result.distance_saved_km == 0
        assert result.time_saved_min == 0


def test_zigzag_route_is_reordered():
    route = _route(
        ("origin", 0, 0),
        ("far", 0, 0.09),
        ("near", 0, 0.01),
        ("middle", 0, 0.05),
        ("destination", 0, 0.1),
    )
    result = optimize_route(route)

    assert _ids(result.optimized_route) == ["origin", "near", "middle", "far", "destination"]
    assert [wp.order for wp in result.optimized_route] == [0, 1, 2, 3, 4]
    assert result.applied is True
    expected_saving = total_distance_km(route) - total_distance_km(result.optimized_route)
    assert result.distance_saved_km == pytest.approx(expected_saving)
    assert result.distance_saved_km > 0.5
    assert result.time_saved_min == estimate_minutes(result.distance_saved_km)


def test_input_route_is_not_mutated():
    route = _route(("o", 0, 0), ("b", 0, 0.09), ("a", 0, 0.01), ("d", 0, 0.1))
    snapshot = [(wp.id, wp.order) for wp in route]

    result = optimize_route(route)

    assert [(wp.id, wp.order) for wp in route] == snapshot
    assert result.optimized_route[1] is not route[2]
    assert list(result.original_route) == route


def test_endpoints_are_never_relocated(london_route):
    reversed_middle = [london_route[0], *reversed(london_route[1:-1]), london_route[-1]]
    for route in (london_route, reversed_middle):
        result = optimize_route(route)
        assert result.optimized_route[0].id == "origin"
        assert result.optimized_route[-1].id == "destination"


def test_small_savings_are_not_applied():
    # Swapping two stops 100 m apart saves well under half a kilometer.
    route = _route(("o", 0, 0), ("b", 0, 0.0109), ("a", 0, 0.01), ("d", 0, 0.05))
    result = optimize_route(route)

    assert _ids(result.optimized_route) == ["o", "a", "b", "d"]
    assert 0 < result.distance_saved_km <= 0.5
    assert result.applied is False


def test_threshold_is_configurable():
    route = _route(("o", 0, 0), ("b", 0, 0.0109), ("a", 0, 0.01), ("d", 0, 0.05))
    assert optimize_route(route, min_saving_km=0.01).applied is True


def test_ties_go_to_the_earliest_stop():
    start = Waypoint(id="o", location="Origin", lat=0, lng=0)
    east = Waypoint(id="east", location="East", lat=0, lng=0.01)
    west = Waypoint(id="west", location="West", lat=0, lng=-0.01)

    assert _ids(nearest_neighbor_sort([east, west], start)) == ["east", "west"]
    assert _ids(nearest_neighbor_sort([west, east], start)) == ["west", "east"]


def test_optimization_is_deterministic(london_route):
    assert optimize_route(london_route) == optimize_route(london_route)


def test_london_scenario_visits_b_before_a(london_route):
    result = optimize_route(london_route)

    assert _ids(result.optimized_route) == ["origin", "B", "A", "destination"]
    original_length = total_distance_km(london_route)
    proposed_length = total_distance_km(result.optimized_route)
    # Greedy order is longer here (about 17.50 km against 14.06 km), so nothing is saved.
    assert original_length == pytest.approx(14.06, abs=0.01)
    assert proposed_length == pytest.approx(17.50, abs=0.01)
    assert proposed_length > original_length
    assert result.distance_saved_km == 0.0
    assert result.time_saved_min == 0
    assert result.applied is False
