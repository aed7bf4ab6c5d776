import pytest

from src.route_planner.models.domain import Waypoint
from src.route_planner.services.routing.optimizer import optimize_route
from src.route_planner.services.routing.sequence import (
    apply_optimization,
    insert_waypoint,
    move_waypoint,
    new_waypoint_id,
    remove_waypoint,
    renumber,
    update_waypoint,
)


def _orders(route) -> list[int]:
    return [wp.order for wp in route]


def test_new_waypoint_ids_are_unique():
    ids = {new_waypoint_id() for _ in range(200)}
    assert len(ids) == 200
    assert all(wid.startswith("wp_") for wid in ids)


def test_renumber_returns_copies(london_route):
    shuffled = [london_route[2], london_route[0], london_route[3], london_route[1]]
    renumbered = renumber(shuffled)

    assert _orders(renumbered) == [0, 1, 2, 3]
    assert [wp.id for wp in renumbered] == ["B", "origin", "destination", "A"]
    assert london_route[2].order == 2


def test_insert_waypoint(london_route):
    new_stop = Waypoint(id=new_waypoint_id(), location="Cafe", lat=51.5, lng=-0.11)
    updated = insert_waypoint(london_route, new_stop, 2)

    assert [wp.id for wp in updated][2] == new_stop.id
    assert _orders(updated) == [0, 1, 2, 3, 4]
    assert len(london_route) == 4


def test_remove_waypoint_keeps_orders_dense(london_route):
    updated = remove_waypoint(london_route, "A")

    assert [wp.id for wp in updated] == ["origin", "B", "destination"]
    assert _orders(updated) == [0, 1, 2]


def test_remove_unknown_waypoint_is_a_no_op(london_route):
    assert [wp.id for wp in remove_waypoint(london_route, "missing")] == [wp.id for wp in london_route]


def test_move_waypoint(london_route):
    updated = move_waypoint(london_route, "B", 1)
    assert [wp.id for wp in updated] == ["origin", "B", "A", "destination"]
    assert _orders(updated) == [0, 1, 2, 3]

    with pytest.raises(KeyError):
        move_waypoint(london_route, "missing", 1)


def test_update_waypoint(london_route):
    updated = update_waypoint(london_route, "A", location="Museum", flexible_radius=300.0)

    assert updated[1].location == "Museum"
    assert updated[1].flexible_radius == 300.0
    assert london_route[1].location == "Stop A"


def test_update_waypoint_rejects_identity_changes(london_route):
    with pytest.raises(ValueError):
        update_waypoint(london_route, "A", id="other")
    with pytest.raises(ValueError):
        update_waypoint(london_route, "A", order=3)


def test_apply_optimization_returns_the_proposal(london_route):
    result = optimize_route(london_route)
    committed = apply_optimization(result)

    assert [wp.id for wp in committed] == [wp.id for wp in result.optimized_route]
    assert _orders(committed) == [0, 1, 2, 3]
