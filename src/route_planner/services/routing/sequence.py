"""Structural edits on a route: insert, remove, move, update.

Every function returns a new list of waypoint copies whose ``order`` matches
their index. The lists passed in are never modified.
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Any, Sequence

from ...models.domain import RouteOptimizationResult, Waypoint


def new_waypoint_id() -> str:
    return f"wp_{uuid.uuid4().hex}"


def renumber(route: Sequence[Waypoint]) -> list[Waypoint]:
    return [replace(waypoint, order=idx) for idx, waypoint in enumerate(route)]


def _index_of(route: Sequence[Waypoint], waypoint_id: str) -> int | None:
    for idx, waypoint in enumerate(route):
        if waypoint.id == waypoint_id:
            return idx
    return None


def insert_waypoint(route: Sequence[Waypoint], waypoint: Waypoint, index: int) -> list[Waypoint]:
    updated = list(route)
    updated.insert(index, waypoint)
    return renumber(updated)


def remove_waypoint(route: Sequence[Waypoint], waypoint_id: str) -> list[Waypoint]:
    return renumber([waypoint for waypoint in route if waypoint.id != waypoint_id])


def move_waypoint(route: Sequence[Waypoint], waypoint_id: str, new_index: int) -> list[Waypoint]:
    updated = list(route)
    idx = _index_of(updated, waypoint_id)
    if idx is None:
        raise KeyError(waypoint_id)
    updated.insert(new_index, updated.pop(idx))
    return renumber(updated)


def update_waypoint(route: Sequence[Waypoint], waypoint_id: str, **changes: Any) -> list[Waypoint]:
    """Apply field edits (location, coordinates, type, radius, notes) to one stop."""

    frozen = {"id", "order"} & changes.keys()
    if frozen:
        raise ValueError(f"Fields {sorted(frozen)} can not be edited directly.")
    if _index_of(route, waypoint_id) is None:
        raise KeyError(waypoint_id)
    return renumber([replace(wp, **changes) if wp.id == waypoint_id else wp for wp in route])


def apply_optimization(result: RouteOptimizationResult) -> list[Waypoint]:
    """Commit a proposal: the caller's new route is the proposed ordering."""
    return renumber(result.optimized_route)
