"""
Clearance measurements

Distances from an object to the nearest obstacle (another object or the
room wall) straight left, right, up and down from its centre lines, and
the inverse: where to put the object so one of those distances becomes
a given value.
"""

from __future__ import annotations

from typing import Dict, NamedTuple, Sequence

from .collision import footprints
from .config import DEFAULT_CONFIG
from .geometry import effective_footprint
from .models import PlacedObject, Position, RoomBounds, Side


class ObstacleBounds(NamedTuple):
    """Nearest obstacle edge in each direction, room walls by default"""
    left: float
    top: float
    right: float
    bottom: float


def nearest_obstacles(obj: PlacedObject, others: Sequence[PlacedObject], room: RoomBounds,
                      config=DEFAULT_CONFIG) -> ObstacleBounds:
    rect = effective_footprint(obj, config, room)
    mid_x, mid_y = rect.center
    left, top, right, bottom = 0.0, 0.0, float(room.width), float(room.height)

    for _, other in footprints(others, obj.id, config, room):
        if other.y <= mid_y <= other.bottom:
            if other.right <= rect.x:
                left = max(left, other.right)
            if other.x >= rect.right:
                right = min(right, other.x)

        if other.x <= mid_x <= other.right:
            if other.bottom <= rect.y:
                top = max(top, other.bottom)
            if other.y >= rect.bottom:
                bottom = min(bottom, other.y)

    return ObstacleBounds(left, top, right, bottom)


def clearances(obj: PlacedObject, others: Sequence[PlacedObject], room: RoomBounds,
               config=DEFAULT_CONFIG) -> Dict[Side, float]:
    """Free distance on each side of obj"""
    rect = effective_footprint(obj, config, room)
    bounds = nearest_obstacles(obj, others, room, config)
    return {
        Side.LEFT: rect.x - bounds.left,
        Side.RIGHT: bounds.right - rect.right,
        Side.TOP: rect.y - bounds.top,
        Side.BOTTOM: bounds.bottom - rect.bottom,
    }


def position_for_clearance(obj: PlacedObject, others: Sequence[PlacedObject], room: RoomBounds,
                           direction: Side, distance: float, config=DEFAULT_CONFIG) -> Position:
    """Position putting obj exactly `distance` from the obstacle in `direction`

    Only the coordinate along that direction changes. The result is not
    collision checked; callers run it through the planner if they need to.
    """
    if distance < 0:
        raise ValueError(f"Clearance cannot be negative, got {distance}")

    direction = Side(direction)
    rect = effective_footprint(obj, config, room)
    bounds = nearest_obstacles(obj, others, room, config)
    x, y = obj.x, obj.y

    if direction == Side.LEFT:
        x = bounds.left + distance
    elif direction == Side.RIGHT:
        x = bounds.right - rect.width - distance
    elif direction == Side.TOP:
        y = bounds.top + distance
    else:
        y = bounds.bottom - rect.height - distance

    return Position(x, y)
