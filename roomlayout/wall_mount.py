"""
Wall-mount solver for doors and windows

Slides an opening along each wall in turn and returns the first free
slot. Unlike the free-spot solver there is no default position: when
every wall is full the answer is None.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

import numpy as np

from .collision import footprints, rect_collides
from .config import DEFAULT_CONFIG
from .geometry import on_horizontal_wall, synthetic_opening
from .models import WALL_ORDER, PlacedObject, Position, RoomBounds, Side

logger = logging.getLogger(__name__)


def wall_line(side: Side, room: RoomBounds, config=DEFAULT_CONFIG) -> float:
    """Fixed coordinate of an opening flush to the given wall"""
    if side in (Side.TOP, Side.LEFT):
        return -config.wall_thickness
    return room.height if side == Side.BOTTOM else room.width


def wall_positions(length: float, side: Side, room: RoomBounds,
                   config=DEFAULT_CONFIG) -> Iterator[Position]:
    """Candidate positions along one wall, corner padding at both ends"""
    side = Side(side)
    padding = config.wall_corner_padding
    last = room.extent(side) - length - padding
    if last < padding:
        return

    fixed = wall_line(side, room, config)
    for offset in np.arange(padding, last + 1e-9, config.wall_step).tolist():
        if side.is_horizontal:
            yield Position(offset, fixed)
        else:
            yield Position(fixed, offset)


def _scan_wall(length, side, room, resolved, config):
    for x, y in wall_positions(length, side, room, config):
        rect = synthetic_opening(length, x, y, side.is_horizontal, config)
        if not rect_collides(rect, resolved):
            return Position(x, y)
    return None


def find_wall_position(length: float, room: RoomBounds, others: Sequence[PlacedObject],
                       preferred_wall: Optional[Side] = None, *,
                       config=DEFAULT_CONFIG) -> Optional[Position]:
    """Flush position for an opening of the given length, or None"""
    resolved = footprints(others, config=config, room=room)

    walls = list(WALL_ORDER)
    if preferred_wall is not None:
        preferred_wall = Side(preferred_wall)
        walls.remove(preferred_wall)
        walls.insert(0, preferred_wall)

    for side in walls:
        spot = _scan_wall(length, side, room, resolved, config)
        if spot is not None:
            if preferred_wall is not None and side != preferred_wall:
                logger.debug("%s wall full, placed %gcm opening on %s wall",
                             preferred_wall.value, length, side.value)
            return spot

    logger.warning("No wall has room for a %gcm opening", length)
    return None


def wall_of(obj: PlacedObject, room: RoomBounds, config=DEFAULT_CONFIG) -> Optional[Side]:
    """Which wall a door or window is flush to, None if it is on none"""
    if not obj.kind.is_wall_mounted:
        return None
    tol = config.footprint_tolerance
    if on_horizontal_wall(obj, config, room):
        if abs(obj.y + config.wall_thickness) < tol:
            return Side.TOP
        if abs(obj.y - room.height) < tol:
            return Side.BOTTOM
        return None
    if abs(obj.x + config.wall_thickness) < tol:
        return Side.LEFT
    if abs(obj.x - room.width) < tol:
        return Side.RIGHT
    return None
