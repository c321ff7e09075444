"""
Exclusion zones cut off by inner walls

An inner wall that runs from one outer wall to the opposite one splits the
room in two. The smaller part is treated as a separate space (a closet, a
niche) and excluded from general placement. Zones are derived from the
current object list on every call and never stored.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from shapely.geometry import box
from shapely.ops import unary_union

from .config import DEFAULT_CONFIG
from .models import EffectiveBounds, ExclusionZone, ObjectKind, PlacedObject, Rect, RoomBounds, Side


def detect_spanning_wall(wall: PlacedObject, room: RoomBounds,
                         config=DEFAULT_CONFIG) -> Optional[ExclusionZone]:
    """Zone on the smaller side of a wall spanning the room, else None"""
    if wall.kind is not ObjectKind.WALL:
        return None

    tol = config.span_tolerance
    if wall.width > wall.height:
        if not (wall.x <= tol and wall.x + wall.width >= room.width - tol):
            return None
        to_top = wall.y
        to_bottom = room.height - (wall.y + wall.height)
        if to_top <= to_bottom:
            return ExclusionZone(0, 0, room.width, wall.y, Side.TOP, wall.id)
        return ExclusionZone(0, wall.y + wall.height, room.width, to_bottom, Side.BOTTOM, wall.id)

    if not (wall.y <= tol and wall.y + wall.height >= room.height - tol):
        return None
    to_left = wall.x
    to_right = room.width - (wall.x + wall.width)
    if to_left <= to_right:
        return ExclusionZone(0, 0, wall.x, room.height, Side.LEFT, wall.id)
    return ExclusionZone(wall.x + wall.width, 0, to_right, room.height, Side.RIGHT, wall.id)


def wall_span_zones(objects: Iterable[PlacedObject], room: RoomBounds,
                    config=DEFAULT_CONFIG) -> List[ExclusionZone]:
    """One zone per spanning inner wall, in object order"""
    zones = []
    for obj in objects:
        if obj.kind is ObjectKind.WALL:
            zone = detect_spanning_wall(obj, room, config)
            if zone is not None:
                zones.append(zone)
    return zones


def is_point_in_zone(x: float, y: float, zones: Iterable[ExclusionZone]) -> bool:
    """Boundaries count as inside"""
    return any(
        zone.x <= x <= zone.x + zone.width and zone.y <= y <= zone.y + zone.height
        for zone in zones
    )


def rectangle_overlaps_zone(rect: Rect, zones: Iterable[ExclusionZone]) -> bool:
    """True if the rectangle shares positive area with any zone"""
    for zone in zones:
        no_overlap = (
            rect.x + rect.width <= zone.x
            or rect.x >= zone.x + zone.width
            or rect.y + rect.height <= zone.y
            or rect.y >= zone.y + zone.height
        )
        if not no_overlap:
            return True
    return False


def effective_bounds(room: RoomBounds, zones: Iterable[ExclusionZone]) -> EffectiveBounds:
    """Room rectangle shrunk past every zone"""
    min_x, min_y = 0.0, 0.0
    max_x, max_y = float(room.width), float(room.height)

    for zone in zones:
        if zone.side == Side.TOP:
            min_y = max(min_y, zone.y + zone.height)
        elif zone.side == Side.BOTTOM:
            max_y = min(max_y, zone.y)
        elif zone.side == Side.LEFT:
            min_x = max(min_x, zone.x + zone.width)
        elif zone.side == Side.RIGHT:
            max_x = min(max_x, zone.x)

    return EffectiveBounds(min_x, min_y, max_x, max_y)


def usable_area(room: RoomBounds, zones: Iterable[ExclusionZone]) -> float:
    """Room floor area left once every zone is removed"""
    excluded = unary_union([box(*zone.rect.bounds) for zone in zones])
    return box(0, 0, room.width, room.height).difference(excluded).area
