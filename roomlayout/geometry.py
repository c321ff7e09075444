"""
Rectangle primitives for the layout engine

Every shape in a room is an axis-aligned rectangle turned by a multiple of
90 degrees, so overlap tests stay on plain coordinates. Shapely is used
where an actual area or polygon is needed (overlap area, zone polygons).
"""

from __future__ import annotations

from shapely.geometry import box

from .config import DEFAULT_CONFIG
from .models import PlacedObject, Rect, RoomBounds


def rectangles_overlap(a: Rect, b: Rect) -> bool:
    """True when a and b share positive area; touching edges do not count"""
    return not (
        a.x + a.width <= b.x
        or a.x >= b.x + b.width
        or a.y + a.height <= b.y
        or a.y >= b.y + b.height
    )


def on_horizontal_wall(obj: PlacedObject, config=DEFAULT_CONFIG, room: RoomBounds | None = None) -> bool:
    """Whether a door/window sits on the top or bottom wall

    The object is on the top wall when its y is at -wall_thickness, and is
    also taken as horizontal at y == 0. The bottom wall (y == room height)
    can only be recognised when the room is known. Anything else is a
    vertical wall.
    """
    tol = config.footprint_tolerance
    if abs(obj.y + config.wall_thickness) < tol or abs(obj.y) < tol:
        return True
    return room is not None and abs(obj.y - room.height) < tol


def effective_footprint(obj: PlacedObject, config=DEFAULT_CONFIG, room: RoomBounds | None = None) -> Rect:
    """Axis-aligned rectangle an object really occupies"""
    if obj.kind.is_wall_mounted:
        # length runs along the wall, rotation never applies
        if on_horizontal_wall(obj, config, room):
            return Rect(obj.x, obj.y, obj.width, config.wall_thickness)
        return Rect(obj.x, obj.y, config.wall_thickness, obj.width)

    width, height = obj.width, obj.height
    if obj.rotation in (90, 270):
        width, height = height, width
    return Rect(obj.x, obj.y, width, height)


def fits_in_room(rect: Rect, room: RoomBounds) -> bool:
    return (rect.x >= 0 and rect.y >= 0 and
            rect.right <= room.width and
            rect.bottom <= room.height)


def clamp_to_room(obj: PlacedObject, room: RoomBounds, config=DEFAULT_CONFIG) -> PlacedObject:
    """Pull a non wall-mounted object back inside the room

    Objects larger than the room end up pinned to the top-left corner.
    Doors and windows are returned unchanged, they live in the wall.
    """
    if obj.kind.is_wall_mounted:
        return obj
    rect = effective_footprint(obj, config)
    x = max(0.0, min(rect.x, room.width - rect.width))
    y = max(0.0, min(rect.y, room.height - rect.height))
    if (x, y) == (obj.x, obj.y):
        return obj
    return obj.moved_to(x, y)


def to_polygon(rect: Rect):
    """Shapely polygon for a footprint"""
    return box(*rect.bounds)


def overlap_area(a: Rect, b: Rect) -> float:
    """Area shared by two rectangles, 0.0 when they only touch"""
    if not rectangles_overlap(a, b):
        return 0.0
    return to_polygon(a).intersection(to_polygon(b)).area


def synthetic_opening(length: float, x: float, y: float, horizontal: bool, config=DEFAULT_CONFIG) -> Rect:
    """Footprint a door of the given length would take on a wall"""
    if horizontal:
        return Rect(x, y, length, config.wall_thickness)
    return Rect(x, y, config.wall_thickness, length)
