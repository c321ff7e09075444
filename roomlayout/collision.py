"""
Collision engine

Single authority on whether a placement is legal. Both solvers and the
validator go through here.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .config import DEFAULT_CONFIG
from .geometry import effective_footprint, rectangles_overlap
from .models import PlacedObject, Rect, RoomBounds


def footprints(others: Iterable[PlacedObject], exclude_id: Optional[str] = None,
               config=DEFAULT_CONFIG, room: RoomBounds | None = None) -> List[Tuple[PlacedObject, Rect]]:
    """Resolve every object's footprint once, skipping exclude_id"""
    return [
        (other, effective_footprint(other, config, room))
        for other in others
        if exclude_id is None or other.id != exclude_id
    ]


def rect_collides(rect: Rect, resolved: Iterable[Tuple[PlacedObject, Rect]]) -> bool:
    """Check a footprint against pre-resolved footprints"""
    return any(rectangles_overlap(rect, other_rect) for _, other_rect in resolved)


def would_collide(candidate: PlacedObject, others: Iterable[PlacedObject],
                  exclude_id: Optional[str] = None, *, config=DEFAULT_CONFIG,
                  room: RoomBounds | None = None) -> bool:
    """True if the candidate overlaps any other object

    exclude_id skips one object, used when an object is checked against
    the list it is already part of.
    """
    rect = effective_footprint(candidate, config, room)
    for other in others:
        if exclude_id is not None and other.id == exclude_id:
            continue
        if rectangles_overlap(rect, effective_footprint(other, config, room)):
            return True
    return False


def colliding_ids(candidate: PlacedObject, others: Iterable[PlacedObject],
                  exclude_id: Optional[str] = None, *, config=DEFAULT_CONFIG,
                  room: RoomBounds | None = None) -> List[str]:
    """Ids of every object the candidate overlaps, in list order"""
    rect = effective_footprint(candidate, config, room)
    return [
        other.id
        for other, other_rect in footprints(others, exclude_id, config, room)
        if rectangles_overlap(rect, other_rect)
    ]
