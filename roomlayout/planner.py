"""
Room layout planner

Entry point for the application layer: decides which solver handles an
object being added, duplicated, pasted or resized, and hands back new
PlacedObject values for the caller to apply to its own list.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import List, Optional, Sequence

import numpy as np

from .collision import would_collide
from .config import DEFAULT_CONFIG
from .exceptions import WallPlacementError
from .geometry import effective_footprint, fits_in_room
from .models import PlacedObject, RoomBounds, Side
from .placement import find_free_spot
from .wall_mount import find_wall_position, wall_of
from .zones import effective_bounds, wall_span_zones

logger = logging.getLogger(__name__)


def new_id():
    return uuid.uuid4().hex


class LayoutPlanner:
    """Places objects in one room without overlapping the existing ones"""

    def __init__(self, room: RoomBounds, config=DEFAULT_CONFIG, rng=None):
        self.room = room
        self.config = config
        self.rng = np.random.default_rng(rng)

    def place(self, obj: PlacedObject, others: Sequence[PlacedObject],
              preferred_wall: Optional[Side] = None) -> PlacedObject:
        """Return obj moved to a legal spot

        Doors and windows go flush to a wall and raise WallPlacementError
        when no wall has room. Everything else always gets a position.
        """
        others = [o for o in others if o.id != obj.id]

        if obj.kind.is_wall_mounted:
            spot = find_wall_position(obj.width, self.room, others, preferred_wall,
                                      config=self.config)
            if spot is None:
                raise WallPlacementError(obj.width, self.room)
            return obj.moved_to(spot.x, spot.y)

        rect = effective_footprint(obj, self.config)
        spot = find_free_spot(rect.width, rect.height, self.room, others,
                              config=self.config, rng=self.rng)
        logger.debug("Placed %s at (%g, %g)", obj.name, spot.x, spot.y)
        return obj.moved_to(spot.x, spot.y)

    def duplicate(self, obj: PlacedObject, others: Sequence[PlacedObject]) -> PlacedObject:
        """Copy of obj with a fresh id at a free spot"""
        clone = replace(obj, id=new_id())
        return self.place(clone, others, self._current_wall(obj))

    def paste(self, objs: Sequence[PlacedObject], others: Sequence[PlacedObject]) -> List[PlacedObject]:
        """Place copies of several objects, each avoiding the ones before it

        Doors and windows that no longer fit on any wall are skipped.
        """
        placed: List[PlacedObject] = []
        for obj in objs:
            try:
                placed.append(self.duplicate(obj, list(others) + placed))
            except WallPlacementError as e:
                logger.warning("Skipped pasting %s: %s", obj.name, e)
        return placed

    def resize(self, obj: PlacedObject, width: float, height: float,
               others: Sequence[PlacedObject]) -> PlacedObject:
        """Resize obj, moving it only if the new size no longer fits where it is"""
        resized = obj.resized(width, height)
        if self.is_legal(resized, others):
            return resized
        logger.debug("%s no longer fits at (%g, %g) after resize", obj.name, obj.x, obj.y)
        return self.place(resized, others, self._current_wall(obj))

    def is_legal(self, obj: PlacedObject, others: Sequence[PlacedObject]) -> bool:
        """In bounds (or flush to a wall) and overlapping nothing"""
        if obj.kind.is_wall_mounted:
            on_wall = wall_of(obj, self.room, self.config) is not None
        else:
            on_wall = fits_in_room(effective_footprint(obj, self.config), self.room)
        return on_wall and not would_collide(obj, others, obj.id, config=self.config, room=self.room)

    def zones(self, objects: Sequence[PlacedObject]):
        return wall_span_zones(objects, self.room, self.config)

    def effective_bounds(self, objects: Sequence[PlacedObject]):
        return effective_bounds(self.room, self.zones(objects))

    def _current_wall(self, obj):
        return wall_of(obj, self.room, self.config)
