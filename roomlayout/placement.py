"""
Free-spot solver

Finds a spot for a new, pasted or duplicated object. Tries, in order:
  1. Heuristic candidates next to existing objects (right, below, diagonal)
  2. A regular grid scan, row by row
  3. Random positions
and falls back to the default anchor when everything is taken. The
caller gets a position back in every case and lets the user sort out any
remaining overlap.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator, Sequence

import numpy as np

from .collision import footprints, rect_collides
from .config import DEFAULT_CONFIG
from .geometry import fits_in_room
from .models import PlacedObject, Position, Rect, RoomBounds

logger = logging.getLogger(__name__)


def heuristic_candidates(others: Sequence[PlacedObject], config=DEFAULT_CONFIG,
                         room: RoomBounds | None = None) -> Iterator[Position]:
    """Anchor first, then right of / below / diagonal to each object"""
    yield Position(*config.anchor)

    margin = config.heuristic_margin
    for _, rect in footprints(others, config=config, room=room):
        yield Position(rect.x + rect.width + margin, rect.y)
        yield Position(rect.x, rect.y + rect.height + margin)
        yield Position(rect.x + rect.width + margin, rect.y + rect.height + margin)


def grid_candidates(width: float, height: float, room: RoomBounds,
                    config=DEFAULT_CONFIG) -> Iterator[Position]:
    """Grid cells from the anchor, y outer and x inner"""
    max_x = room.width - width
    max_y = room.height - height
    if max_x < config.anchor_x or max_y < config.anchor_y:
        return

    # small epsilon keeps the last cell when it lands exactly on the edge
    xs = np.arange(config.anchor_x, max_x + 1e-9, config.grid_step).tolist()
    ys = np.arange(config.anchor_y, max_y + 1e-9, config.grid_step).tolist()
    for y in ys:
        for x in xs:
            yield Position(x, y)


def _first_free(candidates, width, height, room, resolved):
    for x, y in candidates:
        rect = Rect(x, y, width, height)
        if fits_in_room(rect, room) and not rect_collides(rect, resolved):
            return Position(x, y)
    return None


def _random_spot(width, height, room, resolved, attempts, rng):
    max_x = room.width - width
    max_y = room.height - height
    if max_x < 0 or max_y < 0:
        return None

    for _ in range(attempts):
        x = math.floor(rng.uniform(0, max_x) + 0.5)
        y = math.floor(rng.uniform(0, max_y) + 0.5)
        rect = Rect(x, y, width, height)
        if fits_in_room(rect, room) and not rect_collides(rect, resolved):
            return Position(x, y)
    return None


def find_free_spot(width: float, height: float, room: RoomBounds,
                   others: Sequence[PlacedObject], *, config=DEFAULT_CONFIG,
                   rng=None) -> Position:
    """Propose a non-overlapping top-left position for a width×height footprint

    width and height must already be rotation-resolved. rng may be a numpy
    Generator or a seed; it only drives the random tier.
    """
    resolved = footprints(others, config=config, room=room)

    spot = _first_free(heuristic_candidates(others, config, room), width, height, room, resolved)
    if spot is not None:
        return spot

    logger.debug("No heuristic spot for %gx%g, scanning grid", width, height)
    spot = _first_free(grid_candidates(width, height, room, config), width, height, room, resolved)
    if spot is not None:
        return spot

    logger.debug("Grid full for %gx%g, trying %d random positions",
                 width, height, config.random_attempts)
    spot = _random_spot(width, height, room, resolved, config.random_attempts,
                        np.random.default_rng(rng))
    if spot is not None:
        return spot

    logger.warning("No free spot for %gx%g in %gx%g room, using anchor %s",
                   width, height, room.width, room.height, config.anchor)
    return Position(*config.anchor)
