"""
Room layout placement engine

Collision detection, free-spot and wall-mount placement, and exclusion
zones for rectangular objects in a single rectangular room (cm).
"""

from .collision import colliding_ids, would_collide
from .config import DEFAULT_CONFIG, LayoutConfig
from .exceptions import LayoutError, LayoutFileError, WallPlacementError
from .geometry import clamp_to_room, effective_footprint, fits_in_room, rectangles_overlap
from .measurements import clearances, nearest_obstacles, position_for_clearance
from .models import (
    EffectiveBounds,
    ExclusionZone,
    ObjectKind,
    PlacedObject,
    Position,
    Rect,
    RoomBounds,
    Side,
)
from .placement import find_free_spot
from .planner import LayoutPlanner
from .validator import LayoutValidator
from .wall_mount import find_wall_position, wall_of
from .zones import (
    detect_spanning_wall,
    effective_bounds,
    is_point_in_zone,
    rectangle_overlaps_zone,
    wall_span_zones,
)

__version__ = "0.1.0"
