"""
Room layout data model

Immutable snapshots of the room and the objects placed in it. The owning
application keeps its own mutable list; the engine only ever sees these
values and returns new ones.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import NamedTuple, Optional

VALID_ROTATIONS = (0, 90, 180, 270)


class ObjectKind(Enum):
    """What an object is, which decides its footprint and placement rules"""

    FURNITURE = "furniture"
    DOOR = "door"
    WINDOW = "window"
    WALL = "wall"

    @property
    def is_wall_mounted(self):
        return self in (ObjectKind.DOOR, ObjectKind.WINDOW)

    @classmethod
    def from_label(cls, label):
        """Classify a free-form type label ('Door', 'Sofa', ...)"""
        key = (label or "").strip().lower()
        for kind in (cls.DOOR, cls.WINDOW, cls.WALL):
            if key == kind.value:
                return kind
        return cls.FURNITURE


class Side(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_horizontal(self):
        """Top and bottom walls run along the x axis"""
        return self in (Side.TOP, Side.BOTTOM)


# Fixed fallback order when the preferred wall is full
WALL_ORDER = (Side.TOP, Side.BOTTOM, Side.LEFT, Side.RIGHT)


class Position(NamedTuple):
    x: float
    y: float


class EffectiveBounds(NamedTuple):
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self):
        return self.max_x - self.min_x

    @property
    def height(self):
        return self.max_y - self.min_y


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    @property
    def bounds(self):
        """(x1, y1, x2, y2), the order shapely's box() takes"""
        return (self.x, self.y, self.right, self.bottom)

    @property
    def center(self):
        return (self.x + self.width / 2, self.y + self.height / 2)

    def area(self):
        return max(0.0, self.width) * max(0.0, self.height)


@dataclass(frozen=True)
class RoomBounds:
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Room must have positive size, got {self.width}×{self.height}")

    def extent(self, side):
        """Length of the given wall"""
        return self.width if Side(side).is_horizontal else self.height


@dataclass(frozen=True)
class PlacedObject:
    """A rectangle in the room with a kind, rotation and stable id

    For doors and windows ``width`` is the length along the wall; the depth
    across the wall always comes from the configured wall thickness.
    """

    id: str
    kind: ObjectKind
    x: float
    y: float
    width: float
    height: float
    rotation: int = 0
    label: Optional[str] = None

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"{self.id}: negative size {self.width}×{self.height}")
        if self.rotation % 90 != 0:
            raise ValueError(f"{self.id}: rotation must be a multiple of 90, got {self.rotation}")
        rotation = int(self.rotation) % 360
        if not isinstance(self.kind, ObjectKind):
            object.__setattr__(self, "kind", ObjectKind(self.kind))
        object.__setattr__(self, "rotation", rotation)

    @property
    def name(self):
        return self.label or self.kind.value

    def moved_to(self, x, y):
        return replace(self, x=x, y=y)

    def resized(self, width, height):
        return replace(self, width=width, height=height)


@dataclass(frozen=True)
class ExclusionZone:
    """Part of the room cut off by an inner wall spanning it"""

    x: float
    y: float
    width: float
    height: float
    side: Side
    wall_id: Optional[str] = None

    @property
    def rect(self):
        return Rect(self.x, self.y, self.width, self.height)
