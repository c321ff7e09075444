"""
Furniture presets

Default sizes (cm) for the items a user can add, grouped by the room
they usually belong to. Doors and windows are listed with their length
along the wall as width.
"""

from dataclasses import dataclass

from .models import ObjectKind, PlacedObject


@dataclass(frozen=True)
class Preset:
    type: str
    width: float
    height: float
    category: str

    @property
    def kind(self):
        return ObjectKind.from_label(self.type)


PRESETS = [
    # Bedroom
    Preset('Bed', 160, 200, 'bedroom'),
    Preset('Nightstand', 50, 40, 'bedroom'),
    Preset('Dresser', 120, 50, 'bedroom'),
    Preset('Closet', 150, 60, 'bedroom'),
    Preset('Desk', 120, 60, 'bedroom'),

    # Living room
    Preset('Sofa', 200, 90, 'living'),
    Preset('Armchair', 80, 80, 'living'),
    Preset('Coffee Table', 100, 60, 'living'),
    Preset('TV Stand', 150, 45, 'living'),
    Preset('Bookshelf', 80, 40, 'living'),

    # Kitchen
    Preset('Dining Table', 160, 90, 'kitchen'),
    Preset('Chair', 50, 50, 'kitchen'),
    Preset('Refrigerator', 70, 70, 'kitchen'),
    Preset('Stove', 60, 60, 'kitchen'),
    Preset('Counter', 120, 60, 'kitchen'),

    # Office
    Preset('Filing Cabinet', 50, 60, 'office'),

    # Bathroom
    Preset('Toilet', 40, 60, 'bathroom'),
    Preset('Sink', 50, 40, 'bathroom'),
    Preset('Shower', 90, 90, 'bathroom'),
    Preset('Bathtub', 170, 80, 'bathroom'),
    Preset('Towel Dryer', 60, 80, 'bathroom'),

    # Any room
    Preset('Table', 120, 80, 'general'),
    Preset('Door', 90, 10, 'structure'),
    Preset('Window', 100, 10, 'structure'),
    Preset('Wall', 200, 10, 'structure'),
]

ROOM_DEFAULTS = {
    'bedroom': ['Bed', 'Nightstand', 'Dresser', 'Closet', 'Desk'],
    'living': ['Sofa', 'Armchair', 'Coffee Table', 'TV Stand', 'Bookshelf'],
    'kitchen': ['Dining Table', 'Chair', 'Refrigerator', 'Stove', 'Counter'],
    'office': ['Desk', 'Chair', 'Filing Cabinet', 'Bookshelf', 'Table'],
    'bathroom': ['Toilet', 'Sink', 'Shower', 'Bathtub', 'Towel Dryer'],
}

_BY_TYPE = {p.type.lower(): p for p in PRESETS}


def preset(type_label):
    """Look up a preset by type, case-insensitive; None if unknown"""
    return _BY_TYPE.get(type_label.strip().lower())


def room_defaults(room_type):
    """Presets a new room of the given type starts with"""
    if room_type not in ROOM_DEFAULTS:
        raise ValueError(f"Unknown room type {room_type!r}")
    return [preset(t) for t in ROOM_DEFAULTS[room_type]]


def new_object(type_label, object_id, width=None, height=None, rotation=0):
    """Unplaced object for a catalog type, preset size unless overridden

    Unknown types need an explicit size.
    """
    p = preset(type_label)
    if p is None and (width is None or height is None):
        raise ValueError(f"No preset for {type_label!r}, width and height are required")
    return PlacedObject(
        id=object_id,
        kind=ObjectKind.from_label(type_label),
        x=0,
        y=0,
        width=p.width if width is None else width,
        height=p.height if height is None else height,
        rotation=rotation,
        label=p.type if p is not None else type_label,
    )
