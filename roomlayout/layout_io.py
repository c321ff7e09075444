"""
Layout snapshots as JSON

    {
      "room": {"width": 400, "height": 300},
      "items": [
        {"id": "sofa-1", "type": "Sofa", "x": 20, "y": 20,
         "width": 200, "height": 90, "rotation": 0}
      ],
      "config": {"wall_thickness": 10}
    }

"furniture" is accepted in place of "items". "config" is optional.
"""

from __future__ import annotations

import json
from typing import List, NamedTuple

from .config import DEFAULT_CONFIG, LayoutConfig
from .exceptions import LayoutError, LayoutFileError
from .models import ObjectKind, PlacedObject, RoomBounds


class Layout(NamedTuple):
    room: RoomBounds
    objects: List[PlacedObject]
    config: LayoutConfig = DEFAULT_CONFIG


def object_from_dict(data, index=0):
    if not isinstance(data, dict):
        raise LayoutError(f"Item {index} must be a JSON object")
    try:
        label = data.get('type') or data.get('name')
        return PlacedObject(
            id=str(data.get('id', f"item-{index}")),
            kind=ObjectKind.from_label(label),
            x=float(data['x']),
            y=float(data['y']),
            width=float(data['width']),
            height=float(data['height']),
            rotation=float(data.get('rotation', 0)),
            label=label,
        )
    except KeyError as e:
        raise LayoutError(f"Item {index} is missing {e.args[0]!r}") from e
    except (TypeError, ValueError) as e:
        raise LayoutError(f"Item {index} is invalid: {e}") from e


def object_to_dict(obj):
    return {
        'id': obj.id,
        'type': obj.label or obj.kind.value.capitalize(),
        'x': obj.x,
        'y': obj.y,
        'width': obj.width,
        'height': obj.height,
        'rotation': obj.rotation,
    }


def layout_from_dict(data):
    if not isinstance(data, dict):
        raise LayoutError("Layout must be a JSON object")
    room_data = data.get('room')
    if not isinstance(room_data, dict):
        raise LayoutError("Layout has no 'room' object")

    try:
        room = RoomBounds(float(room_data['width']), float(room_data['height']))
        config = LayoutConfig.from_mapping(data.get('config') or {})
    except KeyError as e:
        raise LayoutError(f"Room is missing {e.args[0]!r}") from e
    except (TypeError, ValueError) as e:
        raise LayoutError(str(e)) from e

    items = data.get('items', data.get('furniture', []))
    if not isinstance(items, list):
        raise LayoutError("Layout 'items' must be a list")
    objects = [object_from_dict(item, i) for i, item in enumerate(items)]

    ids = [o.id for o in objects]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise LayoutError(f"Duplicate item ids: {', '.join(duplicates)}")

    return Layout(room, objects, config)


def layout_to_dict(room, objects, config=None):
    data = {
        'room': {'width': room.width, 'height': room.height},
        'items': [object_to_dict(o) for o in objects],
    }
    if config is not None and config != DEFAULT_CONFIG:
        data['config'] = config.to_dict()
    return data


def load_layout(path):
    """Read a layout file, raising LayoutFileError on any problem"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise LayoutFileError(path, "file not found") from e
    except json.JSONDecodeError as e:
        raise LayoutFileError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e
    except OSError as e:
        raise LayoutFileError(path, e.strerror or str(e)) from e

    try:
        return layout_from_dict(data)
    except LayoutError as e:
        raise LayoutFileError(path, str(e)) from e


def save_layout(path, room, objects, config=None):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(layout_to_dict(room, objects, config), f, indent=2)
