import pytest

from roomlayout.models import ObjectKind, PlacedObject, RoomBounds


def item(id, x, y, w, h, rotation=0, kind=ObjectKind.FURNITURE):
    return PlacedObject(id, kind, x, y, w, h, rotation)


def door(id, x, y, length=90):
    return PlacedObject(id, ObjectKind.DOOR, x, y, length, 10)


def wall(id, x, y, w, h):
    return PlacedObject(id, ObjectKind.WALL, x, y, w, h)


@pytest.fixture
def room():
    return RoomBounds(400, 300)
