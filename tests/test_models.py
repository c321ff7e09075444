import pytest

from roomlayout.models import ObjectKind, PlacedObject, RoomBounds, Side


@pytest.mark.parametrize("label,kind", [
    ("Door", ObjectKind.DOOR),
    ("door", ObjectKind.DOOR),
    (" WINDOW ", ObjectKind.WINDOW),
    ("Wall", ObjectKind.WALL),
    ("Sofa", ObjectKind.FURNITURE),
    ("Doorstop", ObjectKind.FURNITURE),
    ("", ObjectKind.FURNITURE),
    (None, ObjectKind.FURNITURE),
])
def test_kind_from_label(label, kind):
    assert ObjectKind.from_label(label) is kind


def test_wall_mounted_kinds():
    assert ObjectKind.DOOR.is_wall_mounted
    assert ObjectKind.WINDOW.is_wall_mounted
    assert not ObjectKind.WALL.is_wall_mounted
    assert not ObjectKind.FURNITURE.is_wall_mounted


def test_rotation_is_normalised():
    obj = PlacedObject("a", ObjectKind.FURNITURE, 0, 0, 10, 20, rotation=450)
    assert obj.rotation == 90
    assert PlacedObject("b", ObjectKind.FURNITURE, 0, 0, 10, 20, rotation=-90).rotation == 270


def test_rejects_odd_rotation():
    with pytest.raises(ValueError):
        PlacedObject("a", ObjectKind.FURNITURE, 0, 0, 10, 20, rotation=45)


def test_rejects_negative_size():
    with pytest.raises(ValueError):
        PlacedObject("a", ObjectKind.FURNITURE, 0, 0, -1, 20)


def test_kind_accepts_value_string():
    assert PlacedObject("a", "door", 0, 0, 90, 10).kind is ObjectKind.DOOR


def test_moved_and_resized_return_new_objects():
    obj = PlacedObject("a", ObjectKind.FURNITURE, 0, 0, 10, 20, label="Desk")
    moved = obj.moved_to(5, 6)
    assert (moved.x, moved.y) == (5, 6)
    assert (obj.x, obj.y) == (0, 0)
    assert moved.id == "a" and moved.label == "Desk"
    assert obj.resized(30, 40).width == 30


def test_room_must_be_positive():
    with pytest.raises(ValueError):
        RoomBounds(0, 300)


def test_room_extent_per_wall():
    room = RoomBounds(400, 300)
    assert room.extent(Side.TOP) == 400
    assert room.extent("left") == 300


@pytest.mark.parametrize("rotation", [90.5, 45, 1])
def test_rotation_is_not_truncated(rotation):
    with pytest.raises(ValueError, match="multiple of 90"):
        PlacedObject("a", ObjectKind.FURNITURE, 0, 0, 10, 20, rotation=rotation)


def test_float_rotation_on_a_quarter_turn():
    obj = PlacedObject("a", ObjectKind.FURNITURE, 0, 0, 10, 20, rotation=180.0)
    assert obj.rotation == 180
    assert isinstance(obj.rotation, int)
