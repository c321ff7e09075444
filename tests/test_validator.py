from conftest import door, item, wall
from roomlayout.models import ObjectKind, PlacedObject
from roomlayout.validator import LayoutValidator, categorize


def test_clean_layout(room):
    objects = [
        item("sofa", 20, 200, 200, 90),
        item("table", 230, 200, 80, 80),
        door("door", 300, -10),
    ]
    validator = LayoutValidator(room, objects)
    assert validator.validate() == []
    assert validator.get_layout_score() == 0


def test_overlap_reports_area(room):
    objects = [
        item("a", 100, 100, 100, 50),
        item("b", 150, 125, 100, 50),
    ]
    violations = LayoutValidator(room, objects).validate()
    assert violations == ["CRITICAL: furniture overlaps furniture (area: 1250cm²)"]


def test_overlap_uses_labels(room):
    objects = [
        PlacedObject("1", ObjectKind.FURNITURE, 100, 100, 100, 50, label="Bed"),
        PlacedObject("2", ObjectKind.FURNITURE, 150, 100, 100, 50, label="Desk"),
    ]
    assert LayoutValidator(room, objects).validate()[0].startswith("CRITICAL: Bed overlaps Desk")


def test_touching_items_are_fine(room):
    objects = [item("a", 100, 100, 100, 50), item("b", 200, 100, 100, 50)]
    assert LayoutValidator(room, objects).validate() == []


def test_out_of_room(room):
    violations = LayoutValidator(room, [item("a", 380, 10, 50, 50)]).validate()
    assert violations == ["Bounds: furniture at (380cm, 10cm) extends outside the room"]


def test_out_of_room_in_other_unit(room):
    violations = LayoutValidator(room, [item("a", 380, 10, 50, 50)], unit="m").validate()
    assert violations == ["Bounds: furniture at (3.80m, 0.10m) extends outside the room"]


def test_opening_off_the_wall(room):
    violations = LayoutValidator(room, [door("d", 100, 100)]).validate()
    assert violations == ["Wall mount: door is not flush to any wall"]


def test_furniture_in_exclusion_zone(room):
    objects = [wall("w", 0, 150, 400, 10), item("chair", 20, 200, 50, 50)]
    violations = LayoutValidator(room, objects).validate()
    assert violations == ["Zone: furniture intrudes into the excluded bottom zone"]


def test_door_swing_blocked(room):
    objects = [door("d", 100, -10), item("cabinet", 120, 0, 50, 40)]
    violations = LayoutValidator(room, objects).validate()
    assert violations == ["Door swing: door swing blocked by furniture"]


def test_door_swing_clear_when_furniture_is_beside_it(room):
    # swing arc centred at x=145 with radius 90 ends at x=235
    objects = [door("d", 100, -10), item("cabinet", 240, 0, 50, 40)]
    assert LayoutValidator(room, objects).validate() == []


def test_bottom_door_swing(room):
    objects = [door("d", 100, 300), item("cabinet", 120, 260, 50, 40)]
    assert LayoutValidator(room, objects).validate() == [
        "Door swing: door swing blocked by furniture"
    ]


def test_detailed_report(room):
    objects = [
        item("a", 100, 100, 100, 50),
        item("b", 150, 100, 100, 50),
        item("c", 390, 10, 50, 50),
    ]
    report = LayoutValidator(room, objects).get_detailed_report()
    assert report["total_violations"] == 2
    assert report["score"] == 15
    assert len(report["critical_issues"]) == 1
    assert set(report["categories"]) == {"Overlaps", "Bounds"}
    assert report["zones"] == 0


def test_categorize():
    groups = categorize([
        "CRITICAL: a overlaps b (area: 10cm²)",
        "Zone: a intrudes into the excluded top zone",
        "Something else",
    ])
    assert groups == {
        "Overlaps": ["CRITICAL: a overlaps b (area: 10cm²)"],
        "Zones": ["Zone: a intrudes into the excluded top zone"],
        "Other": ["Something else"],
    }
