import json

import pytest

from roomlayout.cli import main


def write_layout(tmp_path, items, name="layout.json"):
    path = tmp_path / name
    path.write_text(json.dumps({"room": {"width": 400, "height": 300}, "items": items}))
    return path


def test_check_clean(tmp_path, capsys):
    path = write_layout(tmp_path, [
        {"id": "sofa", "type": "Sofa", "x": 20, "y": 200, "width": 200, "height": 90},
    ])
    assert main(["check", str(path)]) == 0
    assert "No violations found" in capsys.readouterr().out


def test_check_overlap_fails(tmp_path, capsys):
    path = write_layout(tmp_path, [
        {"id": "a", "type": "Bed", "x": 20, "y": 20, "width": 160, "height": 200},
        {"id": "b", "type": "Desk", "x": 100, "y": 20, "width": 120, "height": 60},
    ])
    assert main(["check", str(path)]) == 1
    out = capsys.readouterr().out
    assert "Overlaps (1)" in out
    assert "Bed overlaps Desk" in out


def test_zones(tmp_path, capsys):
    path = write_layout(tmp_path, [
        {"id": "w", "type": "Wall", "x": 0, "y": 150, "width": 400, "height": 10},
    ])
    assert main(["--unit", "m", "zones", str(path)]) == 0
    out = capsys.readouterr().out
    assert "bottom" in out
    assert "4.00m × 1.40m" in out
    assert "Usable area: 6.40m²" in out


def test_zones_none(tmp_path, capsys):
    path = write_layout(tmp_path, [])
    assert main(["zones", str(path)]) == 0
    assert "No inner wall" in capsys.readouterr().out


def test_place_writes_output(tmp_path, capsys):
    path = write_layout(tmp_path, [
        {"id": "sofa", "type": "Sofa", "x": 20, "y": 20, "width": 200, "height": 90},
    ])
    out_path = tmp_path / "out.json"
    code = main(["place", str(path), "--type", "Armchair", "--id", "chair",
                 "--output", str(out_path)])
    assert code == 0
    assert "Armchair" in capsys.readouterr().out

    items = json.loads(out_path.read_text())["items"]
    chair = next(i for i in items if i["id"] == "chair")
    assert (chair["x"], chair["y"]) == (230, 20)


def test_place_door_on_wall(tmp_path, capsys):
    path = write_layout(tmp_path, [])
    assert main(["place", str(path), "--type", "Door", "--wall", "right"]) == 0
    assert "(400cm, 5cm)" in capsys.readouterr().out


def test_place_door_with_no_room(tmp_path, capsys):
    path = write_layout(tmp_path, [])
    assert main(["place", str(path), "--type", "Door", "--width", "600"]) == 1
    assert "No free wall segment" in capsys.readouterr().err


def test_unknown_type_without_size(tmp_path, capsys):
    path = write_layout(tmp_path, [])
    assert main(["place", str(path), "--type", "Hammock"]) == 1
    assert "No preset" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(["check", str(tmp_path / "nope.json")]) == 1
    assert "not found" in capsys.readouterr().err


def test_requires_command():
    with pytest.raises(SystemExit):
        main([])


def test_check_directory(tmp_path, capsys):
    assert main(["check", str(tmp_path)]) == 1
    assert "directory" in capsys.readouterr().err


def test_check_items_not_a_list(tmp_path, capsys):
    path = tmp_path / "layout.json"
    path.write_text(json.dumps({"room": {"width": 400, "height": 300}, "items": 5}))
    assert main(["check", str(path)]) == 1
    assert "must be a list" in capsys.readouterr().err


def test_check_clearances(tmp_path, capsys):
    path = write_layout(tmp_path, [
        {"id": "sofa", "type": "Sofa", "x": 20, "y": 200, "width": 200, "height": 90},
        {"id": "d", "type": "Door", "x": 300, "y": -10, "width": 90, "height": 10},
    ])
    assert main(["check", str(path), "--clearances"]) == 0
    out = capsys.readouterr().out
    assert "Sofa: 20cm / 180cm / 200cm / 10cm" in out
    assert "Door:" not in out


def test_place_rejects_existing_id(tmp_path, capsys):
    path = write_layout(tmp_path, [
        {"id": "sofa", "type": "Sofa", "x": 20, "y": 20, "width": 200, "height": 90},
    ])
    out_path = tmp_path / "out.json"
    code = main(["place", str(path), "--type", "Chair", "--id", "sofa", "-o", str(out_path)])
    assert code == 1
    assert "'sofa' is already in" in capsys.readouterr().err
    assert not out_path.exists()


def test_place_in_full_room_names_overlaps(tmp_path, capsys):
    path = write_layout(tmp_path, [
        {"id": "block", "type": "Counter", "x": 0, "y": 0, "width": 400, "height": 300},
    ])
    assert main(["place", str(path), "--type", "Chair", "--id", "chair", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "at (20cm, 20cm)" in out
    assert "overlaps block" in out
