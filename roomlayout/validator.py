"""
Layout validator

Audits a snapshot of a room for problems the solvers are meant to avoid:
overlaps, furniture outside the room, openings that are not on a wall,
objects inside an exclusion zone and door swings that are blocked.
Returns human readable violation strings, like the solvers' log output.
"""

from __future__ import annotations

from shapely.geometry import Point, box

from .config import DEFAULT_CONFIG
from .geometry import effective_footprint, fits_in_room, overlap_area, to_polygon
from .models import ObjectKind, Side
from .units import format_measurement
from .wall_mount import wall_of
from .zones import rectangle_overlaps_zone, wall_span_zones

CATEGORIES = (
    ('Overlaps', 'CRITICAL'),
    ('Bounds', 'Bounds'),
    ('Wall mount', 'Wall mount'),
    ('Zones', 'Zone'),
    ('Door', 'Door swing'),
)


class LayoutValidator:
    """Validates one room snapshot"""

    def __init__(self, room, objects, config=DEFAULT_CONFIG, unit='cm'):
        self.room = room
        self.objects = list(objects)
        self.config = config
        self.unit = unit

    def validate(self):
        """Main validation - returns violations list"""
        violations = []

        # 1. Overlaps (CRITICAL)
        violations.extend(self._check_overlaps())

        # 2. Furniture and walls inside the room
        violations.extend(self._check_bounds())

        # 3. Doors and windows flush to a wall
        violations.extend(self._check_wall_mounting())

        # 4. Nothing inside a zone cut off by an inner wall
        violations.extend(self._check_zones())

        # 5. Door swing arcs clear
        violations.extend(self._check_door_swing())

        return violations

    def _footprint(self, obj):
        return effective_footprint(obj, self.config, self.room)

    def _fmt(self, cm):
        return format_measurement(cm, self.unit)

    def _check_overlaps(self):
        violations = []
        rects = [(obj, self._footprint(obj)) for obj in self.objects]

        for i, (obj1, rect1) in enumerate(rects):
            for obj2, rect2 in rects[i + 1:]:
                area = overlap_area(rect1, rect2)
                if area > 0:
                    violations.append(
                        f"CRITICAL: {obj1.name} overlaps {obj2.name} (area: {area:.0f}cm²)"
                    )

        return violations

    def _check_bounds(self):
        violations = []
        for obj in self.objects:
            if obj.kind.is_wall_mounted:
                continue
            rect = self._footprint(obj)
            if not fits_in_room(rect, self.room):
                violations.append(
                    f"Bounds: {obj.name} at ({self._fmt(rect.x)}, {self._fmt(rect.y)}) "
                    f"extends outside the room"
                )
        return violations

    def _check_wall_mounting(self):
        violations = []
        for obj in self.objects:
            if obj.kind.is_wall_mounted and wall_of(obj, self.room, self.config) is None:
                violations.append(f"Wall mount: {obj.name} is not flush to any wall")
        return violations

    def _check_zones(self):
        violations = []
        zones = wall_span_zones(self.objects, self.room, self.config)
        if not zones:
            return violations

        for obj in self.objects:
            if obj.kind is not ObjectKind.FURNITURE:
                continue
            rect = self._footprint(obj)
            for zone in zones:
                if not rectangle_overlaps_zone(rect, [zone]):
                    continue
                violations.append(
                    f"Zone: {obj.name} intrudes into the excluded {zone.side.value} zone"
                )
        return violations

    def _check_door_swing(self):
        """Door swing arc must be clear of furniture"""
        violations = []
        radius = self.config.door_swing_radius

        for door in self.objects:
            if door.kind is not ObjectKind.DOOR:
                continue
            side = wall_of(door, self.room, self.config)
            if side is None:
                continue

            swing = self._get_door_swing_zone(door, side, radius)
            blocking = [
                obj.name for obj in self.objects
                if obj.kind in (ObjectKind.FURNITURE, ObjectKind.WALL)
                and swing.intersection(to_polygon(self._footprint(obj))).area > 0
            ]
            if blocking:
                violations.append(
                    f"Door swing: {door.name} swing blocked by {', '.join(blocking)}"
                )

        return violations

    def _get_door_swing_zone(self, door, side, radius):
        """Quarter-disc the door sweeps into the room"""
        width, height = self.room.width, self.room.height
        mid = door.x + door.width / 2 if side.is_horizontal else door.y + door.width / 2

        if side == Side.TOP:
            center, room_half = (mid, 0), box(0, 0, width, radius)
        elif side == Side.BOTTOM:
            center, room_half = (mid, height), box(0, height - radius, width, height)
        elif side == Side.LEFT:
            center, room_half = (0, mid), box(0, 0, radius, height)
        else:
            center, room_half = (width, mid), box(width - radius, 0, width, height)

        return Point(center).buffer(radius).intersection(room_half)

    def get_layout_score(self):
        """Weighted violation score (lower is better)"""
        score = 0
        for v in self.validate():
            if v.startswith('CRITICAL'):
                score += 10
            elif v.startswith(('Bounds', 'Wall mount')):
                score += 5
            elif v.startswith('Zone'):
                score += 3
            else:
                score += 1
        return score

    def get_detailed_report(self):
        violations = self.validate()
        return {
            'total_violations': len(violations),
            'score': self.get_layout_score(),
            'critical_issues': [v for v in violations if v.startswith('CRITICAL')],
            'categories': categorize(violations),
            'zones': len(wall_span_zones(self.objects, self.room, self.config)),
        }


def categorize(violations):
    """Group violations by category, dropping empty ones"""
    groups = {name: [] for name, _ in CATEGORIES}
    groups['Other'] = []

    for v in violations:
        for name, prefix in CATEGORIES:
            if v.startswith(prefix + ':'):
                groups[name].append(v)
                break
        else:
            groups['Other'].append(v)

    return {k: v for k, v in groups.items() if v}
