"""
roomlayout command line tool

Usage:
    roomlayout check layout.json                  # audit a layout
    roomlayout check layout.json --clearances     # ...and list free space per item
    roomlayout zones layout.json                  # list exclusion zones
    roomlayout place layout.json --type Sofa      # find a spot for a new item
    roomlayout place layout.json --type Door --wall left --output out.json
"""

import argparse
import logging
import sys

from .catalog import new_object
from .collision import colliding_ids
from .exceptions import LayoutError
from .layout_io import load_layout, save_layout
from .measurements import clearances
from .models import VALID_ROTATIONS, ObjectKind, Side
from .planner import LayoutPlanner, new_id
from .units import CM_PER_UNIT, format_dimensions, format_measurement
from .validator import LayoutValidator
from .zones import effective_bounds, usable_area, wall_span_zones

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="roomlayout",
        description="Place furniture, doors and windows in a room without overlaps",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging.")
    parser.add_argument(
        "--unit",
        choices=sorted(CM_PER_UNIT),
        default="cm",
        help="Unit for printed measurements (layouts are always cm).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Report overlaps and other violations.")
    check.add_argument("layout", help="Layout JSON file.")
    check.add_argument("--clearances", action="store_true",
                       help="Also list the free distance around each piece of furniture.")

    zones = sub.add_parser("zones", help="List zones cut off by spanning inner walls.")
    zones.add_argument("layout", help="Layout JSON file.")

    place = sub.add_parser("place", help="Find a free position for a new item.")
    place.add_argument("layout", help="Layout JSON file.")
    place.add_argument("--type", required=True, help="Item type, e.g. Sofa, Door, Window, Wall.")
    place.add_argument("--width", type=float, default=None, help="Width in cm (preset if omitted).")
    place.add_argument("--height", type=float, default=None, help="Height in cm (preset if omitted).")
    place.add_argument("--rotation", type=int, default=0, choices=VALID_ROTATIONS)
    place.add_argument("--wall", choices=[s.value for s in Side], default=None,
                       help="Preferred wall for doors and windows.")
    place.add_argument("--id", default=None, help="Id for the new item (random if omitted).")
    place.add_argument("--seed", type=int, default=None, help="Seed for the random fallback.")
    place.add_argument("--output", "-o", default=None, help="Write the updated layout here.")
    return parser


def cmd_check(args):
    layout = load_layout(args.layout)
    validator = LayoutValidator(layout.room, layout.objects, layout.config, unit=args.unit)
    report = validator.get_detailed_report()

    print("=" * 70)
    print(f" CHECK: {args.layout}")
    print("=" * 70)
    print(f"Room: {format_dimensions(layout.room.width, layout.room.height, args.unit)}")
    print(f"Items: {len(layout.objects)}")

    if args.clearances:
        print_clearances(layout, args.unit)

    if not report['total_violations']:
        print("\n✓ No violations found.")
        return 0

    print(f"\n{report['total_violations']} violation(s), score {report['score']}")
    for category, violations in report['categories'].items():
        print(f"\n  {category} ({len(violations)}):")
        for v in violations:
            print(f"    • {v}")
    return 1 if report['critical_issues'] else 0


def print_clearances(layout, unit):
    print("\nClearances (left / right / top / bottom):")
    for obj in layout.objects:
        if obj.kind is not ObjectKind.FURNITURE:
            continue
        free = clearances(obj, layout.objects, layout.room, layout.config)
        sides = " / ".join(
            format_measurement(free[s], unit) for s in (Side.LEFT, Side.RIGHT, Side.TOP, Side.BOTTOM)
        )
        print(f"  {obj.name}: {sides}")


def cmd_zones(args):
    layout = load_layout(args.layout)
    zones = wall_span_zones(layout.objects, layout.room, layout.config)

    def fmt(cm):
        return format_measurement(cm, args.unit)

    if not zones:
        print("No inner wall spans the room.")
        return 0

    for zone in zones:
        print(f"{zone.side.value:<6} wall={zone.wall_id} at ({fmt(zone.x)}, {fmt(zone.y)}) "
              f"size {format_dimensions(zone.width, zone.height, args.unit)}")

    bounds = effective_bounds(layout.room, zones)
    print(f"Effective bounds: x {fmt(bounds.min_x)}..{fmt(bounds.max_x)}, "
          f"y {fmt(bounds.min_y)}..{fmt(bounds.max_y)}")
    print(f"Usable area: {usable_area(layout.room, zones) / 10000:.2f}m²")
    return 0


def cmd_place(args):
    layout = load_layout(args.layout)
    planner = LayoutPlanner(layout.room, layout.config, rng=args.seed)

    if args.id is not None and any(o.id == args.id for o in layout.objects):
        raise LayoutError(f"Item id {args.id!r} is already in {args.layout}")
    item = new_object(args.type, args.id or new_id(), args.width, args.height, args.rotation)

    placed = planner.place(item, layout.objects, Side(args.wall) if args.wall else None)
    print(f"✓ {placed.name} ({format_dimensions(placed.width, placed.height, args.unit)}) "
          f"at ({format_measurement(placed.x, args.unit)}, {format_measurement(placed.y, args.unit)})")

    if not planner.is_legal(placed, layout.objects):
        hit = colliding_ids(placed, layout.objects, config=layout.config, room=layout.room)
        if hit:
            print(f"⚠️  Room is full, the new item overlaps {', '.join(hit)}")
        else:
            print("⚠️  Room is full, the new item does not fit inside the room")

    if args.output:
        save_layout(args.output, layout.room, layout.objects + [placed], layout.config)
        logger.info("Wrote %s", args.output)
    return 0


COMMANDS = {
    "check": cmd_check,
    "zones": cmd_zones,
    "place": cmd_place,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        return COMMANDS[args.command](args)
    except ValueError as e:
        # LayoutError and bad catalog input alike
        print(f"❌ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
