"""
Layout engine configuration

All distances are centimetres. The defaults below mirror the room planner
canvas; callers that need different values build their own LayoutConfig
and pass it into every engine call.
"""

from dataclasses import dataclass, fields, asdict

# ============================================================================
# DEFAULTS
# ============================================================================

# Outer wall thickness, doors/windows are this deep across the wall
WALL_THICKNESS_CM = 10

# How close a door/window must sit to a wall line to count as on it
FOOTPRINT_TOLERANCE_CM = 1

# How close an inner wall end must be to an outer wall to span the room
SPAN_TOLERANCE_CM = 5

# Free-spot solver
DEFAULT_ANCHOR = (20, 20)
HEURISTIC_MARGIN_CM = 10
GRID_STEP_CM = 20
RANDOM_ATTEMPTS = 100

# Wall-mount solver
WALL_STEP_CM = 10
WALL_CORNER_PADDING_CM = 5

# Validator
DOOR_SWING_RADIUS_CM = 90

# ============================================================================


@dataclass(frozen=True)
class LayoutConfig:
    """Engine constants passed explicitly into every call"""

    wall_thickness: float = WALL_THICKNESS_CM
    footprint_tolerance: float = FOOTPRINT_TOLERANCE_CM
    span_tolerance: float = SPAN_TOLERANCE_CM
    anchor_x: float = DEFAULT_ANCHOR[0]
    anchor_y: float = DEFAULT_ANCHOR[1]
    heuristic_margin: float = HEURISTIC_MARGIN_CM
    grid_step: float = GRID_STEP_CM
    random_attempts: int = RANDOM_ATTEMPTS
    wall_step: float = WALL_STEP_CM
    wall_corner_padding: float = WALL_CORNER_PADDING_CM
    door_swing_radius: float = DOOR_SWING_RADIUS_CM

    def __post_init__(self):
        if self.wall_thickness <= 0:
            raise ValueError(f"wall_thickness must be positive, got {self.wall_thickness}")
        if self.grid_step <= 0 or self.wall_step <= 0:
            raise ValueError("grid_step and wall_step must be positive")
        if self.random_attempts < 0:
            raise ValueError("random_attempts cannot be negative")

    @property
    def anchor(self):
        return (self.anchor_x, self.anchor_y)

    @classmethod
    def from_mapping(cls, values):
        """Build a config from a plain dict, rejecting unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown layout config keys: {', '.join(unknown)}")
        return cls(**values)

    def to_dict(self):
        return asdict(self)


DEFAULT_CONFIG = LayoutConfig()
