"""Errors raised at the I/O and planner seams of the layout engine."""


class LayoutError(ValueError):
    """Base class for layout problems the caller must resolve"""


class LayoutFileError(LayoutError):
    """A layout snapshot file could not be read or is malformed"""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class WallPlacementError(LayoutError):
    """No wall has room for a door or window of the requested length"""

    def __init__(self, length, room):
        self.length = length
        self.room = room
        super().__init__(
            f"No free wall segment for a {length:g}cm opening in a "
            f"{room.width:g}×{room.height:g}cm room"
        )
