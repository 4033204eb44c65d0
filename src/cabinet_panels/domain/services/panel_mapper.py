"""Panel 3D mapping service.

Maps panels onto 3D bounding boxes for mesh consumers.
The engine already works in Y-up cabinet-local coordinates, so mapping is a
change of representation (centre and extents to minimum corner and sizes)
rather than a change of axes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..entities import Panel
from ..value_objects import BoundingBox3D, PanelRole

__all__ = ["DoorSwing", "Panel3DMapper"]


@dataclass(frozen=True)
class DoorSwing:
    """Rotation of an open door about its hinge edge.

    Attributes:
        pivot_x: X coordinate of the hinge axis.
        pivot_z: Z coordinate of the hinge axis.
        angle: Signed rotation about +Y in radians.
    """

    pivot_x: float
    pivot_z: float
    angle: float

    def apply(self, vertex: tuple[float, float, float]) -> tuple[float, float, float]:
        x, y, z = vertex
        dx = x - self.pivot_x
        dz = z - self.pivot_z
        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)
        return (
            self.pivot_x + dx * cos_a + dz * sin_a,
            y,
            self.pivot_z - dx * sin_a + dz * cos_a,
        )


class Panel3DMapper:
    """Maps panels to 3D bounding boxes.

    Coordinate system:
    - Origin: centre of the footprint at floor level
    - X: Width (left to right)
    - Y: Height (bottom to top)
    - Z: Depth (back to front)

    Args:
        door_open_angle: Angle in degrees by which doors are swung open
            about their hinge edge. 0 renders them closed.
    """

    def __init__(self, door_open_angle: float = 0.0) -> None:
        if not 0.0 <= door_open_angle <= 180.0:
            raise ValueError("Door open angle must be between 0 and 180 degrees")
        self.door_open_angle = door_open_angle

    def map_panel(self, panel: Panel) -> BoundingBox3D:
        """Convert a panel to its axis-aligned bounding box."""
        return BoundingBox3D.from_center(panel.center, panel.dimensions.as_tuple())

    def door_swing(self, panel: Panel) -> DoorSwing | None:
        """Rotation to apply to a door's vertices, or None when closed.

        Doors hinged on the left swing their right edge forward (+Z) and
        vice versa, pivoting on the back face of the hinge edge.
        """
        if panel.role is not PanelRole.DOOR or self.door_open_angle == 0.0:
            return None
        box = self.map_panel(panel)
        angle = math.radians(self.door_open_angle)
        if panel.hinge_side == "right":
            return DoorSwing(
                pivot_x=box.max_corner.x, pivot_z=box.origin.z, angle=angle
            )
        return DoorSwing(pivot_x=box.origin.x, pivot_z=box.origin.z, angle=-angle)
