"""Core geometry and material value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MaterialType(str, Enum):
    """Board materials used in cabinet construction."""

    MELAMINE = "melamine"
    MDF = "mdf"

    @property
    def display_name(self) -> str:
        return "Melamine" if self is MaterialType.MELAMINE else "MDF"


class Axis(str, Enum):
    """Principal axes of the cabinet-local coordinate system.

    X runs left to right, Y is vertical (up), Z runs back to front.
    """

    X = "x"
    Y = "y"
    Z = "z"


@dataclass(frozen=True)
class Dimensions3D:
    """Immutable box extents in millimetres, one per principal axis."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        if self.x <= 0 or self.y <= 0 or self.z <= 0:
            raise ValueError("All dimensions must be positive")

    def along(self, axis: Axis) -> float:
        """Return the extent along the given axis."""
        return getattr(self, axis.value)

    @property
    def volume(self) -> float:
        """Volume in cubic millimetres."""
        return self.x * self.y * self.z

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Position3D:
    """3D position in cabinet-local coordinates.

    Origin is the horizontal centre of the cabinet footprint at floor level,
    so x and z may be negative.
    """

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class ClearBox:
    """Usable internal space left by the carcass.

    Attributes:
        width: Clear width between the side panels.
        height: Clear height between the floor top and the roof underside.
        depth: Depth available to internal members and recessed doors, after
            the backing clearance and any internal door recess.
        left: X coordinate of the inner face of the left side.
        bottom: Y coordinate of the top face of the floor.
        depth_offset: Z coordinate of the centre of the usable depth.
    """

    width: float
    height: float
    depth: float
    left: float
    bottom: float
    depth_offset: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def top(self) -> float:
        return self.bottom + self.height
