"""Panel roles and cabinet option enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._core_geometry import MaterialType


class PanelRole(str, Enum):
    """Role of a panel in the cabinet."""

    SIDE = "side"
    ROOF = "roof"
    FLOOR = "floor"
    KICKPLATE = "kickplate"
    BACKING = "backing"
    PRIMARY_MEMBER = "primary_member"
    SECONDARY_MEMBER = "secondary_member"
    DOOR = "door"

    @property
    def is_carcass(self) -> bool:
        """Check if the role belongs to the outer box."""
        return self in CARCASS_ROLES

    @property
    def is_internal(self) -> bool:
        return self in (PanelRole.PRIMARY_MEMBER, PanelRole.SECONDARY_MEMBER)


CARCASS_ROLES: frozenset[PanelRole] = frozenset(
    {
        PanelRole.SIDE,
        PanelRole.ROOF,
        PanelRole.FLOOR,
        PanelRole.KICKPLATE,
        PanelRole.BACKING,
    }
)


class RoofStyle(str, Enum):
    """How the roof panel joins the sides.

    Attributes:
        BETWEEN: Roof sits between the sides; sides run full height.
        OVER: Roof spans over the sides; sides are shortened by one thickness.
    """

    BETWEEN = "between"
    OVER = "over"


class DistributionMode(str, Enum):
    """Orientation of the primary internal members.

    Attributes:
        HORIZONTAL: Primary members are shelves stacked along the height;
            secondary members are vertical dividers inside each row.
        VERTICAL: Primary members are dividers spaced along the width;
            secondary members are sub-shelves inside each column.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class HingeStyle(str, Enum):
    """Door mounting convention.

    Attributes:
        LATERAL: Full overlay; doors cover the whole front face.
        CENTRAL: Half overlay; doors share a side panel at interior joins.
        INTERNAL: Inset; doors sit inside the carcass opening and push the
            internal members back.
    """

    LATERAL = "lateral"
    CENTRAL = "central"
    INTERNAL = "internal"


@dataclass(frozen=True)
class CutPiece:
    """A consolidated cut list row: identical pieces cut from sheet stock.

    Attributes:
        label: Display name of the piece group.
        role: Role shared by every piece in the group.
        length: Longer face dimension in millimetres.
        width: Shorter face dimension in millimetres.
        thickness: Board thickness in millimetres.
        quantity: Number of identical pieces.
        material: Board material.
    """

    label: str
    role: PanelRole
    length: float
    width: float
    thickness: float
    quantity: int
    material: MaterialType

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0 or self.thickness <= 0:
            raise ValueError("Cut piece dimensions must be positive")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def area(self) -> float:
        """Total face area for all pieces in this row, in square millimetres."""
        return self.length * self.width * self.quantity

    @property
    def display_dimensions(self) -> tuple[int, int, int]:
        """Length, width and thickness rounded to whole millimetres."""
        return (round(self.length), round(self.width), round(self.thickness))
