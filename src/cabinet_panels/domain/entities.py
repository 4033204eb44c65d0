"""Domain entities for cabinet panel decomposition."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from .value_objects import (
    Axis,
    ClearBox,
    Dimensions3D,
    DistributionMode,
    HingeStyle,
    MaterialType,
    PanelRole,
    Position3D,
    RoofStyle,
)


@dataclass(frozen=True)
class CellSpec:
    """One cell created by the primary members.

    Attributes:
        index: Position of the cell along the primary axis (0 = bottom or left).
        secondary_count: Number of secondary members subdividing this cell.
    """

    index: int
    secondary_count: int = 0

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("Cell index cannot be negative")
        if self.secondary_count < 0:
            raise ValueError("Secondary count cannot be negative")


@dataclass(frozen=True)
class CabinetSpec:
    """Immutable, normalized cabinet specification.

    Built by ``normalize_spec`` from raw input; the internal subdivision is a
    depth-2 tree: ``cells`` holds one entry per space created by the primary
    members, each owning its secondary member count.

    Attributes:
        width: Overall width in millimetres.
        height: Overall height in millimetres.
        depth: Overall depth in millimetres.
        thickness: Board thickness of the carcass, members and doors.
        roof_style: Whether the roof sits between or over the sides.
        has_kickplate: Whether the cabinet stands on a kickplate plinth.
        kickplate_height: Plinth height; meaningful only with a kickplate.
        has_backing: Whether a rear MDF panel is fitted.
        distribution_mode: Orientation of the primary members.
        cells: Cells created by the primary members, in ascending order.
        has_doors: Whether doors are fitted.
        hinge_style: Door mounting convention.
        door_count: Number of doors; meaningful only with doors.
    """

    width: float
    height: float
    depth: float
    thickness: float
    roof_style: RoofStyle = RoofStyle.BETWEEN
    has_kickplate: bool = False
    kickplate_height: float = 0.0
    has_backing: bool = False
    distribution_mode: DistributionMode = DistributionMode.HORIZONTAL
    cells: tuple[CellSpec, ...] = (CellSpec(index=0),)
    has_doors: bool = False
    hinge_style: HingeStyle = HingeStyle.LATERAL
    door_count: int = 1

    def __post_init__(self) -> None:
        if not self.cells:
            raise ValueError("A cabinet has at least one cell")
        for expected, cell in enumerate(self.cells):
            if cell.index != expected:
                raise ValueError("Cells must be indexed contiguously from 0")

    @property
    def primary_count(self) -> int:
        """Number of primary members (shelves or dividers)."""
        return len(self.cells) - 1

    @property
    def secondary_counts(self) -> tuple[int, ...]:
        return tuple(cell.secondary_count for cell in self.cells)

    @property
    def effective_kickplate_height(self) -> float:
        """Kickplate height, or 0 when the cabinet has no kickplate."""
        return self.kickplate_height if self.has_kickplate else 0.0

    @property
    def side_height(self) -> float:
        if self.roof_style is RoofStyle.OVER:
            return self.height - self.thickness
        return self.height

    @property
    def has_internal_doors(self) -> bool:
        return self.has_doors and self.hinge_style is HingeStyle.INTERNAL


@dataclass(frozen=True)
class Panel:
    """A rectangular panel placed in the cabinet.

    Panels are thin axis-aligned boxes: the extent along ``normal`` is the
    board thickness and the other two extents are the face size.

    Attributes:
        role: Role of the panel in the cabinet.
        dimensions: Extents along X, Y and Z in millimetres.
        center: Centroid in cabinet-local coordinates.
        material: Board material.
        normal: Axis along which the board thickness lies.
        label: Human-readable name, unique within a panel list.
        quantity: Number of identical pieces this descriptor stands for.
        index: 1-based position within its role group.
        cell_index: Owning cell for secondary members.
        hinge_side: Hinge edge ("left" or "right") for doors.
    """

    role: PanelRole
    dimensions: Dimensions3D
    center: Position3D
    material: MaterialType
    normal: Axis
    label: str
    quantity: int = 1
    index: int = 1
    cell_index: int | None = None
    hinge_side: str | None = None

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def thickness(self) -> float:
        return self.dimensions.along(self.normal)

    @property
    def face_size(self) -> tuple[float, float]:
        """The two face extents, in axis order, excluding the thickness."""
        return tuple(  # type: ignore[return-value]
            self.dimensions.along(axis) for axis in Axis if axis is not self.normal
        )

    @property
    def cut_length(self) -> float:
        """Longer face dimension, as listed in the cut list."""
        return max(self.face_size)

    @property
    def cut_width(self) -> float:
        """Shorter face dimension, as listed in the cut list."""
        return min(self.face_size)

    @property
    def volume(self) -> float:
        return self.dimensions.volume

    @property
    def min_corner(self) -> Position3D:
        return Position3D(
            self.center.x - self.dimensions.x / 2,
            self.center.y - self.dimensions.y / 2,
            self.center.z - self.dimensions.z / 2,
        )

    @property
    def max_corner(self) -> Position3D:
        return Position3D(
            self.center.x + self.dimensions.x / 2,
            self.center.y + self.dimensions.y / 2,
            self.center.z + self.dimensions.z / 2,
        )


@dataclass(frozen=True)
class CellLayout:
    """Resolved placement of a cell in the front elevation.

    Attributes:
        index: Cell index along the primary axis.
        left: X coordinate of the cell's left edge.
        bottom: Y coordinate of the cell's bottom edge.
        width: Clear width of the cell.
        height: Clear height of the cell.
        secondary_count: Number of secondary members inside the cell.
        secondary_gap: Clear size of each sub-space inside the cell.
    """

    index: int
    left: float
    bottom: float
    width: float
    height: float
    secondary_count: int
    secondary_gap: float


@dataclass(frozen=True)
class PanelList:
    """Ordered panel collection produced for one cabinet specification.

    This is the only artifact handed to the mesh, schematic and cut list
    consumers.
    """

    spec: CabinetSpec
    panels: tuple[Panel, ...]
    clear: ClearBox
    cells: tuple[CellLayout, ...] = ()

    def __iter__(self):
        return iter(self.panels)

    def __len__(self) -> int:
        return len(self.panels)

    @property
    def total_pieces(self) -> int:
        """Total physical piece count (sum of quantities)."""
        return sum(panel.quantity for panel in self.panels)

    @property
    def cell_count(self) -> int:
        return self.spec.primary_count + 1

    def by_role(self, role: PanelRole) -> list[Panel]:
        return [panel for panel in self.panels if panel.role is role]

    def count_by_role(self) -> dict[PanelRole, int]:
        """Piece count per role, in panel list order."""
        counts: Counter[PanelRole] = Counter()
        for panel in self.panels:
            counts[panel.role] += panel.quantity
        return dict(counts)
