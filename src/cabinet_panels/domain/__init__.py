"""Domain layer - panel decomposition engine."""

from .entities import CabinetSpec, CellLayout, CellSpec, Panel, PanelList
from .errors import (
    CabinetSpecError,
    GeometryOverflowError,
    InvalidDimensionError,
    InvalidOptionError,
)
from .services import (
    CutList,
    CutListGenerator,
    Panel3DMapper,
    PanelDecompositionService,
    compute_panels,
    normalize_spec,
)
from .value_objects import (
    BoundingBox3D,
    ClearBox,
    CutPiece,
    Dimensions3D,
    DistributionMode,
    HingeStyle,
    MaterialType,
    PanelRole,
    Position3D,
    RoofStyle,
)

__all__ = [
    "BoundingBox3D",
    "CabinetSpec",
    "CabinetSpecError",
    "CellLayout",
    "CellSpec",
    "ClearBox",
    "CutList",
    "CutListGenerator",
    "CutPiece",
    "Dimensions3D",
    "DistributionMode",
    "GeometryOverflowError",
    "HingeStyle",
    "InvalidDimensionError",
    "InvalidOptionError",
    "MaterialType",
    "Panel",
    "Panel3DMapper",
    "PanelDecompositionService",
    "PanelList",
    "PanelRole",
    "Position3D",
    "RoofStyle",
    "compute_panels",
    "normalize_spec",
]
