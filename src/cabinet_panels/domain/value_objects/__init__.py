"""Value objects for the cabinet domain.

This module provides immutable data types used throughout the panel
decomposition engine. All classes are re-exported from sub-modules for
convenience.
"""

from __future__ import annotations

# Core geometry and materials
from ._core_geometry import (
    Axis,
    ClearBox,
    Dimensions3D,
    MaterialType,
    Position3D,
)

# Panel roles and cabinet options
from ._panels import (
    CARCASS_ROLES,
    CutPiece,
    DistributionMode,
    HingeStyle,
    PanelRole,
    RoofStyle,
)

# 3D geometry for mesh consumers
from ._3d_geometry import BoundingBox3D

__all__ = [
    "Axis",
    "BoundingBox3D",
    "CARCASS_ROLES",
    "ClearBox",
    "CutPiece",
    "Dimensions3D",
    "DistributionMode",
    "HingeStyle",
    "MaterialType",
    "PanelRole",
    "Position3D",
    "RoofStyle",
]
