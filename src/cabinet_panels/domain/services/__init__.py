"""Domain services for cabinet panel decomposition.

This package provides the decomposition pipeline and its consumers:
- Spec normalization and equal-gap spacing
- Carcass, distribution and door layout
- Panel list aggregation and the ``compute_panels`` entry point
- Cut list consolidation and 3D mapping
"""

from .carcass import CarcassBuilder, CarcassResult
from .cut_list import CutList, CutListGenerator
from .distribution import DistributionEngine, DistributionResult
from .doors import DOOR_REVEAL, DoorLayoutCalculator
from .panel_list import PanelDecompositionService, PanelListAggregator, compute_panels
from .panel_mapper import DoorSwing, Panel3DMapper
from .spacing import Spacing, equal_gap_spacing
from .spec_normalizer import DEFAULT_SPEC_VALUES, normalize_spec

__all__ = [
    "CarcassBuilder",
    "CarcassResult",
    "CutList",
    "CutListGenerator",
    "DEFAULT_SPEC_VALUES",
    "DOOR_REVEAL",
    "DistributionEngine",
    "DistributionResult",
    "DoorLayoutCalculator",
    "DoorSwing",
    "Panel3DMapper",
    "PanelDecompositionService",
    "PanelListAggregator",
    "Spacing",
    "compute_panels",
    "equal_gap_spacing",
    "normalize_spec",
]
