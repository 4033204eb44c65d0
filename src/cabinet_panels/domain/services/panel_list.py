"""Panel list aggregation and the decomposition pipeline entry point."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..entities import CabinetSpec, Panel, PanelList
from .carcass import CarcassBuilder, CarcassResult
from .distribution import DistributionEngine, DistributionResult
from .doors import DoorLayoutCalculator

__all__ = [
    "PanelDecompositionService",
    "PanelListAggregator",
    "compute_panels",
]

logger = logging.getLogger(__name__)


class PanelListAggregator:
    """Concatenates component panels in the fixed emission order.

    Order: carcass (sides, roof, floor, kickplates, backing), primary
    members, secondary members grouped by cell, doors left to right.
    """

    def aggregate(
        self,
        spec: CabinetSpec,
        carcass: CarcassResult,
        distribution: DistributionResult,
        doors: Sequence[Panel] = (),
    ) -> PanelList:
        panels = (
            carcass.panels
            + distribution.primary
            + distribution.secondary
            + tuple(doors)
        )
        return PanelList(
            spec=spec,
            panels=panels,
            clear=carcass.clear,
            cells=distribution.cells,
        )


class PanelDecompositionService:
    """Runs the full carcass, distribution and door pipeline.

    The service holds no state between calls; every computation is a pure
    function of the specification, so a single instance can be shared.

    Example:
        >>> from cabinet_panels.domain.services import (
        ...     PanelDecompositionService, normalize_spec,
        ... )
        >>> spec = normalize_spec({
        ...     "width": 900, "height": 1800, "depth": 500, "thickness": 18,
        ...     "primary_count": 3,
        ... })
        >>> panel_list = PanelDecompositionService().compute(spec)
        >>> panel_list.total_pieces
        7
    """

    def __init__(
        self,
        carcass_builder: CarcassBuilder | None = None,
        distribution_engine: DistributionEngine | None = None,
        door_calculator: DoorLayoutCalculator | None = None,
        aggregator: PanelListAggregator | None = None,
    ) -> None:
        self.carcass_builder = carcass_builder or CarcassBuilder()
        self.distribution_engine = distribution_engine or DistributionEngine()
        self.door_calculator = door_calculator or DoorLayoutCalculator()
        self.aggregator = aggregator or PanelListAggregator()

    def compute(self, spec: CabinetSpec) -> PanelList:
        """Decompose a specification into its ordered panel list.

        Args:
            spec: Normalized cabinet specification.

        Returns:
            The complete PanelList.

        Raises:
            GeometryOverflowError: If any level cannot fit its members.
        """
        carcass = self.carcass_builder.build(spec)
        distribution = self.distribution_engine.distribute(spec, carcass.clear)
        doors: list[Panel] = []
        if spec.has_doors:
            doors = self.door_calculator.layout(spec, carcass)

        panel_list = self.aggregator.aggregate(spec, carcass, distribution, doors)
        logger.debug(
            f"Computed {panel_list.total_pieces} panels for "
            f"{spec.width:g}x{spec.height:g}x{spec.depth:g} cabinet"
        )
        return panel_list


_default_service = PanelDecompositionService()


def compute_panels(spec: CabinetSpec) -> PanelList:
    """Compute the ordered panel list for a normalized specification."""
    return _default_service.compute(spec)
