"""Application commands (use cases) for cabinet panel generation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from cabinet_panels.application.config.adapter import config_to_raw
from cabinet_panels.application.config.schema import CabinetConfiguration
from cabinet_panels.domain import (
    CabinetSpecError,
    CutListGenerator,
    PanelDecompositionService,
    normalize_spec,
)

from .dtos import LayoutOutput

logger = logging.getLogger(__name__)


class GenerateLayoutCommand:
    """Command to generate the panel list and cut list for a cabinet.

    Specification and geometry errors are captured in the returned
    LayoutOutput rather than raised.
    """

    def __init__(
        self,
        decomposition_service: PanelDecompositionService | None = None,
        cut_list_generator: CutListGenerator | None = None,
    ) -> None:
        self.decomposition_service = decomposition_service or PanelDecompositionService()
        self.cut_list_generator = cut_list_generator or CutListGenerator()

    def execute(self, raw: Mapping[str, Any]) -> LayoutOutput:
        """Execute the layout generation command.

        Args:
            raw: Loosely typed cabinet parameters, as accepted by
                ``normalize_spec``.

        Returns:
            LayoutOutput with the spec, panel list and cut list, or with
            errors describing why generation failed.
        """
        output = LayoutOutput()
        try:
            output.spec = normalize_spec(raw)
            output.panel_list = self.decomposition_service.compute(output.spec)
        except CabinetSpecError as e:
            logger.debug(f"Layout generation failed: {e.error_type}: {e}")
            output.panel_list = None
            output.errors.append(str(e))
            output.error_details.append(e.details())
            return output

        output.cut_list = self.cut_list_generator.generate(output.panel_list)
        return output

    def execute_config(self, config: CabinetConfiguration) -> LayoutOutput:
        """Execute the command for a validated configuration."""
        return self.execute(config_to_raw(config))
