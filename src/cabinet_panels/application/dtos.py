"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cabinet_panels.domain import CabinetSpec, CutList, PanelList


@dataclass
class LayoutOutput:
    """Output DTO containing the generated layout results.

    On failure ``spec`` (when normalization already failed), ``panel_list``
    and ``cut_list`` are None and ``errors`` explains why; callers keep
    their last valid output.

    Attributes:
        spec: Normalized cabinet specification.
        panel_list: Ordered panels produced by the decomposition engine.
        cut_list: Consolidated cut list rows.
        errors: Human-readable error messages if generation failed.
        error_details: Structured context for each error (field, axis,
            level, cell index) for highlighting the offending input.
    """

    spec: CabinetSpec | None = None
    panel_list: PanelList | None = None
    cut_list: CutList | None = None
    errors: list[str] = field(default_factory=list)
    error_details: list[dict[str, Any]] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors and self.panel_list is not None
