"""JSON exporter for the full panel list."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from cabinet_panels.infrastructure.exporters.base import ExporterRegistry
from cabinet_panels.infrastructure.formatters import JsonExporter

if TYPE_CHECKING:
    from cabinet_panels.domain.entities import PanelList

logger = logging.getLogger(__name__)


@ExporterRegistry.register("json")
class PanelListJsonExporter:
    """Exports the specification, clear box, cells, panels, cut list and
    summary counts as JSON for programmatic consumers.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self) -> None:
        self._exporter = JsonExporter()

    def export(self, panel_list: PanelList, path: Path) -> None:
        path.write_text(self.export_string(panel_list), encoding="utf-8")
        logger.info(f"Exported panel list JSON to {path}")

    def export_string(self, panel_list: PanelList) -> str:
        return self._exporter.export(panel_list)
