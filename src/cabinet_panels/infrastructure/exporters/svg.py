"""SVG exporter for front elevation schematics."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from cabinet_panels.infrastructure.exporters.base import ExporterRegistry
from cabinet_panels.infrastructure.schematic_renderer import SchematicRenderer

if TYPE_CHECKING:
    from cabinet_panels.domain.entities import PanelList


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for the 2D front schematic.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        scale: float = 0.3,
        show_dimensions: bool = True,
        show_cells: bool = False,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            scale: Pixels per millimetre (default 0.3).
            show_dimensions: Whether to draw overall dimension lines.
            show_cells: Whether to label cells with their clear size.
        """
        self.renderer = SchematicRenderer(
            scale=scale,
            show_dimensions=show_dimensions,
            show_cells=show_cells,
        )

    def export(self, panel_list: PanelList, path: Path) -> None:
        path.write_text(self.export_string(panel_list), encoding="utf-8")

    def export_string(self, panel_list: PanelList) -> str:
        return self.renderer.render_svg(panel_list)
