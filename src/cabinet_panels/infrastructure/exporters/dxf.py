"""DXF format exporter for the front elevation schematic.

Writes the same front projection as the SVG schematic to an R2010 DXF
drawing in millimetres, with one layer per panel role group so CAD users can
toggle the carcass, members and doors independently.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf
from ezdxf import units
from ezdxf.enums import TextEntityAlignment

from cabinet_panels.infrastructure.exporters.base import ExporterRegistry
from cabinet_panels.infrastructure.schematic_renderer import (
    SchematicRect,
    project_front,
)

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from cabinet_panels.domain.entities import PanelList


logger = logging.getLogger(__name__)


# Layer name -> ACI color
LAYERS: dict[str, int] = {
    "BACKING": 8,  # Gray
    "CARCASS": 7,  # White
    "KICKPLATE": 9,  # Light gray
    "MEMBERS": 5,  # Blue
    "DOORS": 2,  # Yellow
    "DIMENSIONS": 3,  # Green
    "LABELS": 4,  # Cyan
}

DIMENSION_OFFSET_MM = 60.0
TEXT_HEIGHT_MM = 20.0
LABEL_HEIGHT_MM = 12.0


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports the front schematic of a panel list to DXF.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, show_labels: bool = True, show_dimensions: bool = True) -> None:
        self.show_labels = show_labels
        self.show_dimensions = show_dimensions

    def export(self, panel_list: PanelList, path: Path) -> None:
        doc = self.build_document(panel_list)
        doc.saveas(path)
        logger.info(f"Exported schematic DXF to {path}")

    def export_string(self, panel_list: PanelList) -> str:
        """Export the schematic as DXF text."""
        doc = self.build_document(panel_list)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build_document(self, panel_list: PanelList) -> Drawing:
        """Create a DXF document holding the schematic of a panel list."""
        doc = ezdxf.new("R2010")
        doc.units = units.MM
        for name, color in LAYERS.items():
            doc.layers.add(name, color=color)

        msp = doc.modelspace()
        for rect in project_front(panel_list):
            self._draw_rect(msp, rect)
        if self.show_dimensions:
            spec = panel_list.spec
            self._draw_dimensions(msp, spec.width, spec.height)
        return doc

    def _draw_rect(self, msp: Modelspace, rect: SchematicRect) -> None:
        x0, y0 = rect.x, rect.y
        x1, y1 = rect.x + rect.width, rect.y + rect.height
        msp.add_lwpolyline(
            [(x0, y0), (x1, y0), (x1, y1), (x0, y1)],
            close=True,
            dxfattribs={"layer": rect.group},
        )
        if self.show_labels and rect.group in ("MEMBERS", "DOORS"):
            text = msp.add_text(
                rect.panel.label,
                height=LABEL_HEIGHT_MM,
                dxfattribs={"layer": "LABELS"},
            )
            text.set_placement(
                ((x0 + x1) / 2, (y0 + y1) / 2),
                align=TextEntityAlignment.MIDDLE_CENTER,
            )

    def _draw_dimensions(self, msp: Modelspace, width: float, height: float) -> None:
        """Draw overall width above and height left of the cabinet outline."""
        left = -width / 2
        right = width / 2
        top_line = height + DIMENSION_OFFSET_MM
        side_line = left - DIMENSION_OFFSET_MM
        attribs = {"layer": "DIMENSIONS"}

        msp.add_line((left, top_line), (right, top_line), dxfattribs=attribs)
        msp.add_line((left, height), (left, top_line), dxfattribs=attribs)
        msp.add_line((right, height), (right, top_line), dxfattribs=attribs)
        msp.add_line((side_line, 0), (side_line, height), dxfattribs=attribs)
        msp.add_line((left, 0), (side_line, 0), dxfattribs=attribs)
        msp.add_line((left, height), (side_line, height), dxfattribs=attribs)

        width_text = msp.add_text(
            f"{width:g}mm", height=TEXT_HEIGHT_MM, dxfattribs=attribs
        )
        width_text.set_placement(
            (0, top_line + TEXT_HEIGHT_MM),
            align=TextEntityAlignment.BOTTOM_CENTER,
        )
        height_text = msp.add_text(
            f"{height:g}mm",
            height=TEXT_HEIGHT_MM,
            dxfattribs={**attribs, "rotation": 90},
        )
        height_text.set_placement(
            (side_line - TEXT_HEIGHT_MM, height / 2),
            align=TextEntityAlignment.BOTTOM_CENTER,
        )
