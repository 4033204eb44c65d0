"""Bill of Materials (BOM) exporter for panel lists.

The bill lists one row per group of identical pieces (see CutListGenerator),
the total piece count and the board area per material.

Output formats: text, csv, json
"""

from __future__ import annotations

import csv
import io
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from cabinet_panels.domain.services import CutList, CutListGenerator
from cabinet_panels.domain.value_objects import MaterialType
from cabinet_panels.infrastructure.exporters.base import ExporterRegistry
from cabinet_panels.infrastructure.formatters import CutListFormatter, JsonExporter

if TYPE_CHECKING:
    from cabinet_panels.domain.entities import PanelList


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BillOfMaterials:
    """Bill of materials for one cabinet.

    Attributes:
        project_name: Name printed in the header.
        cut_list: Consolidated pieces with their areas per material.
    """

    project_name: str
    cut_list: CutList

    @property
    def total_pieces(self) -> int:
        return self.cut_list.total_pieces

    def area_m2(self, material: MaterialType) -> float:
        return self.cut_list.area_m2(material)


@ExporterRegistry.register("bom")  # type: ignore[arg-type]
class BomGenerator:
    """Bill of Materials generator for panel lists.

    Attributes:
        format_name: "bom"
        file_extension: "txt", "csv" or "json" based on output_format
    """

    format_name: ClassVar[str] = "bom"

    def __init__(
        self,
        output_format: str = "text",
        project_name: str = "cabinet",
        cut_list_generator: CutListGenerator | None = None,
    ) -> None:
        """Initialize the BOM generator.

        Args:
            output_format: Output format - "text", "csv", or "json".
            project_name: Name shown in the BOM header.
            cut_list_generator: Optional generator for dependency injection.
        """
        if output_format not in ("text", "csv", "json"):
            raise ValueError(
                f"Invalid output_format: {output_format}. "
                "Must be 'text', 'csv' or 'json'"
            )
        self.output_format = output_format
        self.project_name = project_name
        self.cut_list_generator = cut_list_generator or CutListGenerator()
        self._file_extension = {
            "text": "txt",
            "csv": "csv",
            "json": "json",
        }[output_format]

    @property
    def file_extension(self) -> str:
        return self._file_extension

    def generate(self, panel_list: PanelList) -> BillOfMaterials:
        return BillOfMaterials(
            project_name=self.project_name,
            cut_list=self.cut_list_generator.generate(panel_list),
        )

    def export(self, panel_list: PanelList, path: Path) -> None:
        path.write_text(self.export_string(panel_list), encoding="utf-8")
        logger.info(f"Exported BOM to {path}")

    def export_string(self, panel_list: PanelList) -> str:
        """Generate the BOM in the configured output format."""
        bom = self.generate(panel_list)
        if self.output_format == "csv":
            return self.format_csv(bom)
        elif self.output_format == "json":
            return self.format_json(bom)
        return self.format_text(bom)

    def format_text(self, bom: BillOfMaterials) -> str:
        header = f"BILL OF MATERIALS: {bom.project_name}"
        return "\n".join(
            [header, "", CutListFormatter().format(bom.cut_list)]
        )

    def format_csv(self, bom: BillOfMaterials) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(
            ["Piece", "Role", "Length", "Width", "Thickness", "Quantity", "Material"]
        )
        for piece in bom.cut_list:
            length, width, thickness = piece.display_dimensions
            writer.writerow(
                [
                    piece.label,
                    piece.role.value,
                    length,
                    width,
                    thickness,
                    piece.quantity,
                    piece.material.value,
                ]
            )
        writer.writerow(["TOTAL", "", "", "", "", bom.total_pieces, ""])
        return output.getvalue()

    def format_json(self, bom: BillOfMaterials) -> str:
        data: dict[str, Any] = {
            "project_name": bom.project_name,
            "pieces": [
                JsonExporter.cut_piece_to_dict(piece) for piece in bom.cut_list
            ],
            "total_pieces": bom.total_pieces,
            "area_m2": {
                material.value: round(bom.area_m2(material), 4)
                for material in bom.cut_list.area_by_material
            },
        }
        return json.dumps(data, indent=2)
