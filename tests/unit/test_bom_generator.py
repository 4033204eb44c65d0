"""Unit tests for the Bill of Materials (BOM) generator.

Tests cover:
- BOM data model
- Text, CSV and JSON output
- File export and extension selection
"""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path

import pytest

from cabinet_panels.domain import MaterialType
from cabinet_panels.infrastructure.exporters.bom import BillOfMaterials, BomGenerator


class TestBillOfMaterials:
    def test_totals(self, wardrobe_panels) -> None:
        bom = BomGenerator(project_name="wardrobe").generate(wardrobe_panels)

        assert isinstance(bom, BillOfMaterials)
        assert bom.project_name == "wardrobe"
        assert bom.total_pieces == 10
        assert bom.area_m2(MaterialType.MDF) == pytest.approx(1.491663)


class TestBomGeneratorInit:
    def test_invalid_format(self) -> None:
        with pytest.raises(ValueError, match="Invalid output_format"):
            BomGenerator(output_format="xlsx")

    @pytest.mark.parametrize(
        ("output_format", "extension"),
        [("text", "txt"), ("csv", "csv"), ("json", "json")],
    )
    def test_file_extension(self, output_format: str, extension: str) -> None:
        assert BomGenerator(output_format=output_format).file_extension == extension


class TestTextFormat:
    def test_header_and_table(self, wardrobe_panels) -> None:
        text = BomGenerator(project_name="wardrobe").export_string(wardrobe_panels)

        lines = text.splitlines()
        assert lines[0] == "BILL OF MATERIALS: wardrobe"
        assert "CUT LIST" in lines
        assert "TOTAL PIECES" in text
        assert "MDF area" in text


class TestCsvFormat:
    def test_rows(self, wardrobe_panels) -> None:
        text = BomGenerator(output_format="csv").export_string(wardrobe_panels)

        rows = list(csv.reader(io.StringIO(text)))
        assert rows[0] == [
            "Piece",
            "Role",
            "Length",
            "Width",
            "Thickness",
            "Quantity",
            "Material",
        ]
        assert rows[1] == ["Side", "side", "1800", "500", "18", "2", "melamine"]
        assert rows[5] == ["Backing", "backing", "1697", "879", "3", "1", "mdf"]
        assert rows[-1] == ["TOTAL", "", "", "", "", "10", ""]
        assert len(rows) == 8


class TestJsonFormat:
    def test_structure(self, wardrobe_panels) -> None:
        text = BomGenerator(output_format="json", project_name="w").export_string(
            wardrobe_panels
        )

        data = json.loads(text)
        assert data["project_name"] == "w"
        assert data["total_pieces"] == 10
        assert len(data["pieces"]) == 6
        assert data["pieces"][-1] == {
            "label": "Shelf",
            "role": "primary_member",
            "length": 864,
            "width": 480,
            "thickness": 18,
            "quantity": 3,
            "material": "melamine",
        }
        assert data["area_m2"]["melamine"] == pytest.approx(4.081)
        assert data["area_m2"]["mdf"] == pytest.approx(1.4917)


class TestExport:
    def test_export_writes_file(self, tmp_path: Path, wardrobe_panels) -> None:
        generator = BomGenerator(output_format="csv")
        path = tmp_path / "bom.csv"

        generator.export(wardrobe_panels, path)

        assert path.read_text(encoding="utf-8") == generator.export_string(
            wardrobe_panels
        )
