"""Integration tests for every export format from a single panel list.

Each exporter consumes the same PanelList, so the formats must agree on
what they describe: piece counts, role groups and overall size.
"""

import csv
import io
import json
from pathlib import Path

import ezdxf
import pytest
from stl import mesh

from cabinet_panels.application import ServiceFactory
from cabinet_panels.domain import compute_panels, normalize_spec


@pytest.fixture
def sideboard_panels():
    """Three-column sideboard with internal doors and one shelf per column."""
    return compute_panels(
        normalize_spec(
            {
                "width": 1600,
                "height": 800,
                "depth": 450,
                "thickness": 18,
                "roof_style": "over",
                "has_kickplate": True,
                "kickplate_height": 60,
                "has_backing": True,
                "distribution_mode": "vertical",
                "primary_count": 2,
                "secondary_counts": [1, 1, 1],
                "has_doors": True,
                "hinge_style": "internal",
                "door_count": 4,
            }
        )
    )


@pytest.fixture
def exported(tmp_path: Path, sideboard_panels) -> dict[str, Path]:
    manager = ServiceFactory().get_export_manager(tmp_path, project_name="sideboard")
    return manager.export_all(["stl", "svg", "dxf", "json", "bom"], sideboard_panels, "sideboard")


class TestOutputFormatsAgree:
    def test_sideboard_piece_count(self, sideboard_panels) -> None:
        # 2 sides, roof, floor, 2 kickplates, backing, 2 dividers, 3 shelves, 4 doors
        assert sideboard_panels.total_pieces == 16

    def test_stl_has_every_piece(self, exported, sideboard_panels) -> None:
        loaded = mesh.Mesh.from_file(str(exported["stl"]))

        assert len(loaded.vectors) == 12 * sideboard_panels.total_pieces

    def test_svg_has_every_piece(self, exported, sideboard_panels) -> None:
        svg = exported["svg"].read_text(encoding="utf-8")

        assert svg.count("<title>") == sideboard_panels.total_pieces
        assert svg.count('class="doors"') == 4

    def test_dxf_has_every_piece(self, exported, sideboard_panels) -> None:
        msp = ezdxf.readfile(exported["dxf"]).modelspace()

        assert len(msp.query("LWPOLYLINE")) == sideboard_panels.total_pieces
        assert len(msp.query('LWPOLYLINE[layer=="DOORS"]')) == 4
        assert len(msp.query('LWPOLYLINE[layer=="MEMBERS"]')) == 5

    def test_json_summary(self, exported, sideboard_panels) -> None:
        data = json.loads(exported["json"].read_text(encoding="utf-8"))

        assert data["summary"]["total_pieces"] == sideboard_panels.total_pieces
        assert data["summary"]["by_role"]["door"] == 4
        assert len(data["cells"]) == 3

    def test_bom_total(self, exported, sideboard_panels) -> None:
        text = exported["bom"].read_text(encoding="utf-8")

        assert text.startswith("BILL OF MATERIALS: sideboard")
        total_row = next(line for line in text.splitlines() if "TOTAL PIECES" in line)
        assert total_row.split()[-1] == str(sideboard_panels.total_pieces)

    def test_bom_csv_quantities_sum(self, sideboard_panels) -> None:
        from cabinet_panels.infrastructure.exporters import BomGenerator

        rows = list(
            csv.DictReader(
                io.StringIO(BomGenerator(output_format="csv").export_string(sideboard_panels))
            )
        )
        quantities = [int(row["Quantity"]) for row in rows if row["Piece"] != "TOTAL"]

        assert sum(quantities) == sideboard_panels.total_pieces

    def test_internal_doors_stay_inside_carcass(self, sideboard_panels) -> None:
        for panel in sideboard_panels:
            assert panel.max_corner.z <= 225 + 1e-9
