"""Unit tests for panel list, cut list and JSON formatters."""

import json

import pytest

from cabinet_panels.domain import CutList, CutListGenerator, PanelList
from cabinet_panels.infrastructure import (
    CutListFormatter,
    JsonExporter,
    PanelListFormatter,
)


class TestPanelListFormatter:
    def test_header(self, wardrobe_panels) -> None:
        text = PanelListFormatter().format(wardrobe_panels)

        assert text.splitlines()[0] == "PANELS: 900 x 1800 x 500 mm, 18 mm board"

    def test_one_row_per_panel(self, wardrobe_panels) -> None:
        text = PanelListFormatter().format(wardrobe_panels)

        for panel in wardrobe_panels:
            assert panel.label in text
        assert "(-441.0, 900.0, 0.0)" in text
        assert "(0.0, 950.0, -232.0)" in text

    def test_footer(self, wardrobe_panels) -> None:
        text = PanelListFormatter().format(wardrobe_panels)

        assert text.splitlines()[-1] == "Total pieces: 10    Cells: 4"

    def test_empty(self, wardrobe_panels) -> None:
        empty = PanelList(
            spec=wardrobe_panels.spec, panels=(), clear=wardrobe_panels.clear
        )

        assert PanelListFormatter().format(empty) == "No panels."


class TestCutListFormatter:
    def test_rows(self, wardrobe_panels) -> None:
        cut_list = CutListGenerator().generate(wardrobe_panels)

        text = CutListFormatter().format(cut_list)

        lines = text.splitlines()
        assert lines[0] == "CUT LIST"
        side_row = next(line for line in lines if line.startswith("Side"))
        assert side_row.split() == ["Side", "1800", "500", "18", "2", "Melamine"]
        backing_row = next(line for line in lines if line.startswith("Backing"))
        assert backing_row.split() == ["Backing", "1697", "879", "3", "1", "MDF"]

    def test_totals(self, wardrobe_panels) -> None:
        text = CutListFormatter().format(CutListGenerator().generate(wardrobe_panels))

        total_row = next(line for line in text.splitlines() if "TOTAL PIECES" in line)
        assert total_row.split()[-1] == "10"
        assert "4.08 m²" in text
        assert "1.49 m²" in text

    def test_empty(self) -> None:
        assert CutListFormatter().format(CutList(pieces=())) == "No pieces in cut list."


class TestJsonExporter:
    """Tests for the JSON document of a panel list."""

    def test_top_level_keys(self, wardrobe_panels) -> None:
        data = JsonExporter().to_dict(wardrobe_panels)

        assert set(data) == {"spec", "clear", "cells", "panels", "cut_list", "summary"}

    def test_spec_section(self, wardrobe_panels) -> None:
        spec = JsonExporter().to_dict(wardrobe_panels)["spec"]

        assert spec["roof_style"] == "between"
        assert spec["distribution_mode"] == "horizontal"
        assert spec["primary_count"] == 3
        assert spec["secondary_counts"] == [0, 0, 0, 0]
        assert spec["kickplate_height"] == 100

    def test_panels(self, wardrobe_panels) -> None:
        panels = JsonExporter().to_dict(wardrobe_panels)["panels"]

        assert len(panels) == 10
        left = panels[0]
        assert left["label"] == "Left Side"
        assert left["role"] == "side"
        assert left["dimensions"] == {"x": 18, "y": 1800, "z": 500}
        assert left["center"] == {"x": -441, "y": 900, "z": 0}
        assert left["normal"] == "x"
        assert "cell_index" not in left
        assert "hinge_side" not in left

    def test_summary(self, wardrobe_panels) -> None:
        summary = JsonExporter().to_dict(wardrobe_panels)["summary"]

        assert summary["total_pieces"] == 10
        assert summary["cell_count"] == 4
        assert summary["by_role"]["primary_member"] == 3
        assert summary["area_m2"]["melamine"] == pytest.approx(4.081)

    def test_cut_list_uses_whole_millimetres(self, wardrobe_panels) -> None:
        cut_list = JsonExporter().to_dict(wardrobe_panels)["cut_list"]

        backing = next(row for row in cut_list if row["role"] == "backing")
        assert (backing["length"], backing["width"], backing["thickness"]) == (
            1697,
            879,
            3,
        )

    def test_export_is_valid_json(self, wardrobe_panels) -> None:
        text = JsonExporter().export(wardrobe_panels)

        assert json.loads(text)["clear"]["bottom"] == 118
