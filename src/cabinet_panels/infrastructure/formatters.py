"""Output formatters for panel lists and cut lists."""

from __future__ import annotations

import json
from typing import Any

from cabinet_panels.domain import (
    CutList,
    CutListGenerator,
    CutPiece,
    MaterialType,
    Panel,
    PanelList,
)


class PanelListFormatter:
    """Formats panel lists for display, one row per physical panel."""

    def format(self, panel_list: PanelList) -> str:
        if not panel_list.panels:
            return "No panels."

        spec = panel_list.spec
        lines = [
            f"PANELS: {spec.width:g} x {spec.height:g} x {spec.depth:g} mm, "
            f"{spec.thickness:g} mm board",
            "=" * 88,
            f"{'Panel':<20} {'Role':<18} {'X':>8} {'Y':>8} {'Z':>8}   "
            f"{'Position (x, y, z)'}",
            "-" * 88,
        ]
        for panel in panel_list:
            d = panel.dimensions
            c = panel.center
            lines.append(
                f"{panel.label:<20} {panel.role.value:<18} "
                f"{d.x:>8.1f} {d.y:>8.1f} {d.z:>8.1f}   "
                f"({c.x:.1f}, {c.y:.1f}, {c.z:.1f})"
            )
        lines.append("-" * 88)
        lines.append(
            f"Total pieces: {panel_list.total_pieces}    "
            f"Cells: {panel_list.cell_count}"
        )
        return "\n".join(lines)


class CutListFormatter:
    """Formats cut lists as a table with whole-millimetre dimensions."""

    def format(self, cut_list: CutList) -> str:
        if not cut_list.pieces:
            return "No pieces in cut list."

        lines = [
            "CUT LIST",
            "=" * 70,
            f"{'Piece':<16} {'Length':>8} {'Width':>8} {'Thick':>6} {'Qty':>5}   "
            f"{'Material'}",
            "-" * 70,
        ]
        for piece in cut_list:
            length, width, thickness = piece.display_dimensions
            lines.append(
                f"{piece.label:<16} {length:>8} {width:>8} {thickness:>6} "
                f"{piece.quantity:>5}   {piece.material.display_name}"
            )
        lines.append("-" * 70)
        lines.append(f"{'TOTAL PIECES':<16} {'':>8} {'':>8} {'':>6} {cut_list.total_pieces:>5}")
        for material in MaterialType:
            area = cut_list.area_m2(material)
            if area:
                lines.append(f"{material.display_name + ' area':<30} {area:.2f} m²")
        return "\n".join(lines)


class JsonExporter:
    """Serializes a panel list and its cut list as JSON."""

    def __init__(self, cut_list_generator: CutListGenerator | None = None) -> None:
        self.cut_list_generator = cut_list_generator or CutListGenerator()

    def to_dict(
        self, panel_list: PanelList, cut_list: CutList | None = None
    ) -> dict[str, Any]:
        if cut_list is None:
            cut_list = self.cut_list_generator.generate(panel_list)
        spec = panel_list.spec
        clear = panel_list.clear
        return {
            "spec": {
                "width": spec.width,
                "height": spec.height,
                "depth": spec.depth,
                "thickness": spec.thickness,
                "roof_style": spec.roof_style.value,
                "has_kickplate": spec.has_kickplate,
                "kickplate_height": spec.kickplate_height,
                "has_backing": spec.has_backing,
                "distribution_mode": spec.distribution_mode.value,
                "primary_count": spec.primary_count,
                "secondary_counts": list(spec.secondary_counts),
                "has_doors": spec.has_doors,
                "hinge_style": spec.hinge_style.value,
                "door_count": spec.door_count,
            },
            "clear": {
                "width": clear.width,
                "height": clear.height,
                "depth": clear.depth,
                "left": clear.left,
                "bottom": clear.bottom,
                "depth_offset": clear.depth_offset,
            },
            "cells": [
                {
                    "index": cell.index,
                    "left": cell.left,
                    "bottom": cell.bottom,
                    "width": cell.width,
                    "height": cell.height,
                    "secondary_count": cell.secondary_count,
                    "secondary_gap": cell.secondary_gap,
                }
                for cell in panel_list.cells
            ],
            "panels": [self.panel_to_dict(panel) for panel in panel_list],
            "cut_list": [self.cut_piece_to_dict(piece) for piece in cut_list],
            "summary": {
                "total_pieces": panel_list.total_pieces,
                "cell_count": panel_list.cell_count,
                "by_role": {
                    role.value: count
                    for role, count in panel_list.count_by_role().items()
                },
                "area_m2": {
                    material.value: round(cut_list.area_m2(material), 4)
                    for material in cut_list.area_by_material
                },
            },
        }

    @staticmethod
    def panel_to_dict(panel: Panel) -> dict[str, Any]:
        result: dict[str, Any] = {
            "label": panel.label,
            "role": panel.role.value,
            "index": panel.index,
            "dimensions": dict(zip("xyz", panel.dimensions.as_tuple())),
            "center": dict(zip("xyz", panel.center.as_tuple())),
            "normal": panel.normal.value,
            "material": panel.material.value,
            "quantity": panel.quantity,
        }
        if panel.cell_index is not None:
            result["cell_index"] = panel.cell_index
        if panel.hinge_side is not None:
            result["hinge_side"] = panel.hinge_side
        return result

    @staticmethod
    def cut_piece_to_dict(piece: CutPiece) -> dict[str, Any]:
        length, width, thickness = piece.display_dimensions
        return {
            "label": piece.label,
            "role": piece.role.value,
            "length": length,
            "width": width,
            "thickness": thickness,
            "quantity": piece.quantity,
            "material": piece.material.value,
        }

    def export(self, panel_list: PanelList) -> str:
        """Export a panel list as a JSON string."""
        return json.dumps(self.to_dict(panel_list), indent=2)
