"""Cut list generation service.

Consolidates the physical panels of a PanelList into cut list rows. Panels
are grouped by role, material and dimensions; dimensions are compared after
rounding to a tenth of a millimetre so float noise from the spacing
arithmetic never splits a group.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..entities import Panel, PanelList
from ..value_objects import CutPiece, DistributionMode, MaterialType, PanelRole

__all__ = ["CutList", "CutListGenerator"]

# Precision (decimal places) used when matching panel dimensions.
GROUPING_PRECISION = 1

_ROLE_LABELS: dict[PanelRole, str] = {
    PanelRole.SIDE: "Side",
    PanelRole.ROOF: "Roof",
    PanelRole.FLOOR: "Floor",
    PanelRole.KICKPLATE: "Kickplate",
    PanelRole.BACKING: "Backing",
    PanelRole.DOOR: "Door",
}


@dataclass(frozen=True)
class CutList:
    """Cut list rows plus summary totals."""

    pieces: tuple[CutPiece, ...]
    area_by_material: dict[MaterialType, float] = field(default_factory=dict)

    def __iter__(self):
        return iter(self.pieces)

    def __len__(self) -> int:
        return len(self.pieces)

    @property
    def total_pieces(self) -> int:
        return sum(piece.quantity for piece in self.pieces)

    def area_m2(self, material: MaterialType) -> float:
        """Face area for a material in square metres."""
        return self.area_by_material.get(material, 0.0) / 1_000_000


class CutListGenerator:
    """Generates consolidated cut lists from panel lists."""

    def generate(self, panel_list: PanelList) -> CutList:
        """Group identical panels into cut list rows.

        Rows appear in the order their first panel appears in the panel
        list, so the cut list follows the carcass, members, doors order.

        Args:
            panel_list: Panel list from the decomposition engine.

        Returns:
            CutList with one row per (role, dimensions, material) group.
        """
        mode = panel_list.spec.distribution_mode
        groups: dict[tuple, list[Panel]] = {}
        for panel in panel_list:
            groups.setdefault(self._group_key(panel), []).append(panel)

        pieces = []
        area_by_material: dict[MaterialType, float] = {}
        for panels in groups.values():
            first = panels[0]
            piece = CutPiece(
                label=self._label(first.role, mode),
                role=first.role,
                length=first.cut_length,
                width=first.cut_width,
                thickness=first.thickness,
                quantity=sum(panel.quantity for panel in panels),
                material=first.material,
            )
            pieces.append(piece)
            area_by_material[piece.material] = (
                area_by_material.get(piece.material, 0.0) + piece.area
            )

        return CutList(pieces=tuple(pieces), area_by_material=area_by_material)

    @staticmethod
    def _group_key(panel: Panel) -> tuple:
        return (
            panel.role,
            round(panel.cut_length, GROUPING_PRECISION),
            round(panel.cut_width, GROUPING_PRECISION),
            round(panel.thickness, GROUPING_PRECISION),
            panel.material,
        )

    @staticmethod
    def _label(role: PanelRole, mode: DistributionMode) -> str:
        if role is PanelRole.PRIMARY_MEMBER:
            return "Shelf" if mode is DistributionMode.HORIZONTAL else "Divider"
        if role is PanelRole.SECONDARY_MEMBER:
            return "Divider" if mode is DistributionMode.HORIZONTAL else "Shelf"
        return _ROLE_LABELS[role]
