"""Front elevation schematic rendering.

Projects the panel list onto the front (XY) plane and renders it as SVG.
Panels are drawn back to front: backing, carcass, internal members and
finally doors, so nearer panels overdraw the ones behind them. Overall
width and height dimension lines are annotated from the specification.
"""

from __future__ import annotations

from dataclasses import dataclass

from cabinet_panels.domain.entities import CabinetSpec, Panel, PanelList
from cabinet_panels.domain.value_objects import PanelRole

# Role -> draw layer; lower layers are drawn first
DRAW_LAYERS: dict[PanelRole, int] = {
    PanelRole.BACKING: 0,
    PanelRole.SIDE: 1,
    PanelRole.ROOF: 1,
    PanelRole.FLOOR: 1,
    PanelRole.KICKPLATE: 1,
    PanelRole.PRIMARY_MEMBER: 2,
    PanelRole.SECONDARY_MEMBER: 2,
    PanelRole.DOOR: 3,
}

# Role group names shared by the SVG classes and the DXF layers
ROLE_GROUPS: dict[PanelRole, str] = {
    PanelRole.BACKING: "BACKING",
    PanelRole.SIDE: "CARCASS",
    PanelRole.ROOF: "CARCASS",
    PanelRole.FLOOR: "CARCASS",
    PanelRole.KICKPLATE: "KICKPLATE",
    PanelRole.PRIMARY_MEMBER: "MEMBERS",
    PanelRole.SECONDARY_MEMBER: "MEMBERS",
    PanelRole.DOOR: "DOORS",
}

ROLE_COLORS: dict[PanelRole, str] = {
    PanelRole.BACKING: "#E5E7EB",  # Light gray
    PanelRole.SIDE: "#DBEAFE",  # Light blue
    PanelRole.ROOF: "#DBEAFE",
    PanelRole.FLOOR: "#DBEAFE",
    PanelRole.KICKPLATE: "#6B7280",  # Slate
    PanelRole.PRIMARY_MEMBER: "#93C5FD",  # Sky blue
    PanelRole.SECONDARY_MEMBER: "#BFDBFE",
    PanelRole.DOOR: "#FDE68A",  # Amber
}


@dataclass(frozen=True)
class SchematicRect:
    """A panel projected onto the front plane (Y up, millimetres)."""

    panel: Panel
    x: float
    y: float
    width: float
    height: float

    @property
    def group(self) -> str:
        return ROLE_GROUPS[self.panel.role]


def project_front(panel_list: PanelList) -> list[SchematicRect]:
    """Project every panel onto the front plane, in draw order.

    The sort is stable, so panels keep their panel list order within a
    draw layer.
    """
    rects = []
    for panel in panel_list:
        w, h = panel.dimensions.x, panel.dimensions.y
        rects.append(
            SchematicRect(
                panel=panel,
                x=panel.center.x - w / 2,
                y=panel.center.y - h / 2,
                width=w,
                height=h,
            )
        )
    return sorted(rects, key=lambda rect: DRAW_LAYERS[rect.panel.role])


class SchematicRenderer:
    """Renders front elevation schematics in SVG format.

    Attributes:
        scale: Pixels per millimetre.
        padding: Margin around the drawing, holding the dimension lines.
        show_dimensions: Whether to draw the overall dimension lines.
        show_cells: Whether to label each cell with its clear size.
        door_opacity: Fill opacity of doors so the interior stays visible.
    """

    def __init__(
        self,
        scale: float = 0.3,
        padding: float = 60.0,
        show_dimensions: bool = True,
        show_cells: bool = False,
        door_opacity: float = 0.35,
    ) -> None:
        if scale <= 0:
            raise ValueError("Scale must be positive")
        self.scale = scale
        self.padding = padding
        self.show_dimensions = show_dimensions
        self.show_cells = show_cells
        self.door_opacity = door_opacity

    def render_svg(self, panel_list: PanelList) -> str:
        """Render the schematic of a panel list as an SVG document."""
        spec = panel_list.spec
        draw_w = spec.width * self.scale
        draw_h = spec.height * self.scale
        svg_width = round(draw_w + 2 * self.padding, 2)
        svg_height = round(draw_h + 2 * self.padding, 2)

        svg_parts = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'viewBox="0 0 {svg_width} {svg_height}" '
            'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" fill="#FFFFFF"/>',
        ]

        for rect in project_front(panel_list):
            svg_parts.append(self._render_rect(rect, spec))

        if self.show_cells:
            for cell in panel_list.cells:
                cx, cy = self._to_svg(
                    cell.left + cell.width / 2, cell.bottom + cell.height / 2, spec
                )
                svg_parts.append(
                    f'  <text x="{cx:.2f}" y="{cy:.2f}" class="cell" '
                    f'text-anchor="middle" font-size="11" fill="#374151">'
                    f"{cell.width:.0f}x{cell.height:.0f}</text>"
                )

        if self.show_dimensions:
            svg_parts.append(self._render_dimensions(spec.width, spec.height))

        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    def _to_svg(self, x: float, y: float, spec: CabinetSpec) -> tuple[float, float]:
        """Map a cabinet-local (x, y) to SVG coordinates (y grows down)."""
        return (
            self.padding + (x + spec.width / 2) * self.scale,
            self.padding + (spec.height - y) * self.scale,
        )

    def _render_rect(self, rect: SchematicRect, spec: CabinetSpec) -> str:
        x, y = self._to_svg(rect.x, rect.y + rect.height, spec)
        w = rect.width * self.scale
        h = rect.height * self.scale
        fill = ROLE_COLORS[rect.panel.role]
        opacity = (
            f' fill-opacity="{self.door_opacity}"'
            if rect.panel.role is PanelRole.DOOR
            else ""
        )
        return (
            f'  <rect x="{x:.2f}" y="{y:.2f}" width="{w:.2f}" height="{h:.2f}" '
            f'class="{rect.group.lower()}" fill="{fill}"{opacity} '
            f'stroke="#1F2937" stroke-width="1">'
            f"<title>{rect.panel.label}</title></rect>"
        )

    def _render_dimensions(self, width: float, height: float) -> str:
        left = self.padding
        top = self.padding
        right = left + width * self.scale
        bottom = top + height * self.scale
        line_y = top - 25
        line_x = left - 25
        return "\n".join(
            [
                '  <g class="dimensions" stroke="#9CA3AF" stroke-width="1">',
                f'    <line x1="{left:.2f}" y1="{line_y:.2f}" x2="{right:.2f}" y2="{line_y:.2f}"/>',
                f'    <line x1="{line_x:.2f}" y1="{top:.2f}" x2="{line_x:.2f}" y2="{bottom:.2f}"/>',
                "  </g>",
                f'  <text x="{(left + right) / 2:.2f}" y="{line_y - 8:.2f}" '
                f'text-anchor="middle" font-size="14" fill="#374151">{width:g}mm</text>',
                f'  <text x="{line_x - 8:.2f}" y="{(top + bottom) / 2:.2f}" '
                f'text-anchor="end" font-size="14" fill="#374151">{height:g}mm</text>',
            ]
        )
