"""Distribution of internal members inside the clear volume.

Primary members divide the clear box into cells along one axis; each cell
may then be subdivided by its own secondary members along the other axis.
In HORIZONTAL mode primaries are shelves and secondaries are vertical
dividers; in VERTICAL mode the roles of the axes are swapped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..entities import CabinetSpec, CellLayout, Panel
from ..value_objects import (
    Axis,
    ClearBox,
    Dimensions3D,
    DistributionMode,
    MaterialType,
    PanelRole,
    Position3D,
)
from .spacing import Spacing, equal_gap_spacing

__all__ = ["DistributionEngine", "DistributionResult"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistributionResult:
    """Internal members and the resolved cell layout.

    Attributes:
        primary: Primary members in ascending spatial order.
        secondary: Secondary members grouped by cell (cells ascending),
            ascending within each cell.
        cells: One layout per cell created by the primary members.
    """

    primary: tuple[Panel, ...]
    secondary: tuple[Panel, ...]
    cells: tuple[CellLayout, ...]

    @property
    def panels(self) -> tuple[Panel, ...]:
        return self.primary + self.secondary


class DistributionEngine:
    """Places shelves and dividers with equal gaps.

    Positions are derived in closed form from the clear span, thickness and
    count, so the cell gaps plus member thicknesses always reproduce the
    span exactly.
    """

    def distribute(self, spec: CabinetSpec, clear: ClearBox) -> DistributionResult:
        """Place primary and secondary members for a specification.

        Args:
            spec: Normalized cabinet specification.
            clear: Clear internal volume from the carcass builder.

        Returns:
            DistributionResult with members and cell layouts.

        Raises:
            GeometryOverflowError: If a primary or secondary count leaves no
                positive gap.
        """
        if spec.distribution_mode is DistributionMode.HORIZONTAL:
            result = self._distribute_horizontal(spec, clear)
        else:
            result = self._distribute_vertical(spec, clear)
        logger.debug(
            f"Distributed {len(result.primary)} primary and "
            f"{len(result.secondary)} secondary members over "
            f"{len(result.cells)} cells ({spec.distribution_mode.value})"
        )
        return result

    def _distribute_horizontal(
        self, spec: CabinetSpec, clear: ClearBox
    ) -> DistributionResult:
        t = spec.thickness
        rows = equal_gap_spacing(
            clear.height,
            t,
            spec.primary_count,
            axis="height",
            level="primary",
            field="primary_count",
        )

        primary = [
            Panel(
                role=PanelRole.PRIMARY_MEMBER,
                dimensions=Dimensions3D(clear.width, t, clear.depth),
                center=Position3D(
                    0.0, clear.bottom + offset, clear.depth_offset
                ),
                material=MaterialType.MELAMINE,
                normal=Axis.Y,
                label=f"Shelf {i}",
                index=i,
            )
            for i, offset in enumerate(rows.positions(), start=1)
        ]

        secondary: list[Panel] = []
        cells: list[CellLayout] = []
        for cell in spec.cells:
            row_bottom = clear.bottom + rows.cell_start(cell.index)
            columns = self._secondary_spacing(
                clear.width, t, cell.secondary_count, "width", cell.index
            )
            for j, offset in enumerate(columns.positions(), start=1):
                secondary.append(
                    Panel(
                        role=PanelRole.SECONDARY_MEMBER,
                        dimensions=Dimensions3D(t, rows.gap, clear.depth),
                        center=Position3D(
                            clear.left + offset,
                            row_bottom + rows.gap / 2,
                            clear.depth_offset,
                        ),
                        material=MaterialType.MELAMINE,
                        normal=Axis.X,
                        label=f"Divider {cell.index + 1}.{j}",
                        index=len(secondary) + 1,
                        cell_index=cell.index,
                    )
                )
            cells.append(
                CellLayout(
                    index=cell.index,
                    left=clear.left,
                    bottom=row_bottom,
                    width=clear.width,
                    height=rows.gap,
                    secondary_count=columns.count,
                    secondary_gap=columns.gap,
                )
            )

        return DistributionResult(
            primary=tuple(primary), secondary=tuple(secondary), cells=tuple(cells)
        )

    def _distribute_vertical(
        self, spec: CabinetSpec, clear: ClearBox
    ) -> DistributionResult:
        t = spec.thickness
        columns = equal_gap_spacing(
            clear.width,
            t,
            spec.primary_count,
            axis="width",
            level="primary",
            field="primary_count",
        )

        primary = [
            Panel(
                role=PanelRole.PRIMARY_MEMBER,
                dimensions=Dimensions3D(t, clear.height, clear.depth),
                center=Position3D(
                    clear.left + offset,
                    clear.bottom + clear.height / 2,
                    clear.depth_offset,
                ),
                material=MaterialType.MELAMINE,
                normal=Axis.X,
                label=f"Divider {i}",
                index=i,
            )
            for i, offset in enumerate(columns.positions(), start=1)
        ]

        secondary: list[Panel] = []
        cells: list[CellLayout] = []
        for cell in spec.cells:
            column_left = clear.left + columns.cell_start(cell.index)
            rows = self._secondary_spacing(
                clear.height, t, cell.secondary_count, "height", cell.index
            )
            for j, offset in enumerate(rows.positions(), start=1):
                secondary.append(
                    Panel(
                        role=PanelRole.SECONDARY_MEMBER,
                        dimensions=Dimensions3D(columns.gap, t, clear.depth),
                        center=Position3D(
                            column_left + columns.gap / 2,
                            clear.bottom + offset,
                            clear.depth_offset,
                        ),
                        material=MaterialType.MELAMINE,
                        normal=Axis.Y,
                        label=f"Shelf {cell.index + 1}.{j}",
                        index=len(secondary) + 1,
                        cell_index=cell.index,
                    )
                )
            cells.append(
                CellLayout(
                    index=cell.index,
                    left=column_left,
                    bottom=clear.bottom,
                    width=columns.gap,
                    height=clear.height,
                    secondary_count=rows.count,
                    secondary_gap=rows.gap,
                )
            )

        return DistributionResult(
            primary=tuple(primary), secondary=tuple(secondary), cells=tuple(cells)
        )

    @staticmethod
    def _secondary_spacing(
        span: float, thickness: float, count: int, axis: str, cell_index: int
    ) -> Spacing:
        return equal_gap_spacing(
            span,
            thickness,
            count,
            axis=axis,
            level="secondary",
            cell_index=cell_index,
            field="secondary_counts",
        )
