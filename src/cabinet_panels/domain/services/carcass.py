"""Carcass construction for cabinet panel decomposition.

The carcass is the outer shell of the cabinet: two sides, a roof, a floor,
optional front and rear kickplates and an optional MDF backing. Building it
also yields the clear internal volume (``ClearBox``) into which shelves,
dividers and internal doors are placed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..entities import CabinetSpec, Panel
from ..errors import GeometryOverflowError
from ..value_objects import (
    Axis,
    ClearBox,
    Dimensions3D,
    MaterialType,
    PanelRole,
    Position3D,
    RoofStyle,
)

__all__ = [
    "BACKING_CLEARANCE",
    "BACKING_OVERSIZE",
    "BACKING_THICKNESS",
    "CarcassBuilder",
    "CarcassResult",
    "INTERNAL_DOOR_CLEARANCE",
    "KICKPLATE_SETBACK",
]

logger = logging.getLogger(__name__)

# Front kickplate is set back from the carcass front edge.
KICKPLATE_SETBACK = 20.0
# Backing is housed in grooves, so it is cut larger than the opening.
BACKING_OVERSIZE = 15.0
BACKING_THICKNESS = 3.0
# Depth lost to the backing groove and its clearance.
BACKING_CLEARANCE = 20.0
# Depth lost per internal door beyond its own thickness.
INTERNAL_DOOR_CLEARANCE = 2.0


@dataclass(frozen=True)
class CarcassResult:
    """Carcass panels in emission order plus the clear internal volume."""

    panels: tuple[Panel, ...]
    clear: ClearBox


class CarcassBuilder:
    """Builds the outer shell of a cabinet and its clear internal volume.

    Example:
        >>> from cabinet_panels.domain.services import CarcassBuilder
        >>> from cabinet_panels.domain.entities import CabinetSpec
        >>> spec = CabinetSpec(width=900, height=1800, depth=500, thickness=18)
        >>> result = CarcassBuilder().build(spec)
        >>> [p.label for p in result.panels]
        ['Left Side', 'Right Side', 'Roof', 'Floor']
    """

    def build(self, spec: CabinetSpec) -> CarcassResult:
        """Build the carcass panels for a specification.

        Panels are returned as: left side, right side, roof, floor, front
        kickplate, rear kickplate, backing. Disabled parts are omitted.

        Args:
            spec: Normalized cabinet specification.

        Returns:
            CarcassResult with the panels and the clear internal volume.

        Raises:
            GeometryOverflowError: If the backing and internal door
                clearances consume the whole cabinet depth.
        """
        t = spec.thickness
        kick = spec.effective_kickplate_height
        side_height = spec.side_height
        floor_width = spec.width - 2 * t
        floor_y = kick + t / 2

        panels: list[Panel] = []

        side_x = spec.width / 2 - t / 2
        for index, (label, x) in enumerate(
            (("Left Side", -side_x), ("Right Side", side_x)), start=1
        ):
            panels.append(
                Panel(
                    role=PanelRole.SIDE,
                    dimensions=Dimensions3D(t, side_height, spec.depth),
                    center=Position3D(x, side_height / 2, 0.0),
                    material=MaterialType.MELAMINE,
                    normal=Axis.X,
                    label=label,
                    index=index,
                )
            )

        roof_width = spec.width if spec.roof_style is RoofStyle.OVER else floor_width
        panels.append(
            Panel(
                role=PanelRole.ROOF,
                dimensions=Dimensions3D(roof_width, t, spec.depth),
                center=Position3D(0.0, spec.height - t / 2, 0.0),
                material=MaterialType.MELAMINE,
                normal=Axis.Y,
                label="Roof",
            )
        )

        panels.append(
            Panel(
                role=PanelRole.FLOOR,
                dimensions=Dimensions3D(floor_width, t, spec.depth),
                center=Position3D(0.0, floor_y, 0.0),
                material=MaterialType.MELAMINE,
                normal=Axis.Y,
                label="Floor",
            )
        )

        if spec.has_kickplate:
            front_z = spec.depth / 2 - t / 2 - KICKPLATE_SETBACK
            rear_z = -spec.depth / 2 + t / 2
            for index, (label, z) in enumerate(
                (("Front Kickplate", front_z), ("Rear Kickplate", rear_z)), start=1
            ):
                panels.append(
                    Panel(
                        role=PanelRole.KICKPLATE,
                        dimensions=Dimensions3D(floor_width, kick, t),
                        center=Position3D(0.0, kick / 2, z),
                        material=MaterialType.MELAMINE,
                        normal=Axis.Z,
                        label=label,
                        index=index,
                    )
                )

        if spec.has_backing:
            internal_height = side_height - kick - t
            panels.append(
                Panel(
                    role=PanelRole.BACKING,
                    dimensions=Dimensions3D(
                        floor_width + BACKING_OVERSIZE,
                        internal_height + BACKING_OVERSIZE,
                        BACKING_THICKNESS,
                    ),
                    center=Position3D(
                        0.0, floor_y + internal_height / 2, -spec.depth / 2 + t
                    ),
                    material=MaterialType.MDF,
                    normal=Axis.Z,
                    label="Backing",
                )
            )

        clear = self._clear_box(spec)
        logger.debug(
            f"Built carcass with {len(panels)} panels, clear box "
            f"{clear.width:g}x{clear.height:g}x{clear.depth:g}"
        )
        return CarcassResult(panels=tuple(panels), clear=clear)

    def _clear_box(self, spec: CabinetSpec) -> ClearBox:
        t = spec.thickness
        kick = spec.effective_kickplate_height

        depth = spec.depth
        depth_offset = 0.0
        if spec.has_backing:
            depth -= BACKING_CLEARANCE
            depth_offset += BACKING_CLEARANCE / 2
        if spec.has_internal_doors:
            recess = t + INTERNAL_DOOR_CLEARANCE
            depth -= recess
            depth_offset -= recess / 2

        if depth <= 0:
            raise GeometryOverflowError(
                f"Cabinet depth {spec.depth:g} leaves no clear depth after "
                "backing and internal door clearances",
                field="depth",
                axis="depth",
                level="carcass",
                span=spec.depth,
                value=spec.depth,
            )

        return ClearBox(
            width=spec.width - 2 * t,
            height=spec.height - kick - 2 * t,
            depth=depth,
            left=-spec.width / 2 + t,
            bottom=kick + t,
            depth_offset=depth_offset,
        )
