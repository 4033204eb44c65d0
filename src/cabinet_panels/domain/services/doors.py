"""Door layout for the three hinge styles."""

from __future__ import annotations

import logging

from ..entities import CabinetSpec, Panel
from ..errors import GeometryOverflowError
from ..value_objects import (
    Axis,
    Dimensions3D,
    HingeStyle,
    MaterialType,
    PanelRole,
    Position3D,
)
from .carcass import CarcassResult

__all__ = ["DOOR_REVEAL", "OVERLAY_CLEARANCE", "DoorLayoutCalculator"]

logger = logging.getLogger(__name__)

# Gap between adjacent doors and around the door group.
DOOR_REVEAL = 3.0
# Air gap between overlay doors and the carcass front.
OVERLAY_CLEARANCE = 2.0


class DoorLayoutCalculator:
    """Sizes and places doors for a cabinet.

    LATERAL doors overlay the full front, CENTRAL doors share the side
    panels at interior joins and INTERNAL doors sit inset in the clear
    opening. In every style the door group is centred on the cabinet and
    separated by the reveal gap.
    """

    def layout(self, spec: CabinetSpec, carcass: CarcassResult) -> list[Panel]:
        """Compute the door panels, left to right.

        Args:
            spec: Normalized cabinet specification with doors enabled.
            carcass: Carcass result providing the clear opening.

        Returns:
            Door panels in left-to-right order.

        Raises:
            GeometryOverflowError: If the door count is below one or the
                doors would have no positive width or height.
        """
        count = spec.door_count
        if count < 1:
            raise GeometryOverflowError(
                f"A cabinet with doors needs at least one door (got {count})",
                field="door_count",
                axis="width",
                level="doors",
                count=count,
                value=count,
            )

        t = spec.thickness
        kick = spec.effective_kickplate_height
        clear = carcass.clear

        if spec.hinge_style is HingeStyle.INTERNAL:
            span = clear.width
            door_height = clear.height - DOOR_REVEAL
            center_y = clear.bottom + clear.height / 2
            center_z = spec.depth / 2 - t / 2
        else:
            span = spec.width
            if spec.hinge_style is HingeStyle.CENTRAL:
                span -= t
            door_height = spec.height - kick - DOOR_REVEAL
            center_y = kick + (spec.height - kick) / 2
            center_z = spec.depth / 2 + t / 2 + OVERLAY_CLEARANCE

        door_width = span / count - DOOR_REVEAL
        if door_width <= 0:
            raise GeometryOverflowError(
                f"{count} door(s) leave no positive door width in {span:g}",
                field="door_count",
                axis="width",
                level="doors",
                count=count,
                span=span,
                value=count,
            )
        if door_height <= 0:
            raise GeometryOverflowError(
                f"Doors would have no positive height ({door_height:g})",
                field="height",
                axis="height",
                level="doors",
                count=count,
                span=door_height + DOOR_REVEAL,
            )

        group_width = count * door_width + (count - 1) * DOOR_REVEAL
        first_x = -group_width / 2 + door_width / 2
        doors = []
        for i in range(count):
            hinge_side = "left" if i < count / 2 else "right"
            doors.append(
                Panel(
                    role=PanelRole.DOOR,
                    dimensions=Dimensions3D(door_width, door_height, t),
                    center=Position3D(
                        first_x + i * (door_width + DOOR_REVEAL), center_y, center_z
                    ),
                    material=MaterialType.MELAMINE,
                    normal=Axis.Z,
                    label=f"Door {i + 1}",
                    index=i + 1,
                    hinge_side=hinge_side,
                )
            )

        logger.debug(
            f"Laid out {count} {spec.hinge_style.value} door(s) of "
            f"{door_width:g}x{door_height:g}"
        )
        return doors
