"""Normalization of raw cabinet input into a CabinetSpec.

Raw input arrives from the CLI, the web API or a configuration file as a
loosely typed mapping. This module clamps counts, fills in the per-cell
secondary counts and rejects dimensions that cannot form a closed carcass.
It deliberately does not check whether the requested distribution fits;
that is reported by the distribution engine at computation time.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, TypeVar

from ..entities import CabinetSpec, CellSpec
from ..errors import InvalidDimensionError, InvalidOptionError
from ..value_objects import DistributionMode, HingeStyle, RoofStyle

__all__ = ["normalize_spec", "DEFAULT_SPEC_VALUES"]

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# Defaults of a freshly opened configurator.
DEFAULT_SPEC_VALUES: dict[str, Any] = {
    "roof_style": RoofStyle.BETWEEN,
    "has_kickplate": False,
    "kickplate_height": 0.0,
    "has_backing": False,
    "distribution_mode": DistributionMode.HORIZONTAL,
    "primary_count": 0,
    "secondary_counts": (),
    "has_doors": False,
    "hinge_style": HingeStyle.LATERAL,
    "door_count": 2,
}


def _positive_dimension(raw: Mapping[str, Any], name: str) -> float:
    value = raw.get(name)
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidDimensionError(
            f"{name} must be a number, got {value!r}", field=name, value=value
        ) from None
    if not math.isfinite(number) or number <= 0:
        raise InvalidDimensionError(
            f"{name} must be a finite positive number, got {value!r}",
            field=name,
            value=value,
        )
    return number


def _count(value: Any) -> int:
    """Coerce a count to a non-negative integer; unusable values become 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return max(0, int(number))


def _option(raw: Mapping[str, Any], name: str, enum_type: type[E]) -> E:
    value = raw.get(name, DEFAULT_SPEC_VALUES[name])
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise InvalidOptionError(
            f"{name} must be one of: {allowed} (got {value!r})",
            field=name,
            value=value,
        ) from None


TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
FALSE_STRINGS = frozenset({"false", "no", "off", "0", ""})


def _flag(raw: Mapping[str, Any], name: str) -> bool:
    """Read a boolean option; strings such as "false" or "off" are parsed."""
    value = raw.get(name, DEFAULT_SPEC_VALUES[name])
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
    raise InvalidOptionError(
        f"{name} must be true or false, got {value!r}", field=name, value=value
    )


def _door_count(value: Any) -> int:
    """Parse the door count of a cabinet with doors.

    Integral values are accepted as-is (including 0, which the door layout
    reports as an overflow); fractional or non-finite values are rejected.
    """
    if isinstance(value, bool):
        number = None
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            number = None
    if number is None or not math.isfinite(number) or not number.is_integer():
        raise InvalidDimensionError(
            f"door_count must be a whole number, got {value!r}",
            field="door_count",
            level="doors",
            value=value,
        )
    return int(number)


def _cells(primary_count: int, secondary_counts: Any) -> tuple[CellSpec, ...]:
    """Build the cell tree, padding or truncating secondary counts."""
    if secondary_counts is None or isinstance(secondary_counts, (str, bytes)):
        entries: Sequence[Any] = ()
    elif isinstance(secondary_counts, Sequence):
        entries = secondary_counts
    else:
        entries = tuple(secondary_counts)

    cells = []
    for index in range(primary_count + 1):
        value = entries[index] if index < len(entries) else 0
        cells.append(CellSpec(index=index, secondary_count=_count(value)))
    if len(entries) > primary_count + 1:
        logger.debug(
            f"Dropping {len(entries) - primary_count - 1} extra secondary count(s)"
        )
    return tuple(cells)


def normalize_spec(raw: Mapping[str, Any]) -> CabinetSpec:
    """Clamp and default raw cabinet input into a well-formed CabinetSpec.

    Recognized keys: width, height, depth, thickness, roof_style,
    has_kickplate, kickplate_height, has_backing, distribution_mode,
    primary_count, secondary_counts, has_doors, hinge_style, door_count.

    Args:
        raw: Loosely typed input values.

    Returns:
        A normalized, immutable CabinetSpec.

    Raises:
        InvalidDimensionError: If a base dimension is missing, non-finite or
            non-positive, or the thickness cannot close the carcass.
        InvalidOptionError: If an enumerated option has an unknown value.
    """
    width = _positive_dimension(raw, "width")
    height = _positive_dimension(raw, "height")
    depth = _positive_dimension(raw, "depth")
    thickness = _positive_dimension(raw, "thickness")

    if thickness * 2 >= width:
        raise InvalidDimensionError(
            f"thickness {thickness} is too large for width {width}: "
            "the side panels would meet",
            field="thickness",
            axis="width",
            level="carcass",
            value=thickness,
        )
    if thickness * 2 >= height:
        raise InvalidDimensionError(
            f"thickness {thickness} is too large for height {height}: "
            "the roof and floor would meet",
            field="thickness",
            axis="height",
            level="carcass",
            value=thickness,
        )

    has_kickplate = _flag(raw, "has_kickplate")
    kickplate_height = 0.0
    if has_kickplate:
        kickplate_height = _positive_dimension(raw, "kickplate_height")
        if height - kickplate_height - 2 * thickness <= 0:
            raise InvalidDimensionError(
                f"kickplate_height {kickplate_height} leaves no internal height",
                field="kickplate_height",
                axis="height",
                level="carcass",
                value=kickplate_height,
            )

    primary_count = _count(raw.get("primary_count", DEFAULT_SPEC_VALUES["primary_count"]))
    has_doors = _flag(raw, "has_doors")
    door_count = DEFAULT_SPEC_VALUES["door_count"]
    if has_doors:
        door_count = _door_count(raw.get("door_count", door_count))

    spec = CabinetSpec(
        width=width,
        height=height,
        depth=depth,
        thickness=thickness,
        roof_style=_option(raw, "roof_style", RoofStyle),
        has_kickplate=has_kickplate,
        kickplate_height=kickplate_height,
        has_backing=_flag(raw, "has_backing"),
        distribution_mode=_option(raw, "distribution_mode", DistributionMode),
        cells=_cells(primary_count, raw.get("secondary_counts")),
        has_doors=has_doors,
        hinge_style=_option(raw, "hinge_style", HingeStyle),
        door_count=door_count,
    )
    logger.debug(
        f"Normalized spec {width}x{height}x{depth} t={thickness}, "
        f"{spec.distribution_mode.value} primary={spec.primary_count} "
        f"secondary={list(spec.secondary_counts)}"
    )
    return spec
