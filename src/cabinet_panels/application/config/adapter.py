"""Adapter from configuration models to engine input.

The engine's ``normalize_spec`` takes a flat mapping; configuration files
group related options. This module flattens one into the other and maps
engine error fields back to configuration JSON paths.
"""

from typing import Any

from cabinet_panels.application.config.schema import CabinetConfiguration
from cabinet_panels.domain.errors import CabinetSpecError

# Engine field name -> configuration JSON path
FIELD_PATHS: dict[str, str] = {
    "width": "cabinet.width",
    "height": "cabinet.height",
    "depth": "cabinet.depth",
    "thickness": "cabinet.thickness",
    "roof_style": "cabinet.roof_style",
    "has_backing": "cabinet.backing",
    "has_kickplate": "cabinet.kickplate.enabled",
    "kickplate_height": "cabinet.kickplate.height",
    "distribution_mode": "cabinet.distribution.mode",
    "primary_count": "cabinet.distribution.primary_count",
    "secondary_counts": "cabinet.distribution.secondary_counts",
    "has_doors": "cabinet.doors.enabled",
    "hinge_style": "cabinet.doors.hinge_style",
    "door_count": "cabinet.doors.count",
}


def config_to_raw(config: CabinetConfiguration) -> dict[str, Any]:
    """Flatten a configuration into the mapping accepted by normalize_spec.

    Example:
        >>> raw = config_to_raw(config)
        >>> spec = normalize_spec(raw)
    """
    cabinet = config.cabinet
    return {
        "width": cabinet.width,
        "height": cabinet.height,
        "depth": cabinet.depth,
        "thickness": cabinet.thickness,
        "roof_style": cabinet.roof_style.value,
        "has_backing": cabinet.backing,
        "has_kickplate": cabinet.kickplate.enabled,
        "kickplate_height": cabinet.kickplate.height,
        "distribution_mode": cabinet.distribution.mode.value,
        "primary_count": cabinet.distribution.primary_count,
        "secondary_counts": list(cabinet.distribution.secondary_counts),
        "has_doors": cabinet.doors.enabled,
        "hinge_style": cabinet.doors.hinge_style.value,
        "door_count": cabinet.doors.count,
    }


def error_config_path(error: CabinetSpecError) -> str:
    """JSON path of the configuration field responsible for an engine error."""
    if error.field is None:
        return "cabinet"
    path = FIELD_PATHS.get(error.field, f"cabinet.{error.field}")
    if error.field == "secondary_counts" and error.cell_index is not None:
        path = f"{path}[{error.cell_index}]"
    return path
