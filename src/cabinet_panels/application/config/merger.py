"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only CLI arguments that
are not None override configuration values.
"""

from typing import Any

from cabinet_panels.application.config.schema import CabinetConfiguration


def _override(target: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        target[key] = value


def merge_config_with_cli(
    config: CabinetConfiguration,
    *,
    width: float | None = None,
    height: float | None = None,
    depth: float | None = None,
    thickness: float | None = None,
    roof_style: str | None = None,
    backing: bool | None = None,
    kickplate: bool | None = None,
    kickplate_height: float | None = None,
    distribution_mode: str | None = None,
    primary_count: int | None = None,
    secondary_counts: list[int] | None = None,
    doors: bool | None = None,
    hinge_style: str | None = None,
    door_count: int | None = None,
    output_format: str | None = None,
    output_formats: list[str] | None = None,
    output_dir: str | None = None,
    project_name: str | None = None,
    door_open_angle: float | None = None,
) -> CabinetConfiguration:
    """Merge CLI arguments with configuration values.

    Returns a new, re-validated configuration; the input is left untouched.

    Example:
        >>> config = load_config(Path("wardrobe.json"))
        >>> merged = merge_config_with_cli(config, width=1200.0, primary_count=4)
        >>> merged.cabinet.width
        1200.0

    Raises:
        pydantic.ValidationError: If an override violates the schema bounds.
    """
    data = config.model_dump(mode="json")
    cabinet = data["cabinet"]
    output = data["output"]

    _override(cabinet, "width", width)
    _override(cabinet, "height", height)
    _override(cabinet, "depth", depth)
    _override(cabinet, "thickness", thickness)
    _override(cabinet, "roof_style", roof_style)
    _override(cabinet, "backing", backing)

    _override(cabinet["kickplate"], "enabled", kickplate)
    _override(cabinet["kickplate"], "height", kickplate_height)

    _override(cabinet["distribution"], "mode", distribution_mode)
    _override(cabinet["distribution"], "primary_count", primary_count)
    _override(cabinet["distribution"], "secondary_counts", secondary_counts)

    _override(cabinet["doors"], "enabled", doors)
    _override(cabinet["doors"], "hinge_style", hinge_style)
    _override(cabinet["doors"], "count", door_count)

    _override(output, "format", output_format)
    _override(output, "formats", output_formats)
    _override(output, "output_dir", output_dir)
    _override(output, "project_name", project_name)
    _override(output, "door_open_angle", door_open_angle)

    return CabinetConfiguration.model_validate(data)
