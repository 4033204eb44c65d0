"""Pydantic configuration schema models for cabinet specifications.

This module defines the configuration schema for JSON-based cabinet configuration
files. It uses Pydantic v2 for validation and serialization.

The option enums (RoofStyle, DistributionMode, HingeStyle) are reused from the
domain layer so configuration files and the engine share one vocabulary.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cabinet_panels.domain.value_objects import DistributionMode, HingeStyle, RoofStyle

# Supported schema versions for configuration files
# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Output formats accepted by the exporter registry
VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"stl", "svg", "dxf", "json", "bom"})


class KickplateConfig(BaseModel):
    """Plinth under the cabinet floor.

    Attributes:
        enabled: Whether front and rear kickplates are fitted.
        height: Plinth height in millimetres (0 to 300).
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    height: float = Field(default=100.0, ge=0.0, le=300.0)

    @model_validator(mode="after")
    def validate_height_when_enabled(self) -> "KickplateConfig":
        """An enabled kickplate needs a positive height."""
        if self.enabled and self.height <= 0:
            raise ValueError("Kickplate height must be positive when enabled")
        return self


class DistributionConfig(BaseModel):
    """Internal shelves and dividers.

    Attributes:
        mode: Orientation of the primary members.
        primary_count: Number of primary members (0 to 50).
        secondary_counts: Secondary member count per cell, bottom to top or
            left to right. Shorter lists are padded with zeros, longer ones
            truncated, when the specification is normalized.
    """

    model_config = ConfigDict(extra="forbid")

    mode: DistributionMode = DistributionMode.HORIZONTAL
    primary_count: int = Field(default=0, ge=0, le=50)
    secondary_counts: list[int] = Field(default_factory=list, max_length=51)

    @field_validator("secondary_counts")
    @classmethod
    def validate_secondary_counts(cls, v: list[int]) -> list[int]:
        """Each cell holds between 0 and 20 secondary members."""
        for count in v:
            if count < 0 or count > 20:
                raise ValueError(
                    f"Secondary counts must be between 0 and 20, got {count}"
                )
        return v


class DoorsConfig(BaseModel):
    """Cabinet doors.

    Attributes:
        enabled: Whether doors are fitted.
        hinge_style: Mounting convention (lateral, central or internal).
        count: Number of doors side by side.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    hinge_style: HingeStyle = HingeStyle.LATERAL
    count: int = Field(default=2, ge=0, le=10)


class CabinetConfig(BaseModel):
    """Configuration for the cabinet dimensions and structure.

    Attributes:
        width: Overall cabinet width in millimetres (100 to 3000)
        height: Overall cabinet height in millimetres (100 to 3000)
        depth: Overall cabinet depth in millimetres (100 to 1200)
        thickness: Board thickness in millimetres (3 to 50)
        roof_style: Whether the roof sits between or over the sides
        backing: Whether a rear MDF panel is fitted
        kickplate: Plinth configuration
        distribution: Shelves and dividers
        doors: Door configuration
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., ge=100.0, le=3000.0)
    height: float = Field(..., ge=100.0, le=3000.0)
    depth: float = Field(..., ge=100.0, le=1200.0)
    thickness: float = Field(default=18.0, ge=3.0, le=50.0)
    roof_style: RoofStyle = RoofStyle.BETWEEN
    backing: bool = False
    kickplate: KickplateConfig = Field(default_factory=KickplateConfig)
    distribution: DistributionConfig = Field(default_factory=DistributionConfig)
    doors: DoorsConfig = Field(default_factory=DoorsConfig)


class OutputConfig(BaseModel):
    """Configuration for output format and file paths.

    Attributes:
        format: Console output (all, panels, cutlist or json).
        formats: File formats to export (stl, svg, dxf, json, bom or "all").
        output_dir: Directory for exported files.
        project_name: Base name for exported files.
        door_open_angle: Degrees by which doors are drawn open in the STL mesh.
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["all", "panels", "cutlist", "json"] = "all"
    formats: list[str] = Field(default_factory=list, description="File formats to export")
    output_dir: str | None = Field(default=None, description="Directory for output files")
    project_name: str = Field(default="cabinet", min_length=1, description="Base name for output files")
    door_open_angle: float = Field(default=0.0, ge=0.0, le=180.0)

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        """Validate format names in the formats list."""
        invalid = set(v) - VALID_OUTPUT_FORMATS - {"all"}
        if invalid:
            raise ValueError(
                f"Invalid formats: {sorted(invalid)}. "
                f"Valid formats: {sorted(VALID_OUTPUT_FORMATS)}"
            )
        return v


class CabinetConfiguration(BaseModel):
    """Root configuration model for cabinet specifications.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        cabinet: Cabinet dimensions and structure configuration
        output: Output format configuration

    Example:
        >>> config = CabinetConfiguration(
        ...     schema_version="1.0",
        ...     cabinet=CabinetConfig(width=900, height=1800, depth=500)
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    cabinet: CabinetConfig
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
