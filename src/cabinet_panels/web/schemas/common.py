"""Common Pydantic schemas shared across requests and responses."""

from typing import Annotated

from pydantic import BaseModel, Field

SecondaryCount = Annotated[int, Field(ge=0, le=20)]


class CabinetParametersSchema(BaseModel):
    """Cabinet parameters in millimetres.

    Options are plain strings and matched case-insensitively by the engine,
    so unknown values come back as ``invalid_option`` errors with the
    offending field.
    """

    width: float = Field(..., description="Overall width in mm")
    height: float = Field(..., description="Overall height in mm")
    depth: float = Field(..., description="Overall depth in mm")
    thickness: float = Field(default=18.0, description="Board thickness in mm")
    roof_style: str = Field(default="between", description="between or over")
    has_kickplate: bool = Field(default=False, description="Stand on a plinth")
    kickplate_height: float = Field(default=0.0, ge=0, description="Plinth height in mm")
    has_backing: bool = Field(default=False, description="Fit a rear MDF panel")
    distribution_mode: str = Field(default="horizontal", description="horizontal or vertical")
    primary_count: int = Field(
        default=0, ge=0, le=50, description="Number of primary members"
    )
    secondary_counts: list[SecondaryCount] = Field(
        default_factory=list,
        max_length=51,
        description="Secondary member count per cell (0 to 20)",
    )
    has_doors: bool = Field(default=False, description="Fit doors")
    hinge_style: str = Field(default="lateral", description="lateral, central or internal")
    door_count: int = Field(default=2, ge=0, le=10, description="Number of doors")


class Vector3Schema(BaseModel):
    """An (x, y, z) triple in millimetres."""

    x: float
    y: float
    z: float
