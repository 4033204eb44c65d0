"""Pydantic request schemas for the REST API."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from cabinet_panels.web.schemas.common import CabinetParametersSchema


class GenerateRequest(CabinetParametersSchema):
    """Request for generating a panel list."""


class GenerateFromConfigRequest(BaseModel):
    """Request for generating a panel list from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full cabinet configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Cabinet configuration JSON")


class ExportRequest(CabinetParametersSchema):
    """Request for exporting a panel list to a file format."""

    door_open_angle: float = Field(
        default=0.0, ge=0.0, le=180.0, description="Door swing in the STL mesh"
    )
    bom_format: Literal["text", "csv", "json"] = Field(
        default="text", description="BOM output: text, csv or json"
    )
