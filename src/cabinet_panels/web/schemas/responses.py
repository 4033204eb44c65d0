"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from cabinet_panels.web.schemas.common import Vector3Schema


class PanelSchema(BaseModel):
    """A placed panel."""

    label: str = Field(..., description="Unique panel label")
    role: str = Field(..., description="Panel role")
    index: int = Field(..., description="1-based index within the role")
    dimensions: Vector3Schema = Field(..., description="Extents along x, y, z in mm")
    center: Vector3Schema = Field(..., description="Centroid in cabinet coordinates")
    normal: str = Field(..., description="Axis of the board thickness")
    material: str = Field(..., description="Board material")
    quantity: int = Field(default=1, description="Number of pieces")
    cell_index: int | None = Field(default=None, description="Owning cell")
    hinge_side: str | None = Field(default=None, description="Door hinge edge")


class CutPieceSchema(BaseModel):
    """Row in the consolidated cut list."""

    label: str = Field(..., description="Piece label")
    role: str = Field(..., description="Panel role")
    length: int = Field(..., description="Length in mm")
    width: int = Field(..., description="Width in mm")
    thickness: int = Field(..., description="Thickness in mm")
    quantity: int = Field(..., description="Number of pieces")
    material: str = Field(..., description="Board material")


class CellSchema(BaseModel):
    """Resolved cell placement in the front elevation."""

    index: int
    left: float
    bottom: float
    width: float
    height: float
    secondary_count: int
    secondary_gap: float


class ClearBoxSchema(BaseModel):
    """Usable internal space left by the carcass."""

    width: float
    height: float
    depth: float
    left: float
    bottom: float
    depth_offset: float


class SummarySchema(BaseModel):
    total_pieces: int = Field(..., description="Total physical pieces")
    cell_count: int = Field(..., description="Cells created by the primary members")
    by_role: dict[str, int] = Field(default_factory=dict, description="Pieces per role")
    area_m2: dict[str, float] = Field(
        default_factory=dict, description="Face area per material in m²"
    )


class LayoutOutputSchema(BaseModel):
    """Response for panel list generation."""

    is_valid: bool = Field(..., description="Whether generation was successful")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    spec: dict[str, Any] = Field(..., description="Normalized cabinet specification")
    clear: ClearBoxSchema
    cells: list[CellSchema] = Field(default_factory=list)
    panels: list[PanelSchema] = Field(default_factory=list)
    cut_list: list[CutPieceSchema] = Field(default_factory=list)
    summary: SummarySchema


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    exit_code: int = Field(..., description="0 clean, 1 errors, 2 warnings only")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class TemplateListItemSchema(BaseModel):
    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")


class TemplateListSchema(BaseModel):
    """Response for template listing."""

    templates: list[TemplateListItemSchema] = Field(
        ..., description="Available templates"
    )


class TemplateContentSchema(BaseModel):
    """Response for template content."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")
    content: dict[str, Any] = Field(..., description="Template configuration content")


class ExportFormatsSchema(BaseModel):
    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
