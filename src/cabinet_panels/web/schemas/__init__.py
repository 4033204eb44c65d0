"""Pydantic schemas for the REST API."""

from cabinet_panels.web.schemas.common import CabinetParametersSchema, Vector3Schema
from cabinet_panels.web.schemas.requests import (
    ConfigValidateRequest,
    ExportRequest,
    GenerateFromConfigRequest,
    GenerateRequest,
)
from cabinet_panels.web.schemas.responses import (
    CellSchema,
    ClearBoxSchema,
    CutPieceSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    LayoutOutputSchema,
    PanelSchema,
    SummarySchema,
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "CabinetParametersSchema",
    "Vector3Schema",
    # Requests
    "ConfigValidateRequest",
    "ExportRequest",
    "GenerateFromConfigRequest",
    "GenerateRequest",
    # Responses
    "CellSchema",
    "ClearBoxSchema",
    "CutPieceSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "LayoutOutputSchema",
    "PanelSchema",
    "SummarySchema",
    "TemplateContentSchema",
    "TemplateListItemSchema",
    "TemplateListSchema",
    "ValidationResultSchema",
]
