"""Export format endpoints."""

import tempfile
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import Response

from cabinet_panels.domain.services import normalize_spec
from cabinet_panels.infrastructure.exporters import ExporterRegistry
from cabinet_panels.web.dependencies import ServiceFactoryDep
from cabinet_panels.web.exceptions import UnsupportedFormatError
from cabinet_panels.web.schemas.requests import ExportRequest
from cabinet_panels.web.schemas.responses import ErrorResponseSchema, ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES: dict[str, str] = {
    "stl": "application/octet-stream",
    "svg": "image/svg+xml",
    "dxf": "application/dxf",
    "json": "application/json",
    "txt": "text/plain",
    "csv": "text/csv",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post(
    "/{format_name}",
    responses={
        400: {"model": ErrorResponseSchema},
        422: {"model": ErrorResponseSchema},
    },
)
async def export_layout(
    format_name: str,
    request: ExportRequest,
    factory: ServiceFactoryDep,
) -> Response:
    """Export the panel list of a cabinet in one file format.

    Specification errors propagate to the CabinetSpecError handler (422).

    Raises:
        UnsupportedFormatError: If no exporter is registered for the format.
    """
    format_name = format_name.lower()
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    spec = normalize_spec(request.model_dump(exclude={"door_open_angle", "bom_format"}))
    panel_list = factory.get_decomposition_service().compute(spec)

    options: dict = {}
    if format_name == "stl":
        options = {"door_open_angle": request.door_open_angle}
    elif format_name == "bom":
        options = {"output_format": request.bom_format}
    exporter = ExporterRegistry.get(format_name)(**options)

    filename = f"cabinet.{exporter.file_extension}"
    headers = {"Content-Disposition": f"attachment; filename={filename}"}
    media_type = MEDIA_TYPES.get(exporter.file_extension, "application/octet-stream")

    if format_name == "stl":
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / filename
            exporter.export(panel_list, path)
            content: bytes | str = path.read_bytes()
    else:
        content = exporter.export_string(panel_list)

    return Response(content=content, media_type=media_type, headers=headers)
