"""Panel list generation endpoints."""

from fastapi import APIRouter

from cabinet_panels.application.config import load_config_from_dict
from cabinet_panels.application.dtos import LayoutOutput
from cabinet_panels.infrastructure.formatters import JsonExporter
from cabinet_panels.web.dependencies import GenerateCommandDep
from cabinet_panels.web.exceptions import CabinetGenerationError
from cabinet_panels.web.schemas.requests import GenerateFromConfigRequest, GenerateRequest
from cabinet_panels.web.schemas.responses import ErrorResponseSchema, LayoutOutputSchema

router = APIRouter(
    prefix="/generate",
    tags=["generate"],
    responses={422: {"model": ErrorResponseSchema}},
)


def _layout_output_to_schema(output: LayoutOutput) -> LayoutOutputSchema:
    """Convert a successful LayoutOutput to the response schema.

    Raises:
        CabinetGenerationError: If the command reported errors.
    """
    if not output.is_valid:
        raise CabinetGenerationError(output.errors, output.error_details)

    data = JsonExporter().to_dict(output.panel_list, output.cut_list)
    return LayoutOutputSchema(is_valid=True, errors=[], **data)


@router.post("", response_model=LayoutOutputSchema)
async def generate_panels(
    request: GenerateRequest,
    command: GenerateCommandDep,
) -> LayoutOutputSchema:
    """Generate the panel list for cabinet parameters.

    Args:
        request: Cabinet parameters in millimetres.
        command: Injected GenerateLayoutCommand.

    Returns:
        Panel list, cut list, cells and summary counts.
    """
    output = command.execute(request.model_dump())
    return _layout_output_to_schema(output)


@router.post("/from-config", response_model=LayoutOutputSchema)
async def generate_from_config(
    request: GenerateFromConfigRequest,
    command: GenerateCommandDep,
) -> LayoutOutputSchema:
    """Generate the panel list from a full cabinet configuration.

    The configuration has the same format as the JSON files accepted by the
    CLI ``--config`` option.
    """
    config = load_config_from_dict(request.config)
    output = command.execute_config(config)
    return _layout_output_to_schema(output)
