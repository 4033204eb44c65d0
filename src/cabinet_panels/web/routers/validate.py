"""Configuration validation endpoints."""

from fastapi import APIRouter

from cabinet_panels.application.config import load_config_from_dict, validate_config
from cabinet_panels.web.schemas.requests import ConfigValidateRequest
from cabinet_panels.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a cabinet configuration without exporting anything.

    Schema errors are reported by the ConfigError handler; geometry errors
    and woodworking advisories come back in the result body.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        exit_code=result.exit_code,
        errors=[
            {"message": e.message, "path": e.path, "value": e.value}
            for e in result.errors
        ],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
