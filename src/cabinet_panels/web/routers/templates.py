"""Template management endpoints."""

from fastapi import APIRouter

from cabinet_panels.application.templates import TEMPLATE_METADATA
from cabinet_panels.web.dependencies import TemplateManagerDep
from cabinet_panels.web.schemas.responses import (
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_templates(manager: TemplateManagerDep) -> TemplateListSchema:
    """List all available templates."""
    templates = [
        TemplateListItemSchema(name=name, description=desc)
        for name, desc in manager.list_templates()
    ]
    return TemplateListSchema(templates=templates)


@router.get("/{name}", response_model=TemplateContentSchema)
async def get_template(name: str, manager: TemplateManagerDep) -> TemplateContentSchema:
    """Get the content of a specific template.

    Raises:
        TemplateNotFoundError: If the template does not exist (handled by the
            exception handler as a 404).
    """
    return TemplateContentSchema(
        name=name,
        description=TEMPLATE_METADATA.get(name, ""),
        content=manager.get_template_data(name),
    )
