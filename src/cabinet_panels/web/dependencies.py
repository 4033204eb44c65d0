"""FastAPI dependency injection for cabinet services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cabinet_panels.application.commands import GenerateLayoutCommand
from cabinet_panels.application.factory import ServiceFactory, get_factory
from cabinet_panels.application.templates import TemplateManager


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_generate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> GenerateLayoutCommand:
    return factory.create_generate_command()


def get_template_manager() -> TemplateManager:
    return TemplateManager()


ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
GenerateCommandDep = Annotated[GenerateLayoutCommand, Depends(get_generate_command)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]
