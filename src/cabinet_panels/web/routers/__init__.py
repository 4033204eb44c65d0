"""API routers for the REST API."""

from cabinet_panels.web.routers.export import router as export_router
from cabinet_panels.web.routers.generate import router as generate_router
from cabinet_panels.web.routers.templates import router as templates_router
from cabinet_panels.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "generate_router",
    "templates_router",
    "validate_router",
]
