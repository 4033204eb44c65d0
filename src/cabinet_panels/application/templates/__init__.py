"""Bundled cabinet configuration templates."""

from cabinet_panels.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = ["TEMPLATE_METADATA", "TemplateManager", "TemplateNotFoundError"]
