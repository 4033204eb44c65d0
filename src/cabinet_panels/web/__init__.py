"""FastAPI REST API for cabinet panel decomposition.

Usage:
    uvicorn cabinet_panels.web:app --reload
"""

from cabinet_panels.web.app import app, create_app

__all__ = ["app", "create_app"]
