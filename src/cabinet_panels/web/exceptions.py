"""Custom exceptions and error handlers for the REST API."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cabinet_panels.application.config import ConfigError
from cabinet_panels.application.templates import TemplateNotFoundError
from cabinet_panels.domain.errors import CabinetSpecError


class CabinetGenerationError(Exception):
    """Raised when the generate command reports errors."""

    def __init__(self, errors: list[str], details: list[dict[str, Any]]) -> None:
        self.errors = errors
        self.details = details
        super().__init__(f"Generation failed: {errors}")


class UnsupportedFormatError(Exception):
    """Raised when requested export format is not supported."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format: {format_name}. Available: {', '.join(available)}"
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(CabinetSpecError)
    async def cabinet_spec_error_handler(
        request: Request, exc: CabinetSpecError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details(),
            },
        )

    @app.exception_handler(CabinetGenerationError)
    async def generation_error_handler(
        request: Request, exc: CabinetGenerationError
    ) -> JSONResponse:
        error_type = exc.details[0]["error_type"] if exc.details else "generation"
        return JSONResponse(
            status_code=422,
            content={
                "error": "Cabinet generation failed",
                "error_type": error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(TemplateNotFoundError)
    async def template_not_found_handler(
        request: Request, exc: TemplateNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Template not found: {exc.name}",
                "error_type": "not_found",
                "details": None,
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )
