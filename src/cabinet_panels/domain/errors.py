"""Errors raised by the panel decomposition engine.

Every error carries enough context (which input field, axis, cell or level
failed) for a consumer to highlight the offending input.
"""

from __future__ import annotations

from typing import Any


class CabinetSpecError(Exception):
    """Base class for cabinet specification and geometry errors.

    Attributes:
        message: Human-readable description of the failure.
        field: Name of the specification field at fault, if any.
        axis: Axis along which the failure occurred ("width", "height", "depth").
        level: Decomposition level ("carcass", "primary", "secondary", "doors").
        cell_index: Index of the cell at fault for secondary-level failures.
    """

    error_type = "cabinet_spec"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        axis: str | None = None,
        level: str | None = None,
        cell_index: int | None = None,
        value: Any = None,
    ) -> None:
        self.message = message
        self.field = field
        self.axis = axis
        self.level = level
        self.cell_index = cell_index
        self.value = value
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def details(self) -> dict[str, Any]:
        """Return the error context as a JSON-friendly dictionary."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "field": self.field,
            "axis": self.axis,
            "level": self.level,
            "cell_index": self.cell_index,
            "value": self.value,
        }


class InvalidDimensionError(CabinetSpecError):
    """Raised when a base dimension or thickness is malformed or cannot close the carcass."""

    error_type = "invalid_dimension"


class InvalidOptionError(CabinetSpecError):
    """Raised when an enumerated option has an unknown value."""

    error_type = "invalid_option"


class GeometryOverflowError(CabinetSpecError):
    """Raised when a member or door count leaves no positive clear gap.

    Attributes:
        count: Number of members or doors requested.
        span: Clear span available at the failing level.
    """

    error_type = "geometry_overflow"

    def __init__(
        self,
        message: str,
        *,
        count: int | None = None,
        span: float | None = None,
        **kwargs: Any,
    ) -> None:
        self.count = count
        self.span = span
        super().__init__(message, **kwargs)

    def details(self) -> dict[str, Any]:
        result = super().details()
        result["count"] = self.count
        result["span"] = self.span
        return result
