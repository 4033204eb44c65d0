"""Configuration file loader.

Loads JSON cabinet configuration files and reports file system, JSON and
schema problems as a single ConfigError type with machine-readable details.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabinet_panels.application.config.schema import CabinetConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, one entry
            per failing field for validation)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("cabinet", "width"))
        'cabinet.width'
        >>> _format_json_path(("cabinet", "distribution", "secondary_counts", 2))
        'cabinet.distribution.secondary_counts[2]'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path = f"{path}.{segment}" if path else str(segment)
    return path


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        if detail.get("value") is not None and not isinstance(detail["value"], dict):
            line += f" (got: {detail['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> CabinetConfiguration:
    try:
        return CabinetConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> CabinetConfiguration:
    """Load and validate a cabinet configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated CabinetConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            error_type attribute tells which step failed.

    Example:
        >>> try:
        ...     config = load_config(Path("wardrobe.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> CabinetConfiguration:
    """Validate a cabinet configuration held in a dictionary.

    Used for API requests and bundled templates.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
