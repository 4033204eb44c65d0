"""Configuration schema and loading system for cabinet specifications.

This package provides JSON-based configuration loading and validation
for cabinet specifications: Pydantic models for schema validation, a
loader with structured error reporting, CLI override merging and
woodworking advisory checks.

Example:
    >>> from pathlib import Path
    >>> from cabinet_panels.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("wardrobe.json"))
    ...     print(f"Cabinet: {config.cabinet.width}x{config.cabinet.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cabinet_panels.application.config.adapter import (
    FIELD_PATHS,
    config_to_raw,
    error_config_path,
)
from cabinet_panels.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cabinet_panels.application.config.merger import merge_config_with_cli
from cabinet_panels.application.config.schema import (
    SUPPORTED_VERSIONS,
    VALID_OUTPUT_FORMATS,
    CabinetConfig,
    CabinetConfiguration,
    DistributionConfig,
    DoorsConfig,
    KickplateConfig,
    OutputConfig,
)
from cabinet_panels.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_woodworking_advisories,
    validate_config,
)

__all__ = [
    "CabinetConfig",
    "CabinetConfiguration",
    "ConfigError",
    "DistributionConfig",
    "DoorsConfig",
    "FIELD_PATHS",
    "KickplateConfig",
    "OutputConfig",
    "SUPPORTED_VERSIONS",
    "VALID_OUTPUT_FORMATS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_woodworking_advisories",
    "config_to_raw",
    "error_config_path",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
