"""Validation structures and woodworking advisory checks.

Blocking errors come from running the configuration through the panel
decomposition engine; advisories inspect the resulting panels against
common woodworking practice and never block generation.
"""

from dataclasses import dataclass, field
from typing import Any

from cabinet_panels.application.config.adapter import config_to_raw, error_config_path
from cabinet_panels.application.config.schema import CabinetConfiguration
from cabinet_panels.domain.entities import PanelList
from cabinet_panels.domain.errors import CabinetSpecError
from cabinet_panels.domain.services import compute_panels, normalize_spec
from cabinet_panels.domain.value_objects import Axis, PanelRole

# Woodworking advisory thresholds, in millimetres
MAX_SHELF_SPAN = 800.0
MIN_CELL_SIZE = 100.0
MAX_DOOR_WIDTH = 600.0
MIN_RECOMMENDED_THICKNESS = 15.0


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "cabinet.doors.count")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 when clean, 1 on errors, 2 on warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_woodworking_advisories(
    config: CabinetConfiguration, panel_list: PanelList
) -> ValidationResult:
    """Check a computed panel list against woodworking best practices.

    Advisories checked:
    - Shelves spanning more than MAX_SHELF_SPAN without support
    - Cells or sub-spaces narrower than MIN_CELL_SIZE
    - Doors wider than MAX_DOOR_WIDTH
    - Board thickness below MIN_RECOMMENDED_THICKNESS

    Args:
        config: A validated CabinetConfiguration instance
        panel_list: The panel list computed from the configuration

    Returns:
        ValidationResult containing any warnings found
    """
    result = ValidationResult()
    distribution_path = "cabinet.distribution"

    longest_span = max(
        (
            panel.dimensions.x
            for panel in panel_list
            if panel.role.is_internal and panel.normal is Axis.Y
        ),
        default=0.0,
    )
    if longest_span > MAX_SHELF_SPAN:
        result.add_warning(
            path=distribution_path,
            message=(
                f"Shelf span of {longest_span:.0f} mm exceeds recommended "
                f"{MAX_SHELF_SPAN:.0f} mm"
            ),
            suggestion="Add a vertical divider or use thicker board to avoid sagging",
        )

    for cell in panel_list.cells:
        cell_path = f"{distribution_path}.secondary_counts[{cell.index}]"
        smallest = min(cell.width, cell.height)
        if cell.secondary_count:
            smallest = min(smallest, cell.secondary_gap)
        if smallest < MIN_CELL_SIZE:
            result.add_warning(
                path=cell_path,
                message=(
                    f"Cell {cell.index + 1} has a clear space of only "
                    f"{smallest:.0f} mm"
                ),
                suggestion=f"Keep spaces at least {MIN_CELL_SIZE:.0f} mm wide",
            )

    doors = panel_list.by_role(PanelRole.DOOR)
    if doors and doors[0].dimensions.x > MAX_DOOR_WIDTH:
        result.add_warning(
            path="cabinet.doors.count",
            message=(
                f"Door width of {doors[0].dimensions.x:.0f} mm exceeds "
                f"recommended {MAX_DOOR_WIDTH:.0f} mm"
            ),
            suggestion="Increase the door count",
        )

    thickness = config.cabinet.thickness
    if thickness < MIN_RECOMMENDED_THICKNESS:
        result.add_warning(
            path="cabinet.thickness",
            message=(
                f"Board thickness of {thickness:g} mm is below recommended "
                f"minimum of {MIN_RECOMMENDED_THICKNESS:g} mm"
            ),
            suggestion="Use at least 15 mm board for structural panels",
        )

    return result


def validate_config(config: CabinetConfiguration) -> ValidationResult:
    """Perform full validation of a cabinet configuration.

    Args:
        config: A CabinetConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()

    try:
        spec = normalize_spec(config_to_raw(config))
        panel_list = compute_panels(spec)
    except CabinetSpecError as e:
        return result.add_error(error_config_path(e), e.message, e.value)

    return result.merge(check_woodworking_advisories(config, panel_list))
