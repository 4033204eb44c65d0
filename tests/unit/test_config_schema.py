"""Unit tests for the Pydantic configuration schema.

These tests verify:
- Required fields and defaults
- Dimension, count and angle bounds
- Schema version acceptance
- Rejection of unknown fields and output formats
"""

import pytest
from pydantic import ValidationError

from cabinet_panels.application.config import (
    CabinetConfig,
    CabinetConfiguration,
    DistributionConfig,
    DoorsConfig,
    KickplateConfig,
    OutputConfig,
)
from cabinet_panels.domain import DistributionMode, HingeStyle, RoofStyle


class TestCabinetConfig:
    """Tests for the cabinet section."""

    def test_defaults(self) -> None:
        cabinet = CabinetConfig(width=900, height=1800, depth=500)

        assert cabinet.thickness == 18.0
        assert cabinet.roof_style is RoofStyle.BETWEEN
        assert cabinet.backing is False
        assert cabinet.kickplate.enabled is False
        assert cabinet.distribution.mode is DistributionMode.HORIZONTAL
        assert cabinet.distribution.primary_count == 0
        assert cabinet.doors.enabled is False
        assert cabinet.doors.hinge_style is HingeStyle.LATERAL
        assert cabinet.doors.count == 2

    def test_width_is_required(self) -> None:
        with pytest.raises(ValidationError):
            CabinetConfig(height=1800, depth=500)

    @pytest.mark.parametrize(
        ("field", "value"),
        [("width", 99), ("width", 3001), ("depth", 1201), ("thickness", 2)],
    )
    def test_dimension_bounds(self, field: str, value: float) -> None:
        data = {"width": 900, "height": 1800, "depth": 500, field: value}

        with pytest.raises(ValidationError):
            CabinetConfig(**data)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CabinetConfig(width=900, height=1800, depth=500, colour="white")

    def test_enum_values_from_strings(self) -> None:
        cabinet = CabinetConfig.model_validate(
            {
                "width": 900,
                "height": 1800,
                "depth": 500,
                "roof_style": "over",
                "distribution": {"mode": "vertical"},
                "doors": {"hinge_style": "internal"},
            }
        )

        assert cabinet.roof_style is RoofStyle.OVER
        assert cabinet.distribution.mode is DistributionMode.VERTICAL
        assert cabinet.doors.hinge_style is HingeStyle.INTERNAL

    def test_unknown_roof_style(self) -> None:
        with pytest.raises(ValidationError):
            CabinetConfig.model_validate(
                {"width": 900, "height": 1800, "depth": 500, "roof_style": "gable"}
            )


class TestSubSections:
    def test_enabled_kickplate_needs_height(self) -> None:
        with pytest.raises(ValidationError, match="Kickplate height must be positive"):
            KickplateConfig(enabled=True, height=0)

    def test_disabled_kickplate_allows_zero_height(self) -> None:
        assert KickplateConfig(enabled=False, height=0).height == 0

    def test_secondary_count_bounds(self) -> None:
        with pytest.raises(ValidationError, match="between 0 and 20"):
            DistributionConfig(primary_count=1, secondary_counts=[0, 21])

    def test_primary_count_bound(self) -> None:
        with pytest.raises(ValidationError):
            DistributionConfig(primary_count=51)

    def test_door_count_bound(self) -> None:
        with pytest.raises(ValidationError):
            DoorsConfig(count=11)


class TestOutputConfig:
    def test_defaults(self) -> None:
        output = OutputConfig()

        assert output.format == "all"
        assert output.formats == []
        assert output.project_name == "cabinet"
        assert output.door_open_angle == 0.0

    def test_valid_formats(self) -> None:
        assert OutputConfig(formats=["stl", "svg", "all"]).formats == [
            "stl",
            "svg",
            "all",
        ]

    def test_invalid_format(self) -> None:
        with pytest.raises(ValidationError, match="Invalid formats"):
            OutputConfig(formats=["stl", "pdf"])

    def test_door_open_angle_bound(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(door_open_angle=181)

    def test_console_format_literal(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(format="yaml")


class TestSchemaVersion:
    @pytest.mark.parametrize("version", ["1.0", "1.3"])
    def test_supported(self, version: str, wardrobe_config_data) -> None:
        wardrobe_config_data["schema_version"] = version

        config = CabinetConfiguration.model_validate(wardrobe_config_data)

        assert config.schema_version == version

    @pytest.mark.parametrize("version", ["2.0", "1", "one"])
    def test_rejected(self, version: str, wardrobe_config_data) -> None:
        wardrobe_config_data["schema_version"] = version

        with pytest.raises(ValidationError):
            CabinetConfiguration.model_validate(wardrobe_config_data)
