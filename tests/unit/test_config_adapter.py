"""Unit tests for the configuration to engine adapter."""

from cabinet_panels.application.config import (
    FIELD_PATHS,
    config_to_raw,
    error_config_path,
    load_config_from_dict,
)
from cabinet_panels.domain import (
    GeometryOverflowError,
    InvalidDimensionError,
    compute_panels,
    normalize_spec,
)


class TestConfigToRaw:
    def test_wardrobe(self, wardrobe_config_data, wardrobe_raw) -> None:
        raw = config_to_raw(load_config_from_dict(wardrobe_config_data))

        for key, value in wardrobe_raw.items():
            assert raw[key] == value
        assert raw["hinge_style"] == "lateral"
        assert raw["door_count"] == 2

    def test_raw_matches_direct_spec(self, wardrobe_config_data, wardrobe_spec) -> None:
        raw = config_to_raw(load_config_from_dict(wardrobe_config_data))

        assert normalize_spec(raw) == wardrobe_spec

    def test_disabled_kickplate_is_ignored(self, wardrobe_config_data) -> None:
        wardrobe_config_data["cabinet"]["kickplate"] = {"enabled": False, "height": 100}

        spec = normalize_spec(config_to_raw(load_config_from_dict(wardrobe_config_data)))
        panel_list = compute_panels(spec)

        assert spec.kickplate_height == 0
        assert panel_list.clear.bottom == 18

    def test_every_raw_key_has_a_path(self, wardrobe_config_data) -> None:
        raw = config_to_raw(load_config_from_dict(wardrobe_config_data))

        assert set(raw) == set(FIELD_PATHS)


class TestErrorConfigPath:
    def test_simple_field(self) -> None:
        error = InvalidDimensionError("bad", field="thickness")

        assert error_config_path(error) == "cabinet.thickness"

    def test_nested_field(self) -> None:
        error = GeometryOverflowError("overflow", field="door_count", level="doors")

        assert error_config_path(error) == "cabinet.doors.count"

    def test_secondary_count_with_cell(self) -> None:
        error = GeometryOverflowError(
            "overflow", field="secondary_counts", level="secondary", cell_index=1
        )

        assert error_config_path(error) == "cabinet.distribution.secondary_counts[1]"

    def test_no_field(self) -> None:
        assert error_config_path(GeometryOverflowError("overflow")) == "cabinet"
