"""Unit tests for normalize_spec.

These tests verify:
- Defaults for omitted options
- Clamping of member counts and padding of per-cell secondary counts
- Case-insensitive option parsing and rejection of unknown options
- Rejection of dimensions that cannot close the carcass
"""

import math

import pytest

from cabinet_panels.domain import (
    DistributionMode,
    HingeStyle,
    InvalidDimensionError,
    InvalidOptionError,
    RoofStyle,
    normalize_spec,
)

BASE = {"width": 900, "height": 1800, "depth": 500, "thickness": 18}


def _raw(**overrides):
    return {**BASE, **overrides}


class TestDefaults:
    """Tests for values filled in when options are omitted."""

    def test_minimal_input_uses_defaults(self) -> None:
        spec = normalize_spec(BASE)

        assert spec.roof_style is RoofStyle.BETWEEN
        assert spec.distribution_mode is DistributionMode.HORIZONTAL
        assert spec.hinge_style is HingeStyle.LATERAL
        assert spec.has_kickplate is False
        assert spec.has_backing is False
        assert spec.has_doors is False
        assert spec.door_count == 2
        assert spec.primary_count == 0
        assert spec.secondary_counts == (0,)

    def test_kickplate_height_ignored_without_kickplate(self) -> None:
        spec = normalize_spec(_raw(kickplate_height=150))

        assert spec.kickplate_height == 0.0
        assert spec.effective_kickplate_height == 0.0

    def test_numeric_strings_are_accepted(self) -> None:
        spec = normalize_spec(_raw(width="900", thickness="18"))

        assert spec.width == 900.0
        assert spec.thickness == 18.0


class TestCounts:
    """Tests for clamping primary and secondary counts."""

    @pytest.mark.parametrize("value", [-3, None, "many", math.nan, math.inf, True])
    def test_unusable_primary_count_becomes_zero(self, value) -> None:
        spec = normalize_spec(_raw(primary_count=value))

        assert spec.primary_count == 0

    def test_fractional_primary_count_is_truncated(self) -> None:
        spec = normalize_spec(_raw(primary_count=2.7))

        assert spec.primary_count == 2

    def test_secondary_counts_padded_to_cell_count(self) -> None:
        spec = normalize_spec(_raw(primary_count=3, secondary_counts=[1]))

        assert spec.secondary_counts == (1, 0, 0, 0)

    def test_secondary_counts_truncated_to_cell_count(self) -> None:
        spec = normalize_spec(_raw(primary_count=1, secondary_counts=[1, 2, 3, 4]))

        assert spec.secondary_counts == (1, 2)

    def test_negative_secondary_counts_clamped(self) -> None:
        spec = normalize_spec(_raw(primary_count=1, secondary_counts=[-2, "x"]))

        assert spec.secondary_counts == (0, 0)

    def test_cells_are_indexed_from_zero(self) -> None:
        spec = normalize_spec(_raw(primary_count=2, secondary_counts=[0, 1, 2]))

        assert [cell.index for cell in spec.cells] == [0, 1, 2]

    @pytest.mark.parametrize("value", ["two", None, math.inf, math.nan, 2.9, True])
    def test_unusable_door_count_rejected(self, value) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            normalize_spec(_raw(has_doors=True, door_count=value))

        assert exc_info.value.field == "door_count"
        assert exc_info.value.level == "doors"

    def test_whole_number_door_count_accepted(self) -> None:
        assert normalize_spec(_raw(has_doors=True, door_count="3")).door_count == 3
        assert normalize_spec(_raw(has_doors=True, door_count=4.0)).door_count == 4

    def test_zero_door_count_left_for_the_door_layout(self) -> None:
        assert normalize_spec(_raw(has_doors=True, door_count=0)).door_count == 0

    @pytest.mark.parametrize("value", ["n/a", math.inf, 2.9])
    def test_door_count_ignored_without_doors(self, value) -> None:
        spec = normalize_spec(_raw(has_doors=False, door_count=value))

        assert not spec.has_doors
        assert spec.door_count == 2


class TestOptions:
    """Tests for enumerated options."""

    def test_options_are_case_insensitive(self) -> None:
        spec = normalize_spec(
            _raw(roof_style="OVER", distribution_mode=" Vertical ", hinge_style="Central")
        )

        assert spec.roof_style is RoofStyle.OVER
        assert spec.distribution_mode is DistributionMode.VERTICAL
        assert spec.hinge_style is HingeStyle.CENTRAL

    def test_enum_values_pass_through(self) -> None:
        spec = normalize_spec(_raw(hinge_style=HingeStyle.INTERNAL))

        assert spec.hinge_style is HingeStyle.INTERNAL

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(InvalidOptionError) as exc_info:
            normalize_spec(_raw(roof_style="sloped"))

        assert exc_info.value.field == "roof_style"
        assert exc_info.value.value == "sloped"
        assert "between" in exc_info.value.message


class TestInvalidDimensions:
    """Tests for dimensions that cannot form a carcass."""

    @pytest.mark.parametrize("field", ["width", "height", "depth", "thickness"])
    def test_missing_dimension_rejected(self, field: str) -> None:
        raw = dict(BASE)
        del raw[field]

        with pytest.raises(InvalidDimensionError) as exc_info:
            normalize_spec(raw)

        assert exc_info.value.field == field

    @pytest.mark.parametrize("value", [0, -10, math.nan, math.inf, "wide"])
    def test_non_positive_or_non_finite_width_rejected(self, value) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            normalize_spec(_raw(width=value))

        assert exc_info.value.field == "width"

    def test_thickness_closing_width_rejected(self) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            normalize_spec(_raw(width=36, thickness=18))

        assert exc_info.value.field == "thickness"
        assert exc_info.value.axis == "width"

    def test_thickness_closing_height_rejected(self) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            normalize_spec(_raw(height=30, thickness=18))

        assert exc_info.value.axis == "height"

    def test_kickplate_leaving_no_internal_height_rejected(self) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            normalize_spec(_raw(has_kickplate=True, kickplate_height=1764))

        assert exc_info.value.field == "kickplate_height"

    def test_enabled_kickplate_needs_positive_height(self) -> None:
        with pytest.raises(InvalidDimensionError):
            normalize_spec(_raw(has_kickplate=True, kickplate_height=0))

    def test_error_details_are_serializable(self) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            normalize_spec(_raw(depth=-1))

        details = exc_info.value.details()
        assert details["error_type"] == "invalid_dimension"
        assert details["field"] == "depth"
        assert details["value"] == -1


class TestFlags:
    """Tests for boolean options given as strings or numbers."""

    @pytest.mark.parametrize("value", ["false", "False", " no ", "off", "0", 0, None])
    def test_false_values(self, value) -> None:
        spec = normalize_spec(_raw(has_backing=value))

        assert spec.has_backing is False

    @pytest.mark.parametrize("value", ["true", "YES", "on", "1", 1, True])
    def test_true_values(self, value) -> None:
        spec = normalize_spec(_raw(has_backing=value))

        assert spec.has_backing is True

    def test_string_false_keeps_doors_off(self) -> None:
        spec = normalize_spec(_raw(has_doors="false", door_count="n/a"))

        assert not spec.has_doors

    @pytest.mark.parametrize("value", ["maybe", 2, 0.5, [True]])
    def test_unrecognized_flag_rejected(self, value) -> None:
        with pytest.raises(InvalidOptionError) as exc_info:
            normalize_spec(_raw(has_kickplate=value, kickplate_height=100))

        assert exc_info.value.field == "has_kickplate"
