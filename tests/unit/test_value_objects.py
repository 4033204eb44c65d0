"""Unit tests for domain value objects.

These tests verify:
- Dimensions3D validation and axis access
- ClearBox derived edges
- PanelRole grouping helpers
- CutPiece validation, area and rounding
- BoundingBox3D construction from a centroid
"""

import pytest

from cabinet_panels.domain.value_objects import (
    Axis,
    BoundingBox3D,
    ClearBox,
    CutPiece,
    Dimensions3D,
    MaterialType,
    PanelRole,
    Position3D,
)


class TestDimensions3D:
    def test_along_axis(self) -> None:
        dims = Dimensions3D(864, 18, 480)

        assert dims.along(Axis.X) == 864
        assert dims.along(Axis.Y) == 18
        assert dims.along(Axis.Z) == 480
        assert dims.volume == 864 * 18 * 480

    @pytest.mark.parametrize("dims", [(0, 1, 1), (1, -1, 1), (1, 1, 0)])
    def test_non_positive_extent_rejected(self, dims) -> None:
        with pytest.raises(ValueError, match="positive"):
            Dimensions3D(*dims)


class TestClearBox:
    def test_edges(self) -> None:
        clear = ClearBox(
            width=864, height=1664, depth=480, left=-432, bottom=118, depth_offset=10
        )

        assert clear.right == pytest.approx(432)
        assert clear.top == pytest.approx(1782)


class TestPanelRole:
    def test_carcass_roles(self) -> None:
        assert PanelRole.SIDE.is_carcass
        assert PanelRole.BACKING.is_carcass
        assert not PanelRole.DOOR.is_carcass
        assert not PanelRole.PRIMARY_MEMBER.is_carcass

    def test_internal_roles(self) -> None:
        assert PanelRole.PRIMARY_MEMBER.is_internal
        assert PanelRole.SECONDARY_MEMBER.is_internal
        assert not PanelRole.FLOOR.is_internal

    def test_material_display_names(self) -> None:
        assert MaterialType.MELAMINE.display_name == "Melamine"
        assert MaterialType.MDF.display_name == "MDF"


class TestCutPiece:
    def _piece(self, **overrides) -> CutPiece:
        values = {
            "label": "Shelf",
            "role": PanelRole.PRIMARY_MEMBER,
            "length": 864.0,
            "width": 479.6,
            "thickness": 18.0,
            "quantity": 3,
            "material": MaterialType.MELAMINE,
        }
        values.update(overrides)
        return CutPiece(**values)

    def test_area_counts_every_piece(self) -> None:
        assert self._piece().area == pytest.approx(864.0 * 479.6 * 3)

    def test_display_dimensions_round_to_millimetres(self) -> None:
        assert self._piece().display_dimensions == (864, 480, 18)

    def test_zero_quantity_rejected(self) -> None:
        with pytest.raises(ValueError, match="Quantity"):
            self._piece(quantity=0)

    def test_non_positive_dimension_rejected(self) -> None:
        with pytest.raises(ValueError):
            self._piece(width=0)


class TestBoundingBox3D:
    def test_from_center(self) -> None:
        box = BoundingBox3D.from_center(Position3D(0, 909, 0), (864, 18, 500))

        assert box.origin == Position3D(-432, 900, -250)
        assert box.max_corner == Position3D(432, 918, 250)

    def test_eight_vertices_twelve_triangles(self) -> None:
        box = BoundingBox3D(Position3D(0, 0, 0), 1, 2, 3)

        assert len(box.get_vertices()) == 8
        assert len(box.get_triangles()) == 12

    def test_non_positive_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            BoundingBox3D(Position3D(0, 0, 0), 1, 0, 3)
