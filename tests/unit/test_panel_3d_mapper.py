"""Unit tests for Panel3DMapper.

These tests verify:
- Mapping panels to 3D bounding boxes
- Door swing rotation about the hinge edge
"""

import math

import pytest

from cabinet_panels.domain import (
    BoundingBox3D,
    Panel3DMapper,
    PanelRole,
    Position3D,
    compute_panels,
    normalize_spec,
)


@pytest.fixture
def mapper() -> Panel3DMapper:
    return Panel3DMapper()


@pytest.fixture
def door_panels():
    return compute_panels(
        normalize_spec(
            {
                "width": 900,
                "height": 1800,
                "depth": 500,
                "thickness": 18,
                "has_doors": True,
                "door_count": 2,
            }
        )
    )


class TestPanel3DMapperInit:
    def test_default_angle_is_closed(self, mapper: Panel3DMapper) -> None:
        assert mapper.door_open_angle == 0.0

    @pytest.mark.parametrize("angle", [-1.0, 180.5])
    def test_angle_out_of_range(self, angle: float) -> None:
        with pytest.raises(ValueError):
            Panel3DMapper(door_open_angle=angle)


class TestMapPanel:
    """Tests for single panel mapping."""

    def test_left_side(self, mapper: Panel3DMapper, wardrobe_panels) -> None:
        left = wardrobe_panels.panels[0]

        box = mapper.map_panel(left)

        assert isinstance(box, BoundingBox3D)
        assert box.origin == Position3D(-450, 0, -250)
        assert (box.size_x, box.size_y, box.size_z) == (18, 1800, 500)

    def test_backing(self, mapper: Panel3DMapper, wardrobe_panels) -> None:
        backing = wardrobe_panels.by_role(PanelRole.BACKING)[0]

        box = mapper.map_panel(backing)

        assert box.origin.x == pytest.approx(-439.5)
        assert box.origin.y == pytest.approx(101.5)
        assert box.origin.z == pytest.approx(-233.5)
        assert box.max_corner.z == pytest.approx(-230.5)

    def test_boxes_match_panel_corners(
        self, mapper: Panel3DMapper, wardrobe_panels
    ) -> None:
        for panel in wardrobe_panels:
            box = mapper.map_panel(panel)
            assert box.origin == panel.min_corner
            assert box.max_corner.as_tuple() == pytest.approx(
                panel.max_corner.as_tuple()
            )


class TestDoorSwing:
    def test_no_swing_when_closed(self, mapper: Panel3DMapper, door_panels) -> None:
        door = door_panels.by_role(PanelRole.DOOR)[0]

        assert mapper.door_swing(door) is None

    def test_no_swing_for_carcass(self, door_panels) -> None:
        mapper = Panel3DMapper(door_open_angle=90)

        assert mapper.door_swing(door_panels.panels[0]) is None

    def test_left_door_swings_forward(self, door_panels) -> None:
        mapper = Panel3DMapper(door_open_angle=90)
        left_door = door_panels.by_role(PanelRole.DOOR)[0]
        box = mapper.map_panel(left_door)

        swing = mapper.door_swing(left_door)

        assert swing is not None
        assert swing.pivot_x == pytest.approx(box.origin.x)
        free_edge = (box.max_corner.x, 900.0, box.origin.z)
        x, y, z = swing.apply(free_edge)
        assert x == pytest.approx(box.origin.x)
        assert y == 900.0
        assert z == pytest.approx(box.origin.z + box.size_x)

    def test_right_door_swings_forward(self, door_panels) -> None:
        mapper = Panel3DMapper(door_open_angle=90)
        right_door = door_panels.by_role(PanelRole.DOOR)[1]
        box = mapper.map_panel(right_door)

        swing = mapper.door_swing(right_door)

        assert swing.pivot_x == pytest.approx(box.max_corner.x)
        x, _, z = swing.apply((box.origin.x, 0.0, box.origin.z))
        assert x == pytest.approx(box.max_corner.x)
        assert z == pytest.approx(box.origin.z + box.size_x)

    def test_hinge_edge_stays_put(self, door_panels) -> None:
        mapper = Panel3DMapper(door_open_angle=45)
        left_door = door_panels.by_role(PanelRole.DOOR)[0]
        box = mapper.map_panel(left_door)

        swing = mapper.door_swing(left_door)

        assert swing.angle == pytest.approx(-math.radians(45))
        hinge = (box.origin.x, 10.0, box.origin.z)
        assert swing.apply(hinge) == pytest.approx(hinge)
