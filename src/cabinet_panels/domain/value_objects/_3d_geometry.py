"""3D geometry value objects for mesh consumers."""

from __future__ import annotations

from dataclasses import dataclass

from ._core_geometry import Position3D


@dataclass(frozen=True)
class BoundingBox3D:
    """Axis-aligned 3D box representing a placed panel.

    The origin is the minimum corner (left, bottom, back) in cabinet-local
    coordinates, which are Y-up.
    """

    origin: Position3D
    size_x: float  # Width (left to right)
    size_y: float  # Height (bottom to top)
    size_z: float  # Depth (back to front)

    def __post_init__(self) -> None:
        if self.size_x <= 0 or self.size_y <= 0 or self.size_z <= 0:
            raise ValueError("Bounding box dimensions must be positive")

    @classmethod
    def from_center(
        cls, center: Position3D, size: tuple[float, float, float]
    ) -> "BoundingBox3D":
        """Build a box from its centroid and extents."""
        sx, sy, sz = size
        return cls(
            origin=Position3D(center.x - sx / 2, center.y - sy / 2, center.z - sz / 2),
            size_x=sx,
            size_y=sy,
            size_z=sz,
        )

    @property
    def max_corner(self) -> Position3D:
        return Position3D(
            self.origin.x + self.size_x,
            self.origin.y + self.size_y,
            self.origin.z + self.size_z,
        )

    def get_vertices(self) -> list[tuple[float, float, float]]:
        """Return 8 corner vertices of the box."""
        x0, y0, z0 = self.origin.x, self.origin.y, self.origin.z
        x1, y1, z1 = x0 + self.size_x, y0 + self.size_y, z0 + self.size_z
        return [
            (x0, y0, z0),  # 0: bottom-back-left
            (x1, y0, z0),  # 1: bottom-back-right
            (x1, y0, z1),  # 2: bottom-front-right
            (x0, y0, z1),  # 3: bottom-front-left
            (x0, y1, z0),  # 4: top-back-left
            (x1, y1, z0),  # 5: top-back-right
            (x1, y1, z1),  # 6: top-front-right
            (x0, y1, z1),  # 7: top-front-left
        ]

    def get_triangles(self) -> list[tuple[int, int, int]]:
        """Return 12 triangles (as vertex indices) forming the 6 box faces.

        Winding is counter-clockwise seen from outside, so the right-hand
        normals point outward.
        """
        return [
            # Bottom face (y=min)
            (0, 1, 2),
            (0, 2, 3),
            # Top face (y=max)
            (4, 6, 5),
            (4, 7, 6),
            # Back face (z=min)
            (0, 5, 1),
            (0, 4, 5),
            # Front face (z=max)
            (3, 2, 6),
            (3, 6, 7),
            # Left face (x=min)
            (0, 3, 7),
            (0, 7, 4),
            # Right face (x=max)
            (1, 5, 6),
            (1, 6, 2),
        ]
