"""STL export functionality using numpy-stl."""

from pathlib import Path

import numpy as np
from stl import mesh

from cabinet_panels.domain import BoundingBox3D, Panel3DMapper, PanelList
from cabinet_panels.domain.services import DoorSwing


class StlMeshBuilder:
    """Builds STL meshes from 3D bounding boxes.

    Cabinet-local coordinates are already Y-up, matching most STL viewers,
    so vertices are written unchanged. Each box becomes 12 triangles wound
    so that the facet normals point outward.
    """

    def build_box_mesh(
        self, box: BoundingBox3D, swing: DoorSwing | None = None
    ) -> mesh.Mesh:
        """Create an STL mesh for a single bounding box.

        Args:
            box: The 3D bounding box to convert to a mesh.
            swing: Optional hinge rotation applied to every vertex.

        Returns:
            A numpy-stl Mesh object representing the box.
        """
        corners = box.get_vertices()
        if swing is not None:
            corners = [swing.apply(vertex) for vertex in corners]
        vertices = np.array(corners, dtype=np.float64)
        triangles = np.array(box.get_triangles())

        box_mesh = mesh.Mesh(np.zeros(len(triangles), dtype=mesh.Mesh.dtype))
        box_mesh.vectors[:] = vertices[triangles]
        return box_mesh

    def combine_meshes(self, meshes: list[mesh.Mesh]) -> mesh.Mesh:
        """Combine multiple meshes into a single mesh."""
        if not meshes:
            return mesh.Mesh(np.zeros(0, dtype=mesh.Mesh.dtype))
        return mesh.Mesh(np.concatenate([m.data for m in meshes]))


class StlExporter:
    """Exports panel lists to STL meshes.

    Args:
        mesh_builder: Optional mesh builder for dependency injection.
        door_open_angle: Degrees by which doors swing open about their
            hinge edge; 0 keeps them closed.
    """

    def __init__(
        self,
        mesh_builder: StlMeshBuilder | None = None,
        door_open_angle: float = 0.0,
    ) -> None:
        self.mesh_builder = mesh_builder or StlMeshBuilder()
        self.mapper = Panel3DMapper(door_open_angle=door_open_angle)

    def export(self, panel_list: PanelList) -> mesh.Mesh:
        """Build one combined mesh containing every physical panel."""
        meshes = []
        for panel in panel_list:
            box = self.mapper.map_panel(panel)
            swing = self.mapper.door_swing(panel)
            meshes.extend(
                self.mesh_builder.build_box_mesh(box, swing)
                for _ in range(panel.quantity)
            )
        return self.mesh_builder.combine_meshes(meshes)

    def export_to_file(self, panel_list: PanelList, filepath: Path | str) -> None:
        """Export a panel list to an STL file."""
        combined_mesh = self.export(panel_list)
        combined_mesh.update_normals()
        combined_mesh.save(str(filepath))
