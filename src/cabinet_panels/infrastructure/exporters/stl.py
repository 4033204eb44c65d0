"""STL format exporter for panel lists."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from cabinet_panels.infrastructure.exporters.base import ExporterRegistry
from cabinet_panels.infrastructure.stl_exporter import StlExporter as StlExporterImpl
from cabinet_panels.infrastructure.stl_exporter import StlMeshBuilder

if TYPE_CHECKING:
    from cabinet_panels.domain.entities import PanelList


@ExporterRegistry.register("stl")
class StlLayoutExporter:
    """Exports panel lists to binary STL for 3D visualization.

    Wraps StlExporter to conform to the Exporter protocol.

    Attributes:
        format_name: "stl"
        file_extension: "stl"
    """

    format_name: ClassVar[str] = "stl"
    file_extension: ClassVar[str] = "stl"

    def __init__(
        self,
        mesh_builder: StlMeshBuilder | None = None,
        door_open_angle: float = 0.0,
    ) -> None:
        self._exporter = StlExporterImpl(
            mesh_builder=mesh_builder, door_open_angle=door_open_angle
        )

    def export(self, panel_list: PanelList, path: Path) -> None:
        self._exporter.export_to_file(panel_list, filepath=path)

    def export_string(self, panel_list: PanelList) -> str:
        """STL output is binary and cannot be exported as a string.

        Raises:
            NotImplementedError: Always.
        """
        raise NotImplementedError(
            "STL format is binary and does not support string export. "
            "Use export() to write to a file instead."
        )
