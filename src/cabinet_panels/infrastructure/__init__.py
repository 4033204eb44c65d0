"""Infrastructure layer - exporters and output formatting."""

from .exporters import ExporterRegistry, ExportManager
from .formatters import CutListFormatter, JsonExporter, PanelListFormatter
from .schematic_renderer import SchematicRenderer, project_front
from .stl_exporter import StlExporter, StlMeshBuilder

__all__ = [
    "CutListFormatter",
    "ExportManager",
    "ExporterRegistry",
    "JsonExporter",
    "PanelListFormatter",
    "SchematicRenderer",
    "StlExporter",
    "StlMeshBuilder",
    "project_front",
]
