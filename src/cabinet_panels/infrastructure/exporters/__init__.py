"""Exporters for panel lists.

Importing this package registers every built-in exporter with the
ExporterRegistry.
"""

from .base import Exporter, ExporterRegistry, ExportManager
from .bom import BillOfMaterials, BomGenerator
from .dxf import DxfExporter
from .panel_json import PanelListJsonExporter
from .stl import StlLayoutExporter
from .svg import SvgExporter

__all__ = [
    "BillOfMaterials",
    "BomGenerator",
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "PanelListJsonExporter",
    "StlLayoutExporter",
    "SvgExporter",
]
