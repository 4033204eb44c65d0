"""Base exporter framework with Protocol, Registry, and Manager.

Every exporter is a thin adapter over a PanelList: it may re-project or
regroup the panels but never computes geometry of its own.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cabinet_panels.domain.entities import PanelList


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Attributes:
        format_name: Registry name of the export format (e.g., "stl", "svg").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, panel_list: PanelList, path: Path) -> None:
        """Write the panel list to a file."""
        ...

    def export_string(self, panel_list: PanelList) -> str:
        """Render the panel list as a string.

        Raises:
            NotImplementedError: If the format is binary (e.g. STL).
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the ``@ExporterRegistry.register``
    decorator when the ``exporters`` package is imported.

    Example:
        @ExporterRegistry.register("json")
        class JsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator registering an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Clear all registered exporters (used by tests)."""
        cls._exporters.clear()


class ExportManager:
    """Exports a panel list to several formats in one directory.

    Attributes:
        output_dir: Directory where exported files will be saved.
        exporter_options: Keyword arguments per format name, passed to the
            exporter constructor.
    """

    def __init__(
        self,
        output_dir: Path,
        exporter_options: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.exporter_options = exporter_options or {}

    def create_exporter(self, format_name: str) -> Exporter:
        exporter_class = ExporterRegistry.get(format_name)
        return exporter_class(**self.exporter_options.get(format_name, {}))

    def export_all(
        self,
        formats: list[str],
        panel_list: PanelList,
        project_name: str = "cabinet",
    ) -> dict[str, Path]:
        """Export a panel list to multiple formats.

        Files are named ``{project_name}_{format}.{ext}``.

        Returns:
            Mapping of format names to written file paths.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        # Resolve every exporter first so an unknown format writes nothing
        exporters = [(name, self.create_exporter(name)) for name in formats]
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter in exporters:
            filepath = self.output_dir / f"{project_name}_{format_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(panel_list, filepath)
            results[format_name] = filepath
        return results

    def export_single(
        self,
        format_name: str,
        panel_list: PanelList,
        project_name: str = "cabinet",
    ) -> Path:
        """Export a panel list to one format and return the file path."""
        return self.export_all([format_name], panel_list, project_name)[format_name]
