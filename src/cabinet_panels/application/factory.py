"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cabinet_panels.application.commands import GenerateLayoutCommand
    from cabinet_panels.domain.services import (
        CutListGenerator,
        PanelDecompositionService,
    )
    from cabinet_panels.infrastructure.exporters import ExportManager
    from cabinet_panels.infrastructure.formatters import (
        CutListFormatter,
        PanelListFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation so tests can inject replacements and
    the CLI and web layers share one wiring. Domain services are stateless
    and cached; formatters and exporters are created per call.

    Example:
        ```python
        factory = ServiceFactory()
        command = factory.create_generate_command()
        output = command.execute({"width": 900, "height": 1800, ...})
        ```
    """

    door_open_angle: float = 0.0

    _decomposition_service: "PanelDecompositionService | None" = field(
        default=None, init=False, repr=False
    )
    _cut_list_generator: "CutListGenerator | None" = field(
        default=None, init=False, repr=False
    )

    def get_decomposition_service(self) -> "PanelDecompositionService":
        """Get or create the panel decomposition service."""
        if self._decomposition_service is None:
            from cabinet_panels.domain.services import PanelDecompositionService

            self._decomposition_service = PanelDecompositionService()
        return self._decomposition_service

    def get_cut_list_generator(self) -> "CutListGenerator":
        """Get or create cut list generator instance."""
        if self._cut_list_generator is None:
            from cabinet_panels.domain.services import CutListGenerator

            self._cut_list_generator = CutListGenerator()
        return self._cut_list_generator

    def get_panel_list_formatter(self) -> "PanelListFormatter":
        from cabinet_panels.infrastructure.formatters import PanelListFormatter

        return PanelListFormatter()

    def get_cut_list_formatter(self) -> "CutListFormatter":
        from cabinet_panels.infrastructure.formatters import CutListFormatter

        return CutListFormatter()

    def get_export_manager(
        self, output_dir, project_name: str = "cabinet"
    ) -> "ExportManager":
        """Create an export manager writing into ``output_dir``."""
        from cabinet_panels.infrastructure.exporters import ExportManager

        return ExportManager(
            output_dir,
            exporter_options={
                "stl": {"door_open_angle": self.door_open_angle},
                "bom": {"project_name": project_name},
            },
        )

    def create_generate_command(self) -> "GenerateLayoutCommand":
        """Create a GenerateLayoutCommand wired with the cached services."""
        from cabinet_panels.application.commands import GenerateLayoutCommand

        return GenerateLayoutCommand(
            decomposition_service=self.get_decomposition_service(),
            cut_list_generator=self.get_cut_list_generator(),
        )


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory, creating it on first use."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Replace the default factory (None restores lazy creation)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    global _default_factory
    _default_factory = None
