"""Unit tests for ServiceFactory."""

from pathlib import Path

import pytest

from cabinet_panels.application import (
    GenerateLayoutCommand,
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from cabinet_panels.infrastructure import CutListFormatter, PanelListFormatter
from cabinet_panels.infrastructure.exporters import BomGenerator, StlLayoutExporter


@pytest.fixture(autouse=True)
def _restore_default_factory():
    yield
    reset_factory()


class TestServiceFactory:
    def test_services_are_cached(self) -> None:
        factory = ServiceFactory()

        assert factory.get_decomposition_service() is factory.get_decomposition_service()
        assert factory.get_cut_list_generator() is factory.get_cut_list_generator()

    def test_command_shares_services(self) -> None:
        factory = ServiceFactory()

        command = factory.create_generate_command()

        assert isinstance(command, GenerateLayoutCommand)
        assert command.decomposition_service is factory.get_decomposition_service()
        assert command.cut_list_generator is factory.get_cut_list_generator()

    def test_formatters(self) -> None:
        factory = ServiceFactory()

        assert isinstance(factory.get_panel_list_formatter(), PanelListFormatter)
        assert isinstance(factory.get_cut_list_formatter(), CutListFormatter)

    def test_export_manager_options(self, tmp_path: Path) -> None:
        factory = ServiceFactory(door_open_angle=30.0)

        manager = factory.get_export_manager(tmp_path, project_name="hall")

        stl = manager.create_exporter("stl")
        bom = manager.create_exporter("bom")
        assert isinstance(stl, StlLayoutExporter)
        assert stl._exporter.mapper.door_open_angle == 30.0
        assert isinstance(bom, BomGenerator)
        assert bom.project_name == "hall"


class TestDefaultFactory:
    def test_get_factory_is_singleton(self) -> None:
        assert get_factory() is get_factory()

    def test_set_factory(self) -> None:
        custom = ServiceFactory(door_open_angle=90.0)

        set_factory(custom)

        assert get_factory() is custom

    def test_reset_factory(self) -> None:
        first = get_factory()

        reset_factory()

        assert get_factory() is not first
