"""Pytest configuration and shared fixtures for cabinet panel tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from cabinet_panels.application.commands import GenerateLayoutCommand
    from cabinet_panels.domain import CabinetSpec, PanelList


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared cabinet parameters
# =============================================================================


@pytest.fixture
def wardrobe_raw() -> dict[str, Any]:
    """The default wardrobe: 900 x 1800 x 500, 18 mm board, 100 mm kickplate,
    backing, roof between the sides and three shelves."""
    return {
        "width": 900,
        "height": 1800,
        "depth": 500,
        "thickness": 18,
        "roof_style": "between",
        "has_kickplate": True,
        "kickplate_height": 100,
        "has_backing": True,
        "distribution_mode": "horizontal",
        "primary_count": 3,
        "secondary_counts": [0, 0, 0, 0],
        "has_doors": False,
    }


@pytest.fixture
def wardrobe_spec(wardrobe_raw: dict[str, Any]) -> "CabinetSpec":
    from cabinet_panels.domain import normalize_spec

    return normalize_spec(wardrobe_raw)


@pytest.fixture
def wardrobe_panels(wardrobe_spec: "CabinetSpec") -> "PanelList":
    from cabinet_panels.domain import compute_panels

    return compute_panels(wardrobe_spec)


@pytest.fixture
def wardrobe_config_data() -> dict[str, Any]:
    """Configuration-file form of the default wardrobe."""
    return {
        "schema_version": "1.0",
        "cabinet": {
            "width": 900,
            "height": 1800,
            "depth": 500,
            "thickness": 18,
            "roof_style": "between",
            "backing": True,
            "kickplate": {"enabled": True, "height": 100},
            "distribution": {
                "mode": "horizontal",
                "primary_count": 3,
                "secondary_counts": [0, 0, 0, 0],
            },
        },
    }


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def generate_command() -> "GenerateLayoutCommand":
    """Create a GenerateLayoutCommand instance using the factory."""
    from cabinet_panels.application.factory import get_factory

    return get_factory().create_generate_command()
