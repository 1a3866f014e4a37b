"""Pytest configuration and shared fixtures for cladding tests."""

from __future__ import annotations

import pytest

from cladding.application import (
    CalculateLayoutCommand,
    ExclusionInput,
    LayoutOutput,
    PanelInput,
    WallInput,
)
from cladding.domain import ExclusionType, ExclusionZone, PanelSpec, WallSurface


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests through the CLI or API")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def standard_panel() -> PanelSpec:
    """100 x 50 cm stock panel."""
    return PanelSpec(width=100, height=50)


@pytest.fixture
def door_wall() -> WallSurface:
    """5 m x 3 m wall."""
    return WallSurface(width=500, height=300)


@pytest.fixture
def door() -> ExclusionZone:
    """1 m x 2.1 m door standing on the floor, 2 m from the left edge."""
    return ExclusionZone(
        id="door", x=200, y=0, width=100, height=210, kind=ExclusionType.DOOR
    )


# =============================================================================
# Application fixtures
# =============================================================================


@pytest.fixture
def layout_command() -> CalculateLayoutCommand:
    """Create a CalculateLayoutCommand with a default engine."""
    return CalculateLayoutCommand()


@pytest.fixture
def door_output(layout_command: CalculateLayoutCommand) -> LayoutOutput:
    """Computed layout for the door wall."""
    return layout_command.execute(
        WallInput(width=500, height=300),
        PanelInput(width=100, height=50),
        [ExclusionInput(id="door", x=200, y=0, width=100, height=210, kind="door")],
    )


@pytest.fixture
def small_output(layout_command: CalculateLayoutCommand) -> LayoutOutput:
    """Two-course wall where the second course reuses the first offcut."""
    return layout_command.execute(
        WallInput(width=150, height=100),
        PanelInput(width=100, height=50),
    )


@pytest.fixture
def invalid_output(layout_command: CalculateLayoutCommand) -> LayoutOutput:
    """Output carrying input errors instead of a result."""
    return layout_command.execute(
        WallInput(width=0, height=300),
        PanelInput(width=100, height=50),
    )
