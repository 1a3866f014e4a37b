"""Conversion from job configuration models to application DTOs."""

from __future__ import annotations

from cladding.application.config.schema import CladdingConfiguration
from cladding.application.dtos import ExclusionInput, PanelInput, WallInput


def config_to_dtos(
    config: CladdingConfiguration,
) -> tuple[WallInput, PanelInput, list[ExclusionInput]]:
    """Convert a CladdingConfiguration to the command's input DTOs.

    Args:
        config: A validated job configuration.

    Returns:
        Tuple of (WallInput, PanelInput, list of ExclusionInput).
    """
    wall_input = WallInput(width=config.wall.width, height=config.wall.height)
    panel_input = PanelInput(width=config.panel.width, height=config.panel.height)
    exclusion_inputs = [
        ExclusionInput(
            id=exclusion.id or str(index + 1),
            x=exclusion.x,
            y=exclusion.y,
            width=exclusion.width,
            height=exclusion.height,
            kind=exclusion.type.value,
        )
        for index, exclusion in enumerate(config.exclusions)
    ]
    return wall_input, panel_input, exclusion_inputs
