"""Application commands (use cases) for panel layout calculation."""

from __future__ import annotations

import logging
from typing import Sequence

from cladding.domain import InvalidInputError, PanelTilingEngine

from .dtos import ExclusionInput, LayoutOutput, PanelInput, WallInput

logger = logging.getLogger(__name__)


class CalculateLayoutCommand:
    """Command to calculate a panel layout for one wall."""

    def __init__(self, engine: PanelTilingEngine | None = None) -> None:
        self.engine = engine or PanelTilingEngine()

    def execute(
        self,
        wall_input: WallInput,
        panel_input: PanelInput,
        exclusion_inputs: Sequence[ExclusionInput] = (),
    ) -> LayoutOutput:
        """Execute the layout calculation.

        Args:
            wall_input: Wall dimensions.
            panel_input: Stock panel dimensions.
            exclusion_inputs: Window and door openings.

        Returns:
            LayoutOutput with the result, or with ``errors`` populated when
            the inputs are unusable. The engine is not called in that case.
        """
        errors = wall_input.validate() + panel_input.validate()
        for exclusion in exclusion_inputs:
            errors.extend(exclusion.validate())

        if errors:
            return LayoutOutput(wall=None, panel=None, errors=errors)

        try:
            wall = wall_input.to_wall_surface()
            panel = panel_input.to_panel_spec()
            exclusions = tuple(e.to_exclusion_zone() for e in exclusion_inputs)
            result = self.engine.layout(wall, panel, exclusions)
        except InvalidInputError as e:
            logger.debug(f"Layout rejected: {e}")
            return LayoutOutput(wall=None, panel=None, errors=[str(e)])

        return LayoutOutput(
            wall=wall,
            panel=panel,
            exclusions=exclusions,
            result=result,
        )
