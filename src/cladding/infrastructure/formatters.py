"""Text formatters for layout results."""

from __future__ import annotations

from cladding.application.dtos import LayoutOutput
from cladding.domain.value_objects import PlacedPanel


def panel_kind(panel: PlacedPanel) -> str:
    """Short label describing where a placed piece came from."""
    if panel.is_offcut_reuse:
        return "offcut"
    if panel.is_cut:
        return "cut"
    return "full"


class LayoutSummaryFormatter:
    """Formats the headline figures of a layout.

    Areas are shown in square meters with one decimal, the way a
    material order is usually placed.
    """

    def format(self, output: LayoutOutput) -> str:
        """Format the layout summary as a report."""
        if not output.is_valid:
            return "Layout could not be calculated."

        result = output.result
        wall = output.wall
        panel = output.panel
        lines = [
            "PANEL LAYOUT",
            "=" * 50,
            f"Wall:        {wall.width:g} x {wall.height:g} cm",
            f"Panel:       {panel.width:g} x {panel.height:g} cm",
            f"Openings:    {len(output.exclusions)}",
            "",
            f"Theoretical: {result.theoretical_panels} panels",
            f"Practical:   {result.practical_panels} panels (order advice)",
            f"Waste:       {result.waste_area_m2:.1f} m²",
            f"Net area:    {result.net_area_m2:.1f} m²",
            "-" * 50,
            f"Pieces on wall: {result.placed_count}",
            f"  Full panels:     {result.full_count}",
            f"  Cut panels:      {result.cut_count}",
            f"  Reused offcuts:  {result.reused_count}",
        ]
        return "\n".join(lines)


class PlacementTableFormatter:
    """Formats every placed piece as a table, bottom course first."""

    def format(self, output: LayoutOutput) -> str:
        if not output.is_valid:
            return "Layout could not be calculated."
        if not output.result.placed_panels:
            return "No panels placed."

        lines = [
            "PLACEMENTS",
            "=" * 66,
            f"{'Id':<10} {'Course':<7} {'X':>8} {'Y':>8} {'Width':>8} {'Height':>8}  {'Kind'}",
            "-" * 66,
        ]
        for panel in output.result.placed_panels:
            lines.append(
                f"{panel.id:<10} {panel.row:<7} {panel.x:>8.1f} {panel.y:>8.1f} "
                f"{panel.width:>8.1f} {panel.height:>8.1f}  {panel_kind(panel)}"
            )
        lines.append("-" * 66)
        lines.append(
            f"{output.result.placed_count} pieces from "
            f"{output.result.practical_panels} stock panels"
        )
        return "\n".join(lines)
