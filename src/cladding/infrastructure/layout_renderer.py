"""Wall layout rendering for panel placement visualization.

This module provides SVG and ASCII drawings of a computed layout showing
full panels, cut panels, reused offcuts and the openings left uncovered.

Layouts use a bottom-left origin while SVG and terminal grids draw from
the top-left, so every rectangle is flipped:
``render_y = wall.height - y - height``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.sax.saxutils import escape

from cladding.domain.value_objects import PlacedPanel

if TYPE_CHECKING:
    from cladding.application.dtos import LayoutOutput

FULL_PANEL_COLOR = "#3b82f6"  # Blue
CUT_PANEL_COLOR = "#fbbf24"  # Amber
REUSED_OFFCUT_COLOR = "#10b981"  # Emerald
EXCLUSION_FILL = "#1e293b"  # Slate, reads as a dark opening
EXCLUSION_STROKE = "#0f172a"

LEGEND_ENTRIES: tuple[tuple[str, str], ...] = (
    (FULL_PANEL_COLOR, "Full panel"),
    (CUT_PANEL_COLOR, "Cut panel"),
    (REUSED_OFFCUT_COLOR, "Reused offcut"),
)

ASCII_FULL = "#"
ASCII_CUT = "/"
ASCII_REUSED = "+"
ASCII_EXCLUSION = "X"


def panel_color(panel: PlacedPanel) -> str:
    """Fill colour for a placed panel; reuse wins over cut."""
    if panel.is_offcut_reuse:
        return REUSED_OFFCUT_COLOR
    if panel.is_cut:
        return CUT_PANEL_COLOR
    return FULL_PANEL_COLOR


def flip_y(wall_height: float, y: float, height: float) -> float:
    """Convert a bottom-left y to a top-left y for drawing."""
    return wall_height - y - height


def _fmt(value: float) -> str:
    return f"{value:g}"


class LayoutRenderer:
    """Renders wall layouts as SVG documents or terminal drawings.

    Attributes:
        scale: Pixels per centimeter for SVG rendering.
        show_exclusions: Whether openings are drawn over the panels.
        show_legend: Whether a colour legend is drawn below the wall.
        show_titles: Whether each panel gets a hover tooltip.
    """

    def __init__(
        self,
        scale: float = 2.0,
        show_exclusions: bool = True,
        show_legend: bool = True,
        show_titles: bool = True,
    ) -> None:
        """Initialize renderer with styling options.

        Args:
            scale: Pixels per centimeter for SVG rendering (default 2.0).
            show_exclusions: Draw openings over the panels (default True).
            show_legend: Add a colour legend below the wall (default True).
            show_titles: Add ``<title>`` tooltips to panels (default True).
        """
        self.scale = scale
        self.show_exclusions = show_exclusions
        self.show_legend = show_legend
        self.show_titles = show_titles

    def render_svg(self, output: LayoutOutput) -> str:
        """Generate an SVG drawing of the wall layout.

        Coordinates inside the document are centimeters; ``scale`` only
        sets the pixel size of the document.

        Args:
            output: A valid layout output.

        Returns:
            SVG string.

        Raises:
            ValueError: If the output holds no result.
        """
        if not output.is_valid:
            raise ValueError("Cannot render a layout that has errors")

        wall = output.wall
        result = output.result
        legend_height = 20.0 if self.show_legend else 0.0
        view_height = wall.height + legend_height
        stroke_width = max(1.0, wall.width / 500)

        parts: list[str] = [
            f'<svg width="{_fmt(wall.width * self.scale)}" '
            f'height="{_fmt(view_height * self.scale)}" '
            f'viewBox="0 0 {_fmt(wall.width)} {_fmt(view_height)}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            "  <!-- Wall -->",
            f'  <rect x="0" y="0" width="{_fmt(wall.width)}" height="{_fmt(wall.height)}" '
            f'fill="#f1f5f9" stroke="#cbd5e1" stroke-width="{_fmt(stroke_width)}"/>',
            "",
            "  <!-- Panels -->",
        ]

        for panel in result.placed_panels:
            parts.append(self._render_panel(panel, wall.height, stroke_width))

        if self.show_exclusions and output.exclusions:
            parts.append("")
            parts.append("  <!-- Exclusions -->")
            exclusion_stroke = max(2.0, wall.width / 500)
            for exclusion in output.exclusions:
                y = flip_y(wall.height, exclusion.y, exclusion.height)
                parts.append(
                    f'  <rect x="{_fmt(exclusion.x)}" y="{_fmt(y)}" '
                    f'width="{_fmt(exclusion.width)}" height="{_fmt(exclusion.height)}" '
                    f'fill="{EXCLUSION_FILL}" stroke="{EXCLUSION_STROKE}" '
                    f'stroke-width="{_fmt(exclusion_stroke)}">'
                    f"<title>{escape(exclusion.kind.value)} {escape(exclusion.id)}</title></rect>"
                )

        if self.show_legend:
            parts.append("")
            parts.append("  <!-- Legend -->")
            parts.append(self._render_legend(wall.width, wall.height, legend_height))

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_panel(
        self, panel: PlacedPanel, wall_height: float, stroke_width: float
    ) -> str:
        y = flip_y(wall_height, panel.y, panel.height)
        rect = (
            f'  <rect id="{panel.id}" x="{_fmt(panel.x)}" y="{_fmt(y)}" '
            f'width="{_fmt(panel.width)}" height="{_fmt(panel.height)}" '
            f'fill="{panel_color(panel)}" fill-opacity="0.7" '
            f'stroke="#ffffff" stroke-width="{_fmt(stroke_width)}"'
        )
        if not self.show_titles:
            return rect + "/>"
        title = f"Panel: {panel.width:g}x{panel.height:g}cm"
        return f"{rect}><title>{title}</title></rect>"

    def _render_legend(
        self, wall_width: float, wall_height: float, legend_height: float
    ) -> str:
        swatch = legend_height * 0.5
        text_y = wall_height + legend_height * 0.7
        font_size = legend_height * 0.5
        step = wall_width / len(LEGEND_ENTRIES)
        lines: list[str] = []
        for index, (color, label) in enumerate(LEGEND_ENTRIES):
            x = index * step + swatch / 2
            lines.append(
                f'  <rect x="{_fmt(x)}" y="{_fmt(wall_height + legend_height * 0.25)}" '
                f'width="{_fmt(swatch)}" height="{_fmt(swatch)}" '
                f'fill="{color}" fill-opacity="0.7"/>'
            )
            lines.append(
                f'  <text x="{_fmt(x + swatch * 1.5)}" y="{_fmt(text_y)}" '
                f'font-family="Arial, sans-serif" font-size="{_fmt(font_size)}" '
                f'fill="#475569">{label}</text>'
            )
        return "\n".join(lines)

    def render_ascii(self, output: LayoutOutput, width: int = 80) -> str:
        """Generate an ASCII drawing of the wall layout for terminal display.

        Panels are filled with ``#`` (full), ``/`` (cut) or ``+`` (reused
        offcut) and openings with ``X``. Panel edges are left blank so
        neighbouring panels stay distinguishable.

        Args:
            output: A valid layout output.
            width: Drawing width in characters, including the border.

        Returns:
            ASCII string representation of the wall.

        Raises:
            ValueError: If the output holds no result.
        """
        if not output.is_valid:
            raise ValueError("Cannot render a layout that has errors")

        wall = output.wall
        usable_width = max(width - 2, 10)
        scale_x = usable_width / wall.width
        # Terminal cells are roughly twice as tall as they are wide
        grid_height = max(int(usable_width * (wall.height / wall.width) * 0.5), 4)
        scale_y = grid_height / wall.height

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]

        def fill(x: float, y: float, w: float, h: float, char: str, inset: bool) -> None:
            top = flip_y(wall.height, y, h)
            col_start = int(round(x * scale_x))
            col_end = int(round((x + w) * scale_x))
            row_start = int(round(top * scale_y))
            row_end = int(round((top + h) * scale_y))
            if inset and col_end - col_start > 1:
                col_end -= 1
            for row in range(max(row_start, 0), min(row_end, grid_height)):
                for col in range(max(col_start, 0), min(col_end, usable_width)):
                    grid[row][col] = char

        for panel in output.result.placed_panels:
            if panel.is_offcut_reuse:
                char = ASCII_REUSED
            elif panel.is_cut:
                char = ASCII_CUT
            else:
                char = ASCII_FULL
            fill(panel.x, panel.y, panel.width, panel.height, char, inset=True)

        if self.show_exclusions:
            for exclusion in output.exclusions:
                fill(
                    exclusion.x,
                    exclusion.y,
                    exclusion.width,
                    exclusion.height,
                    ASCII_EXCLUSION,
                    inset=False,
                )

        border = "+" + "-" * usable_width + "+"
        lines = [
            f"Wall {wall.width:g} x {wall.height:g} cm",
            border,
        ]
        lines.extend("|" + "".join(row) + "|" for row in grid)
        lines.append(border)
        lines.append(
            f"{ASCII_FULL} full  {ASCII_CUT} cut  {ASCII_REUSED} reused offcut  "
            f"{ASCII_EXCLUSION} opening"
        )
        return "\n".join(lines)
