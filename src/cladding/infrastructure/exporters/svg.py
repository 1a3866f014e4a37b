"""SVG exporter for wall layout drawings."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from cladding.infrastructure.exporters.base import ExporterRegistry, require_result
from cladding.infrastructure.layout_renderer import LayoutRenderer

if TYPE_CHECKING:
    from cladding.application.dtos import LayoutOutput


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter wrapping LayoutRenderer.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        scale: float = 2.0,
        show_exclusions: bool = True,
        show_legend: bool = True,
        show_titles: bool = True,
    ) -> None:
        self.renderer = LayoutRenderer(
            scale=scale,
            show_exclusions=show_exclusions,
            show_legend=show_legend,
            show_titles=show_titles,
        )

    def export(self, output: LayoutOutput, path: Path) -> None:
        """Export the SVG drawing to file."""
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: LayoutOutput) -> str:
        """Export the SVG drawing as string."""
        require_result(output, self.format_name)
        return self.renderer.render_svg(output)
