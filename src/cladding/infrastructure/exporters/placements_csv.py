"""CSV exporter listing every placed piece.

One row per piece in placement order, suitable for spreadsheets or a
cutting list at the saw.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from cladding.infrastructure.exporters.base import ExporterRegistry, require_result
from cladding.infrastructure.formatters import panel_kind

if TYPE_CHECKING:
    from cladding.application.dtos import LayoutOutput

CSV_HEADER = ("id", "course", "column", "x", "y", "width", "height", "kind")


@ExporterRegistry.register("csv")
class CsvPlacementExporter:
    """CSV exporter for placed pieces.

    Attributes:
        format_name: "csv"
        file_extension: "csv"
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export(self, output: LayoutOutput, path: Path) -> None:
        """Export CSV to file."""
        path.write_text(self.export_string(output), encoding="utf-8", newline="")

    def export_string(self, output: LayoutOutput) -> str:
        """Export CSV as string."""
        require_result(output, self.format_name)
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(CSV_HEADER)
        for panel in output.result.placed_panels:
            writer.writerow(
                [
                    panel.id,
                    panel.row,
                    panel.column,
                    f"{panel.x:g}",
                    f"{panel.y:g}",
                    f"{panel.width:g}",
                    f"{panel.height:g}",
                    panel_kind(panel),
                ]
            )
        return buffer.getvalue()
