"""JSON exporter for layout results.

Exports the inputs, summary statistics and every placed piece so the
layout can be re-rendered or audited without recalculating.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from cladding.infrastructure.exporters.base import ExporterRegistry, require_result

if TYPE_CHECKING:
    from cladding.application.dtos import LayoutOutput


# Current schema version for JSON output
SCHEMA_VERSION = "1.0"


def layout_to_dict(output: LayoutOutput) -> dict[str, Any]:
    """Convert a valid layout output to a JSON-serializable dictionary."""
    result = output.result
    return {
        "schema_version": SCHEMA_VERSION,
        "units": "cm",
        "wall": {"width": output.wall.width, "height": output.wall.height},
        "panel": {"width": output.panel.width, "height": output.panel.height},
        "exclusions": [
            {
                "id": e.id,
                "type": e.kind.value,
                "x": e.x,
                "y": e.y,
                "width": e.width,
                "height": e.height,
            }
            for e in output.exclusions
        ],
        "summary": {
            "gross_area": result.gross_area,
            "net_area": result.net_area,
            "theoretical_panels": result.theoretical_panels,
            "practical_panels": result.practical_panels,
            "waste_area": result.waste_area,
            "placed_count": result.placed_count,
            "full_count": result.full_count,
            "cut_count": result.cut_count,
            "reused_count": result.reused_count,
        },
        "placed_panels": [
            {
                "id": p.id,
                "row": p.row,
                "column": p.column,
                "x": p.x,
                "y": p.y,
                "width": p.width,
                "height": p.height,
                "is_cut": p.is_cut,
                "is_offcut_reuse": p.is_offcut_reuse,
            }
            for p in result.placed_panels
        ],
    }


@ExporterRegistry.register("json")
class JsonLayoutExporter:
    """JSON exporter for layout results.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: LayoutOutput, path: Path) -> None:
        """Export JSON to file."""
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: LayoutOutput) -> str:
        """Export JSON as string."""
        require_result(output, self.format_name)
        return json.dumps(layout_to_dict(output), indent=self.indent)
