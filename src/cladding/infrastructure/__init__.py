"""Infrastructure layer - rendering, formatting and export."""

from .exporters import (
    CsvPlacementExporter,
    ExporterRegistry,
    ExportManager,
    JsonLayoutExporter,
    SvgExporter,
)
from .formatters import LayoutSummaryFormatter, PlacementTableFormatter, panel_kind
from .layout_renderer import LayoutRenderer

__all__ = [
    "CsvPlacementExporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonLayoutExporter",
    "LayoutRenderer",
    "LayoutSummaryFormatter",
    "PlacementTableFormatter",
    "SvgExporter",
    "panel_kind",
]
