"""Exporter framework for layout outputs.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- csv: One row per placed piece
- json: Inputs, summary and placements
- svg: Wall drawing with panels coloured by kind

Usage:
    from cladding.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["json", "svg"], layout_output, project_name="garage")
"""

from cladding.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    require_result,
)

# Import exporters to trigger registration
from cladding.infrastructure.exporters.layout_json import (
    SCHEMA_VERSION,
    JsonLayoutExporter,
    layout_to_dict,
)
from cladding.infrastructure.exporters.placements_csv import CsvPlacementExporter
from cladding.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "SCHEMA_VERSION",
    "CsvPlacementExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonLayoutExporter",
    "SvgExporter",
    "layout_to_dict",
    "require_result",
]
