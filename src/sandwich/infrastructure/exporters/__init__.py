"""Exporter framework for layer stacks.

Registered exporters:
- svg: one cut sheet per layer plus a stacked composite drawing
- json: layer manifest with heights, placements and sheet names

Usage:
    from sandwich.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    manager = ExportManager(Path("./out"), options={"svg": {"skip_empty": True}})
    files = manager.export_all(["svg", "json"], sandwich_output, project_name="design")
"""

from sandwich.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from sandwich.infrastructure.exporters.json_manifest import JsonManifestExporter
from sandwich.infrastructure.exporters.svg import (
    SvgLayerExporter,
    format_height,
    layer_filename,
)

__all__ = [
    "Exporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonManifestExporter",
    "SvgLayerExporter",
    "format_height",
    "layer_filename",
]
