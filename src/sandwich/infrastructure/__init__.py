"""Infrastructure layer - shape files, rendering and exporters."""

from .exporters import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonManifestExporter,
    SvgLayerExporter,
)
from .formatters import LayerTableFormatter
from .layer_renderer import LayerSvgRenderer
from .shape_resolver import (
    ResourceUnavailableError,
    ShapeParseError,
    ShapeResolutionError,
    SvgShapeResolver,
)

__all__ = [
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonManifestExporter",
    "LayerSvgRenderer",
    "LayerTableFormatter",
    "ResourceUnavailableError",
    "ShapeParseError",
    "ShapeResolutionError",
    "SvgLayerExporter",
    "SvgShapeResolver",
]
