"""SVG exporter: one cut sheet per layer plus a stacked overview.

Sheets are named after the height range they cover,
``<project>-<z_min>-<z_max>.svg``, and the overview is ``<project>.svg``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from sandwich.infrastructure.exporters.base import ExporterRegistry
from sandwich.infrastructure.layer_renderer import LayerSvgRenderer
from sandwich.infrastructure.shape_resolver import SvgShapeResolver

if TYPE_CHECKING:
    from sandwich.application.dtos import SandwichOutput
    from sandwich.domain import Layer

logger = logging.getLogger(__name__)


def format_height(value: float) -> str:
    """Height for file names: one decimal at least, up to six (a micron) when needed.

    >>> format_height(2)
    '2.0'
    >>> format_height(0.25)
    '0.25'
    >>> format_height(0.0005)
    '0.0005'
    """
    text = f"{value:.6f}".rstrip("0")
    if text.endswith("."):
        text += "0"
    if text == "-0.0":
        text = "0.0"
    return text


def layer_filename(project_name: str, layer: Layer) -> str:
    """File name of a layer sheet."""
    return f"{project_name}-{format_height(layer.z_min)}-{format_height(layer.z_max)}.svg"


@ExporterRegistry.register("svg")
class SvgLayerExporter:
    """Writes per-layer SVG cut sheets and a stacked composite.

    Everything is rendered in memory before the first file is written, so a
    missing or broken shape file leaves no partial set of sheets behind.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        resolver: SvgShapeResolver | None = None,
        skip_empty: bool = False,
        include_composite: bool = True,
        stroke: str = "rgb(255,0,0)",
        stroke_width: str = "0.2pt",
        fill: str = "none",
        composite_skew: float = 50.0,
        composite_spacing: float = 100.0,
        composite_margin: float = 50.0,
        composite_stroke: str = "rgb(255,0,0)",
        composite_stroke_width: str = "1pt",
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            resolver: Shape resolver (default resolves paths from the
                current working directory).
            skip_empty: Leave layers without placements out.
            include_composite: Also write the stacked overview.
            stroke: Stroke color of shapes on the sheets.
            stroke_width: Stroke width of shapes on the sheets.
            fill: Fill of shapes on the sheets.
            composite_skew: skewX angle of the overview, in degrees.
            composite_spacing: Distance between stacked layers in the overview.
            composite_margin: Border around the overview.
            composite_stroke: Stroke color in the overview.
            composite_stroke_width: Stroke width in the overview.
        """
        self.skip_empty = skip_empty
        self.include_composite = include_composite
        self.renderer = LayerSvgRenderer(
            resolver=resolver,
            stroke=stroke,
            stroke_width=stroke_width,
            fill=fill,
            composite_skew=composite_skew,
            composite_spacing=composite_spacing,
            composite_margin=composite_margin,
            composite_stroke=composite_stroke,
            composite_stroke_width=composite_stroke_width,
        )

    def select_layers(self, output: SandwichOutput) -> list[Layer]:
        """Layers that will be written, honouring skip_empty.

        Raises:
            ValueError: If the output carries build errors.
        """
        if not output.is_valid:
            raise ValueError(
                "Cannot export a sandwich that failed to build: " + "; ".join(output.errors)
            )
        if not self.skip_empty:
            return list(output.layers)

        layers = output.non_empty_layers
        skipped = len(output.layers) - len(layers)
        if skipped:
            logger.info(f"Skipping {skipped} empty layers")
        return layers

    def export(
        self, output: SandwichOutput, output_dir: Path, project_name: str
    ) -> list[Path]:
        """Write one SVG per layer and, if enabled, the composite.

        Returns:
            Paths of the layer sheets in ascending Z order, followed by the
            composite path.

        Raises:
            ValueError: If the output carries build errors.
            ShapeResolutionError: If a shape cannot be resolved.
        """
        layers = self.select_layers(output)
        documents: list[tuple[Path, str]] = [
            (output_dir / layer_filename(project_name, layer), svg)
            for layer, svg in zip(layers, self.renderer.render_all(layers, output.canvas))
        ]
        if self.include_composite:
            documents.append(
                (
                    output_dir / f"{project_name}.{self.file_extension}",
                    self.renderer.render_composite(layers, output.canvas),
                )
            )
        _check_unique_names(documents)

        written: list[Path] = []
        for path, content in documents:
            path.write_text(content, encoding="utf-8")
            logger.info(f"Wrote {path}")
            written.append(path)
        return written

    def export_string(self, output: SandwichOutput) -> str:
        """Return the composite drawing as a string."""
        return self.renderer.render_composite(self.select_layers(output), output.canvas)


def _check_unique_names(documents: list[tuple[Path, str]]) -> None:
    """Refuse to write two drawings to the same file.

    Raises:
        ValueError: If two layers (or a layer and the composite) would share
            a file name, e.g. layers thinner than the name's precision.
    """
    seen: set[Path] = set()
    for path, _ in documents:
        if path in seen:
            raise ValueError(
                f"Two drawings share the file name {path.name}; "
                "layers thinner than 0.000001mm cannot be told apart by name"
            )
        seen.add(path)
