"""SVG rendering of layers and of the stacked overview.

Each layer becomes one sheet drawing sized in millimetres, with every
placement nested as a translated group of its shape's markup. The overview
stacks all layers with a skew so the sandwich reads as a 3D pile, first
layer at the bottom.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING
from xml.sax.saxutils import quoteattr

from sandwich.infrastructure.shape_resolver import (
    SVG_NAMESPACE,
    XLINK_NAMESPACE,
    SvgShapeResolver,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sandwich.application.dtos import CanvasInput
    from sandwich.domain import Layer, Placement2D


def _num(value: float) -> str:
    return f"{value:g}"


class LayerSvgRenderer:
    """Renders layers as SVG documents.

    Attributes:
        resolver: Source of the markup behind shape references.
        stroke: Stroke color of the shapes on layer sheets.
        stroke_width: Stroke width of the shapes on layer sheets.
        fill: Fill of the shapes on layer sheets.
        composite_skew: skewX angle in degrees of the stacked overview.
        composite_spacing: Vertical distance between stacked layers.
        composite_margin: Blank border around the stacked overview.
        composite_stroke: Stroke color used in the stacked overview.
        composite_stroke_width: Stroke width used in the stacked overview.
    """

    def __init__(
        self,
        resolver: SvgShapeResolver | None = None,
        stroke: str = "rgb(255,0,0)",
        stroke_width: str = "0.2pt",
        fill: str = "none",
        composite_skew: float = 50.0,
        composite_spacing: float = 100.0,
        composite_margin: float = 50.0,
        composite_stroke: str = "rgb(255,0,0)",
        composite_stroke_width: str = "1pt",
    ) -> None:
        self.resolver = resolver or SvgShapeResolver()
        self.stroke = stroke
        self.stroke_width = stroke_width
        self.fill = fill
        self.composite_skew = composite_skew
        self.composite_spacing = composite_spacing
        self.composite_margin = composite_margin
        self.composite_stroke = composite_stroke
        self.composite_stroke_width = composite_stroke_width

    def render_layer(self, layer: Layer, canvas: CanvasInput) -> str:
        """Generate the sheet drawing of a single layer.

        Raises:
            ShapeResolutionError: If a shape cannot be resolved.
        """
        width = _num(canvas.width)
        height = _num(canvas.height)
        parts: list[str] = [
            f'<svg width="{width}mm" height="{height}mm" '
            f'viewBox="{_num(canvas.origin_x)} {_num(canvas.origin_y)} {width} {height}" '
            f'xmlns="{SVG_NAMESPACE}" xmlns:xlink="{XLINK_NAMESPACE}">',
            f"  <title>{self._layer_title(layer)}</title>",
            f"  <g {self._style(self.stroke, self.stroke_width, self.fill)}>",
        ]
        for placement in layer.cross_section:
            parts.append(f"    {self._render_placement(placement)}")
        parts.append("  </g>")
        parts.append("</svg>")
        return "\n".join(parts)

    def render_all(self, layers: Sequence[Layer], canvas: CanvasInput) -> list[str]:
        """Generate one sheet drawing per layer."""
        return [self.render_layer(layer, canvas) for layer in layers]

    def render_composite(self, layers: Sequence[Layer], canvas: CanvasInput) -> str:
        """Generate the stacked overview of all layers.

        Layers are drawn bottom-up: the first (lowest) layer sits at the
        bottom of the drawing and each following layer one spacing above.
        """
        count = len(layers)
        skew_shift = canvas.height * math.tan(math.radians(self.composite_skew))
        margin = self.composite_margin
        width = 2 * margin + canvas.width + abs(skew_shift)
        height = 2 * margin + canvas.height + max(count - 1, 0) * self.composite_spacing
        x = margin + max(-skew_shift, 0.0)

        parts: list[str] = [
            f'<svg width="{_num(width)}" height="{_num(height)}" '
            f'viewBox="0 0 {_num(width)} {_num(height)}" '
            f'xmlns="{SVG_NAMESPACE}" xmlns:xlink="{XLINK_NAMESPACE}">',
            f"  <g {self._style(self.composite_stroke, self.composite_stroke_width, 'none')}>",
        ]
        for i, layer in enumerate(layers):
            y = margin + (count - 1 - i) * self.composite_spacing
            parts.append(
                f'    <g transform="translate({x:.2f},{y:.2f}) '
                f'skewX({_num(self.composite_skew)})">'
            )
            parts.append(f"      <title>{self._layer_title(layer)}</title>")
            for placement in layer.cross_section:
                parts.append(f"      {self._render_placement(placement)}")
            parts.append("    </g>")
        parts.append("  </g>")
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_placement(self, placement: Placement2D) -> str:
        content = self.resolver.resolve(placement.shape)
        return (
            f'<g transform="translate({placement.x:.2f},{placement.y:.2f})">'
            f"{content}</g>"
        )

    @staticmethod
    def _style(stroke: str, stroke_width: str, fill: str) -> str:
        return (
            f"stroke={quoteattr(stroke)} stroke-width={quoteattr(stroke_width)} "
            f"fill={quoteattr(fill)}"
        )

    @staticmethod
    def _layer_title(layer: Layer) -> str:
        return f"z[{_num(layer.z_min)}mm-{_num(layer.z_max)}mm]"
