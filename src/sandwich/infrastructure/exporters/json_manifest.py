"""JSON manifest of a layer stack.

The manifest lists every layer with its height range, thickness, number of
merged slices, placements and the name of its SVG sheet, plus a summary of
the whole stack. It is meant for downstream tooling such as cutting queues.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from sandwich.infrastructure.exporters.base import ExporterRegistry
from sandwich.infrastructure.exporters.svg import layer_filename

if TYPE_CHECKING:
    from sandwich.application.dtos import SandwichOutput
    from sandwich.domain import Layer


logger = logging.getLogger(__name__)

# Current schema version for manifest output
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonManifestExporter:
    """Exports the layer stack as a JSON manifest.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, skip_empty: bool = False, indent: int = 2) -> None:
        """Initialize the manifest exporter.

        Args:
            skip_empty: Leave layers without placements out of the layer list.
            indent: JSON indentation level (default 2 spaces).
        """
        self.skip_empty = skip_empty
        self.indent = indent

    def export(
        self, output: SandwichOutput, output_dir: Path, project_name: str
    ) -> list[Path]:
        """Write ``<project>.json`` into output_dir."""
        path = output_dir / f"{project_name}.{self.file_extension}"
        path.write_text(self.export_string(output, project_name), encoding="utf-8")
        logger.info(f"Wrote {path}")
        return [path]

    def export_string(self, output: SandwichOutput, project_name: str = "design") -> str:
        """Return the manifest as a JSON string."""
        return json.dumps(self.build_manifest(output, project_name), indent=self.indent)

    def build_manifest(self, output: SandwichOutput, project_name: str = "design") -> dict[str, Any]:
        """Build the manifest dictionary.

        Raises:
            ValueError: If the output carries build errors.
        """
        if not output.is_valid:
            raise ValueError(
                "Cannot export a sandwich that failed to build: " + "; ".join(output.errors)
            )

        layers = output.non_empty_layers if self.skip_empty else output.layers
        canvas = output.canvas
        return {
            "schema_version": SCHEMA_VERSION,
            "project": project_name,
            "step": output.step,
            "canvas": {
                "width": canvas.width,
                "height": canvas.height,
                "origin_x": canvas.origin_x,
                "origin_y": canvas.origin_y,
            },
            "summary": {
                "layer_count": len(output.layers),
                "empty_layer_count": len(output.layers) - len(output.non_empty_layers),
                "total_height": output.total_height,
                "shapes": sorted({p.shape for layer in output.layers for p in layer.cross_section}),
            },
            "layers": [
                self._layer_to_dict(index, layer, project_name)
                for index, layer in enumerate(layers)
            ],
        }

    @staticmethod
    def _layer_to_dict(index: int, layer: Layer, project_name: str) -> dict[str, Any]:
        return {
            "index": index,
            "z_min": layer.z_min,
            "z_max": layer.z_max,
            "thickness": layer.thickness,
            "slice_count": layer.slice_count,
            "sheet": layer_filename(project_name, layer),
            "cuts": [
                {"shape": p.shape, "x": p.x, "y": p.y} for p in layer.cross_section
            ],
        }
