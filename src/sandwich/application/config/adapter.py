"""Conversion of configuration models into application DTOs."""

from pathlib import Path
from typing import Any

from sandwich.application.config.schema import SandwichConfiguration
from sandwich.application.dtos import CanvasInput, CutInput, SlicingParametersInput


def resolve_shape_path(shape: str, base_dir: Path | None) -> str:
    """Resolve a relative shape path against the configuration file's directory."""
    if base_dir is None or Path(shape).is_absolute():
        return shape
    return str(base_dir / shape)


def config_to_cut_inputs(
    config: SandwichConfiguration, base_dir: Path | None = None
) -> list[CutInput]:
    """Convert configured cuts to CutInput DTOs, keeping their order.

    Args:
        config: Validated configuration.
        base_dir: Directory relative shape paths are resolved against,
            usually the directory holding the configuration file.
    """
    return [
        CutInput(
            shape=resolve_shape_path(cut.shape, base_dir),
            x=cut.x,
            y=cut.y,
            z_min=cut.z_min,
            z_max=cut.z_max,
        )
        for cut in config.cuts
    ]


def config_to_slicing_params(config: SandwichConfiguration) -> SlicingParametersInput:
    """Convert slicing settings to a SlicingParametersInput DTO."""
    return SlicingParametersInput(step=config.slicing.step)


def config_to_canvas(config: SandwichConfiguration) -> CanvasInput | None:
    """Convert the canvas settings, or None when the file has none."""
    if config.canvas is None:
        return None
    return CanvasInput(
        width=config.canvas.width,
        height=config.canvas.height,
        origin_x=config.canvas.origin_x,
        origin_y=config.canvas.origin_y,
    )


def config_to_export_options(config: SandwichConfiguration) -> dict[str, dict[str, Any]]:
    """Build per-format keyword arguments for the exporters.

    Returns:
        Mapping of format name to constructor keyword arguments.
    """
    output = config.output
    composite = output.composite
    return {
        "svg": {
            "skip_empty": output.skip_empty,
            "stroke": output.style.stroke,
            "stroke_width": output.style.stroke_width,
            "fill": output.style.fill,
            "include_composite": composite.enabled,
            "composite_skew": composite.skew_x,
            "composite_spacing": composite.spacing,
            "composite_margin": composite.margin,
            "composite_stroke": composite.stroke,
            "composite_stroke_width": composite.stroke_width,
        },
        "json": {
            "skip_empty": output.skip_empty,
        },
    }
