"""Text formatters for layer stacks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sandwich.domain import Layer


class LayerTableFormatter:
    """Formats a layer stack as a table, one row per layer.

    Layers with several placements continue on indented lines under the
    first placement.
    """

    def __init__(self, show_empty: bool = True) -> None:
        """Initialize formatter.

        Args:
            show_empty: Whether to list layers that hold no placement.
        """
        self._show_empty = show_empty

    def format(self, layers: Sequence[Layer]) -> str:
        """Format layers bottom-up as a table."""
        if not layers:
            return "No layers: nothing to fabricate."

        lines = [
            "LAYER STACK",
            "=" * 78,
            f"{'#':<4} {'Z range (mm)':<18} {'Thickness':<10} {'Slices':<7} {'Cuts'}",
            "-" * 78,
        ]

        shown = 0
        for number, layer in enumerate(layers, start=1):
            if layer.is_empty and not self._show_empty:
                continue
            shown += 1
            z_range = f"{layer.z_min:g} - {layer.z_max:g}"
            cuts = [str(p) for p in layer.cross_section] or ["(empty)"]
            lines.append(
                f"{number:<4} {z_range:<18} {layer.thickness:<10.2f} "
                f"{layer.slice_count:<7} {cuts[0]}"
            )
            for cut in cuts[1:]:
                lines.append(f"{'':<42} {cut}")

        total_height = layers[-1].z_max - layers[0].z_min
        empty = sum(1 for layer in layers if layer.is_empty)
        lines.append("-" * 78)
        lines.append(
            f"{len(layers)} layers ({empty} empty), {total_height:g}mm total, {shown} shown"
        )
        return "\n".join(lines)
