"""Entry point of the core: extrusions in, merged layers out."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .layer_merger import LayerMerger
from .slicer import DEFAULT_STEP, ZSlicer

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..value_objects import Extrusion, Layer

__all__ = ["build_layers"]

logger = logging.getLogger(__name__)


def build_layers(
    extrusions: Sequence[Extrusion], step: float = DEFAULT_STEP
) -> list[Layer]:
    """Slice extrusions along Z and merge identical neighbours into layers.

    The step and every extrusion are validated before any slicing, so a
    failure never yields partial output. Repeated calls with the same input
    return equal lists.

    Args:
        extrusions: Extrusions in stacking order.
        step: Slice height in mm (default 0.5).

    Returns:
        Layers in ascending Z order; empty when there are no extrusions.

    Raises:
        InvalidConfigurationError: If step is not strictly positive.
        InvalidExtrusionError: If an extrusion has z_min above z_max.
    """
    slicer = ZSlicer(step)
    slices = slicer.slice(extrusions)
    layers = LayerMerger().merge(slices)
    logger.debug(
        f"Built {len(layers)} layers from {len(extrusions)} extrusions at {slicer.step}mm"
    )
    return layers
