"""Run-length merging of consecutive identical slices into layers."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from ..value_objects import Layer

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..value_objects import Slice

__all__ = ["LayerMerger", "merge_slices"]

logger = logging.getLogger(__name__)


class LayerMerger:
    """Merges runs of adjacent slices that share a cross-section.

    Only neighbours are merged: two identical cross-sections separated by a
    different one stay separate layers. Empty cross-sections merge with each
    other like any other cross-section.
    """

    def merge(self, slices: Sequence[Slice]) -> list[Layer]:
        """Fold ascending slices into layers.

        Args:
            slices: Slices in ascending Z order, as produced by ZSlicer.

        Returns:
            Layers in ascending Z order. No slices gives no layers.

        Raises:
            ValueError: If a slice starts below the top of the slice before
                it, i.e. the slices are unordered or overlap.
        """
        layers: list[Layer] = []
        current: Layer | None = None
        previous: Slice | None = None

        for slice_ in slices:
            if previous is not None and slice_.z_min < previous.z_max:
                raise ValueError(
                    f"Slices must be in ascending Z order: slice {slice_.index} "
                    f"starts at {slice_.z_min}mm, below the previous top {previous.z_max}mm"
                )
            previous = slice_

            if current is not None and slice_.cross_section == current.cross_section:
                current = replace(
                    current,
                    z_max=slice_.z_max,
                    slice_count=current.slice_count + 1,
                )
                continue

            if current is not None:
                layers.append(current)
            current = Layer(
                z_min=slice_.z_min,
                z_max=slice_.z_max,
                cross_section=slice_.cross_section,
            )

        if current is not None:
            layers.append(current)

        logger.debug(f"Merged {len(slices)} slices into {len(layers)} layers")
        return layers


def merge_slices(slices: Sequence[Slice]) -> list[Layer]:
    """Merge consecutive identical slices. See :class:`LayerMerger`."""
    return LayerMerger().merge(slices)
