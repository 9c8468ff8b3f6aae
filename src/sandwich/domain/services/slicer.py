"""Z-axis quantization of extrusions into fixed-height slices."""

from __future__ import annotations

import logging
import math
import sys
from bisect import bisect_left, bisect_right
from typing import TYPE_CHECKING

from ..exceptions import InvalidConfigurationError, InvalidExtrusionError
from ..value_objects import Slice

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..value_objects import Extrusion, Placement2D

__all__ = [
    "DEFAULT_STEP",
    "Z_TOLERANCE",
    "tolerance_for",
    "ZSlicer",
    "slice_extrusions",
    "validate_extrusions",
    "validate_step",
]

logger = logging.getLogger(__name__)

# Default slice height in mm
DEFAULT_STEP = 0.5

# Heights closer than this (mm) are treated as the same boundary. Over long
# ranges the tolerance widens to cover the rounding drift of boundaries built
# by repeated addition (see tolerance_for); it never exceeds a quarter step.
Z_TOLERANCE = 1e-9


def tolerance_for(z_min: float, z_max: float, step: float) -> float:
    """Boundary tolerance for slicing [z_min, z_max] at ``step``.

    Each addition of ``step`` may round by half an ulp of the running
    boundary, so after n slices the drift is bounded by n ulps of the largest
    height. The result is at least Z_TOLERANCE.
    """
    slices = (z_max - z_min) / step
    drift = slices * sys.float_info.epsilon * max(abs(z_min), abs(z_max), 1.0)
    return min(max(Z_TOLERANCE, drift), step / 4)


def validate_step(step: float) -> float:
    """Check that a slicing step is a finite, strictly positive number.

    Returns:
        The step as a float.

    Raises:
        InvalidConfigurationError: If the step is zero, negative, NaN,
            infinite or not a number.
    """
    if isinstance(step, bool):
        raise InvalidConfigurationError(step)
    try:
        valid = math.isfinite(step) and step > 0
    except TypeError:
        valid = False
    if not valid:
        raise InvalidConfigurationError(step)
    return float(step)


def validate_extrusions(extrusions: Sequence[Extrusion]) -> None:
    """Reject the whole batch if any extrusion has a bad height range.

    Raises:
        InvalidExtrusionError: For the first extrusion with a non-finite
            height or with z_min greater than z_max.
    """
    for index, extrusion in enumerate(extrusions):
        if not (math.isfinite(extrusion.z_min) and math.isfinite(extrusion.z_max)):
            raise InvalidExtrusionError(index, extrusion, "heights must be finite")
        if extrusion.z_min > extrusion.z_max:
            raise InvalidExtrusionError(
                index, extrusion, f"z_min {extrusion.z_min} is above z_max {extrusion.z_max}"
            )


class ZSlicer:
    """Cuts the Z range covered by a set of extrusions into equal slices.

    Slice boundaries start at the lowest z_min and advance by repeated
    addition of ``step``. Every slice covers ``[b, b + step)`` except the
    last one, whose top is clamped to the highest z_max so the slices
    partition the covered range exactly.

    Attributes:
        step: Slice height in mm.
    """

    def __init__(self, step: float = DEFAULT_STEP) -> None:
        """Initialize the slicer.

        Args:
            step: Slice height in mm (default 0.5).

        Raises:
            InvalidConfigurationError: If step is not strictly positive.
        """
        self.step = validate_step(step)

    def slice(self, extrusions: Sequence[Extrusion]) -> list[Slice]:
        """Bucket every extrusion's placement into the slices it spans.

        Args:
            extrusions: Extrusions in stacking order. The order is kept inside
                each slice's cross-section.

        Returns:
            Slices in strictly ascending Z order, empty ones included. An
            empty input gives an empty list.

        Raises:
            InvalidExtrusionError: If any extrusion has a bad height range.
        """
        validate_extrusions(extrusions)
        if not extrusions:
            return []

        z_min = min(e.z_min for e in extrusions)
        z_max = max(e.z_max for e in extrusions)
        tolerance = tolerance_for(z_min, z_max, self.step)
        lowers = self._boundaries(z_min, z_max, tolerance)
        uppers = lowers[1:] + [z_max] if lowers else []

        buckets: list[list[Placement2D]] = [[] for _ in lowers]
        for extrusion in extrusions:
            for index in self._span(extrusion, lowers, uppers, tolerance):
                buckets[index].append(extrusion.placement)

        logger.debug(
            f"Sliced {len(extrusions)} extrusions into {len(lowers)} slices "
            f"of {self.step}mm between {z_min}mm and {z_max}mm "
            f"(tolerance {tolerance:g}mm)"
        )

        return [
            Slice(index=i, z_min=lowers[i], z_max=uppers[i], cross_section=tuple(bucket))
            for i, bucket in enumerate(buckets)
        ]

    def _boundaries(self, z_min: float, z_max: float, tolerance: float) -> list[float]:
        """Lower boundaries of every slice between z_min and z_max."""
        lowers: list[float] = []
        boundary = z_min
        while boundary < z_max - tolerance:
            lowers.append(boundary)
            boundary += self.step
        return lowers

    @staticmethod
    def _span(
        extrusion: Extrusion, lowers: list[float], uppers: list[float], tolerance: float
    ) -> range:
        """Indices of the slices an extrusion intersects.

        A slice ``[lo, hi)`` intersects ``[z_min, z_max)`` when
        ``lo < z_max`` and ``hi > z_min``, both up to ``tolerance``.
        An extrusion too thin to clear a boundary by the tolerance on both
        sides is treated as flat: it lands in the slice containing its
        height, or in the last slice when it sits on the top of the range.
        """
        count = len(lowers)
        if count == 0:
            return range(0)

        if extrusion.thickness > tolerance:
            first = bisect_right(uppers, extrusion.z_min + tolerance)
            stop = bisect_left(lowers, extrusion.z_max - tolerance)
            if first < stop:
                return range(first, stop)

        index = bisect_right(lowers, extrusion.z_min + tolerance) - 1
        index = max(0, min(index, count - 1))
        return range(index, index + 1)


def slice_extrusions(
    extrusions: Sequence[Extrusion], step: float = DEFAULT_STEP
) -> list[Slice]:
    """Slice extrusions at a fixed step. See :class:`ZSlicer`."""
    return ZSlicer(step).slice(extrusions)
