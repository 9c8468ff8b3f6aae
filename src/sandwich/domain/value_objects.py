"""Value objects for placements, extrusions, slices and layers.

Heights are in millimetres along the Z axis, offsets in millimetres on the
sheet plane (x from the left, y from the top).
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _fmt(value: float) -> str:
    """Format a coordinate without a trailing ``.0`` for whole numbers."""
    return f"{value:g}"


@dataclass(frozen=True)
class Placement2D:
    """An opaque 2D shape reference placed at an offset on the sheet.

    Two placements are equal only if the shape reference and both offsets
    are exactly equal.

    Attributes:
        shape: Reference to externally resolved vector content (a file path).
        x: Offset from the left edge in mm.
        y: Offset from the top edge in mm.
    """

    shape: str
    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"{self.shape} at ({_fmt(self.x)},{_fmt(self.y)})"


@dataclass(frozen=True)
class Extrusion:
    """A placement held constant over the closed height range [z_min, z_max].

    Range validity is checked by :func:`sandwich.domain.build_layers` so that
    a whole batch can be rejected before any slicing starts.
    """

    placement: Placement2D
    z_min: float
    z_max: float

    @property
    def thickness(self) -> float:
        """Height covered by the extrusion in mm."""
        return self.z_max - self.z_min

    def __str__(self) -> str:
        return f"[{_fmt(self.z_min)}-{_fmt(self.z_max)}] {self.placement}"


@dataclass(frozen=True)
class Slice:
    """One quantization band [z_min, z_max) and the placements present in it.

    The cross-section keeps the order in which extrusions were supplied.
    """

    index: int
    z_min: float
    z_max: float
    cross_section: tuple[Placement2D, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.cross_section


@dataclass(frozen=True)
class Layer:
    """A run of consecutive slices sharing one cross-section.

    Attributes:
        z_min: Bottom of the layer in mm (inclusive).
        z_max: Top of the layer in mm (exclusive).
        cross_section: Placements cut into this layer, in stacking order.
        slice_count: Number of slices merged into this layer.
    """

    z_min: float
    z_max: float
    cross_section: tuple[Placement2D, ...] = field(default_factory=tuple)
    slice_count: int = 1

    @property
    def thickness(self) -> float:
        """Layer thickness in mm."""
        return self.z_max - self.z_min

    @property
    def is_empty(self) -> bool:
        """True when no placement is present in this layer."""
        return not self.cross_section

    def __str__(self) -> str:
        lines = [f"z[{_fmt(self.z_min)}mm-{_fmt(self.z_max)}mm]"]
        lines.extend(f"  {placement}" for placement in self.cross_section)
        return "\n".join(lines)
