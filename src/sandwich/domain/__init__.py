"""Domain layer - slicing and layer merging."""

from .exceptions import (
    InvalidConfigurationError,
    InvalidExtrusionError,
    SandwichError,
)
from .services import (
    DEFAULT_STEP,
    Z_TOLERANCE,
    LayerMerger,
    ZSlicer,
    build_layers,
    merge_slices,
    slice_extrusions,
    tolerance_for,
)
from .value_objects import Extrusion, Layer, Placement2D, Slice

__all__ = [
    "DEFAULT_STEP",
    "Extrusion",
    "InvalidConfigurationError",
    "InvalidExtrusionError",
    "Layer",
    "LayerMerger",
    "Placement2D",
    "SandwichError",
    "Slice",
    "ZSlicer",
    "Z_TOLERANCE",
    "build_layers",
    "merge_slices",
    "slice_extrusions",
    "tolerance_for",
]
