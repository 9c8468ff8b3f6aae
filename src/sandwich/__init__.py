"""Turn height-ranged 2D cuts into a stack of laminated layers."""

from sandwich.domain import (
    Extrusion,
    InvalidConfigurationError,
    InvalidExtrusionError,
    Layer,
    Placement2D,
    SandwichError,
    Slice,
    build_layers,
    merge_slices,
    slice_extrusions,
)

__version__ = "0.2.0"

__all__ = [
    "Extrusion",
    "InvalidConfigurationError",
    "InvalidExtrusionError",
    "Layer",
    "Placement2D",
    "SandwichError",
    "Slice",
    "__version__",
    "build_layers",
    "merge_slices",
    "slice_extrusions",
]
