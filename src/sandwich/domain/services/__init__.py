"""Domain services for slicing and merging."""

from .layer_merger import LayerMerger, merge_slices
from .slicer import (
    DEFAULT_STEP,
    Z_TOLERANCE,
    ZSlicer,
    slice_extrusions,
    tolerance_for,
    validate_extrusions,
    validate_step,
)
from .stack_builder import build_layers

__all__ = [
    "DEFAULT_STEP",
    "Z_TOLERANCE",
    "LayerMerger",
    "ZSlicer",
    "build_layers",
    "merge_slices",
    "slice_extrusions",
    "tolerance_for",
    "validate_extrusions",
    "validate_step",
]
