"""Application layer - use cases and orchestration."""

from .commands import BuildSandwichCommand
from .dtos import CanvasInput, CutInput, SandwichOutput, SlicingParametersInput

__all__ = [
    "BuildSandwichCommand",
    "CanvasInput",
    "CutInput",
    "SandwichOutput",
    "SlicingParametersInput",
]
