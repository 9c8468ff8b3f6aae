"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from sandwich.domain import DEFAULT_STEP, Extrusion, Layer, Placement2D

CUT_FIELD_COUNT = 5


@dataclass
class CutInput:
    """Input DTO for one 3D cut: an SVG file placed at (x, y) from z_min to z_max."""

    shape: str
    x: float
    y: float
    z_min: float
    z_max: float

    @classmethod
    def parse(cls, text: str) -> CutInput:
        """Parse the command-line form ``svg_path,x,y,z_min,z_max``.

        Raises:
            ValueError: If the text does not have exactly five fields or a
                numeric field cannot be parsed.
        """
        parts = text.split(",")
        if len(parts) != CUT_FIELD_COUNT or not parts[0].strip():
            raise ValueError(f"2D cut malformatted: {text}")
        try:
            x, y, z_min, z_max = (float(part) for part in parts[1:])
        except ValueError:
            raise ValueError(f"2D cut malformatted: {text}") from None
        return cls(shape=parts[0].strip(), x=x, y=y, z_min=z_min, z_max=z_max)

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not self.shape:
            errors.append("Shape path must not be empty")
        values = {"x": self.x, "y": self.y, "z_min": self.z_min, "z_max": self.z_max}
        for name, value in values.items():
            if not math.isfinite(value):
                errors.append(f"{self.shape}: {name} must be a finite number")
        if self.z_min > self.z_max:
            errors.append(
                f"{self.shape}: z_min ({self.z_min}) must not be above z_max ({self.z_max})"
            )
        return errors

    def to_extrusion(self) -> Extrusion:
        """Convert to Extrusion value object."""
        return Extrusion(
            placement=Placement2D(shape=self.shape, x=self.x, y=self.y),
            z_min=self.z_min,
            z_max=self.z_max,
        )


@dataclass
class SlicingParametersInput:
    """Input DTO for slicing parameters."""

    step: float = DEFAULT_STEP

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not math.isfinite(self.step) or self.step <= 0:
            errors.append("Slicing step must be positive")
        return errors


@dataclass
class CanvasInput:
    """Input DTO for the sheet canvas, in mm.

    ``origin_x`` and ``origin_y`` set the top-left corner of the viewBox.
    """

    width: float
    height: float
    origin_x: float = 0.0
    origin_y: float = 0.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not math.isfinite(self.width) or self.width <= 0:
            errors.append("Canvas width must be a finite positive number")
        if not math.isfinite(self.height) or self.height <= 0:
            errors.append("Canvas height must be a finite positive number")
        if not (math.isfinite(self.origin_x) and math.isfinite(self.origin_y)):
            errors.append("Canvas origin must be finite")
        return errors


@dataclass
class SandwichOutput:
    """Output DTO containing the merged layer stack.

    Attributes:
        layers: Layers in ascending Z order.
        canvas: Sheet canvas the layers are drawn on.
        step: Slice height the layers were built with.
        errors: List of error messages if building failed.
    """

    layers: list[Layer]
    canvas: CanvasInput
    step: float = DEFAULT_STEP
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the stack was built successfully."""
        return len(self.errors) == 0

    @property
    def non_empty_layers(self) -> list[Layer]:
        """Layers with at least one placement."""
        return [layer for layer in self.layers if not layer.is_empty]

    @property
    def total_height(self) -> float:
        """Height of the whole stack in mm."""
        if not self.layers:
            return 0.0
        return self.layers[-1].z_max - self.layers[0].z_min
