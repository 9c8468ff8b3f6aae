"""Pydantic configuration schema models for sandwich designs.

This module defines the schema of JSON configuration files describing a
set of 3D cuts, the sheet canvas, the slicing step and the export options.
It uses Pydantic v2 for validation and serialization.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Supported schema versions for configuration files
# Version 1.0: Cuts, canvas, slicing step, svg/json output
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class CutConfig(BaseModel):
    """One 3D cut: an SVG shape placed on the sheet between two heights.

    Attributes:
        shape: Path to the SVG file holding the 2D shape
        x: Offset from the left edge of the sheet in mm
        y: Offset from the top edge of the sheet in mm
        z_min: Lowest height the shape is present at, in mm
        z_max: Highest height the shape is present at, in mm
    """

    model_config = ConfigDict(extra="forbid")

    shape: str = Field(..., min_length=1)
    x: float = 0.0
    y: float = 0.0
    z_min: float
    z_max: float

    @model_validator(mode="after")
    def validate_height_range(self) -> "CutConfig":
        """Ensure the height range is not inverted."""
        if self.z_min > self.z_max:
            raise ValueError(
                f"z_min ({self.z_min}) must be less than or equal to z_max ({self.z_max})"
            )
        return self


class CanvasConfig(BaseModel):
    """Sheet canvas each layer is drawn on, in mm."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    origin_x: float = 0.0
    origin_y: float = 0.0


class SlicingConfig(BaseModel):
    """Z-axis quantization settings.

    Attributes:
        step: Slice height in mm. 1.0 reproduces whole-millimetre slicing.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    step: float = Field(default=0.5, gt=0, description="Slice height in mm")


class StyleConfig(BaseModel):
    """Stroke and fill applied to the shapes of every layer sheet."""

    model_config = ConfigDict(extra="forbid")

    stroke: str = "rgb(255,0,0)"
    stroke_width: str = "0.2pt"
    fill: str = "none"


class CompositeConfig(BaseModel):
    """Stacked overview drawing of all layers.

    Attributes:
        enabled: Whether to write the composite drawing
        skew_x: Horizontal skew in degrees giving the stack its depth effect
        spacing: Vertical distance between stacked layers in drawing units
        margin: Blank border around the stack in drawing units
        stroke: Stroke color of the stacked outlines
        stroke_width: Stroke width of the stacked outlines
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    skew_x: float = Field(default=50.0, gt=-90.0, lt=90.0)
    spacing: float = Field(default=100.0, gt=0)
    margin: float = Field(default=50.0, ge=0)
    stroke: str = "rgb(255,0,0)"
    stroke_width: str = "1pt"


class OutputConfig(BaseModel):
    """Export configuration.

    Attributes:
        directory: Directory the files are written to (CLI argument wins)
        project_name: Base name of the written files
        formats: Export formats to write (e.g. "svg", "json")
        skip_empty: Leave layers without any cut out of the exports
        style: Style of the per-layer sheets
        composite: Stacked overview settings
    """

    model_config = ConfigDict(extra="forbid")

    directory: str | None = None
    project_name: str = Field(default="design", min_length=1)
    formats: list[str] = Field(default_factory=lambda: ["svg"], min_length=1)
    skip_empty: bool = False
    style: StyleConfig = Field(default_factory=StyleConfig)
    composite: CompositeConfig = Field(default_factory=CompositeConfig)

    @field_validator("formats")
    @classmethod
    def normalize_formats(cls, v: list[str]) -> list[str]:
        """Lower-case format names and drop duplicates, keeping order."""
        seen: list[str] = []
        for name in v:
            name = name.strip().lower()
            if name and name not in seen:
                seen.append(name)
        if not seen:
            raise ValueError("At least one output format is required")
        return seen


class SandwichConfiguration(BaseModel):
    """Root configuration model for sandwich designs.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        canvas: Sheet canvas (optional, derived from cut offsets when missing)
        slicing: Z-axis quantization settings
        cuts: 3D cuts in stacking order
        output: Export configuration

    Example:
        >>> config = SandwichConfiguration(
        ...     schema_version="1.0",
        ...     cuts=[CutConfig(shape="ring.svg", z_min=0, z_max=3)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    canvas: CanvasConfig | None = None
    slicing: SlicingConfig = Field(default_factory=SlicingConfig)
    cuts: list[CutConfig] = Field(default_factory=list)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
