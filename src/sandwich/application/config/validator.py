"""Validation structures and fabrication advisories.

Schema validation is done by the Pydantic models; this module adds the
checks that need more than one field or the filesystem. Shape files that
exist but cannot be embedded are errors, since every export would fail;
the other findings are warnings that do not block a build.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sandwich.application.config.adapter import resolve_shape_path
from sandwich.application.config.schema import SandwichConfiguration
from sandwich.domain import Z_TOLERANCE


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "cuts[0].z_max")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _off_grid(value: float, origin: float, step: float) -> bool:
    """True when value does not sit on a slice boundary starting at origin."""
    steps = (value - origin) / step
    return abs(steps - round(steps)) * step > Z_TOLERANCE


def check_cut_advisories(
    config: SandwichConfiguration, base_dir: Path | None = None
) -> ValidationResult:
    """Check cuts for problems that would give a surprising layer stack.

    Errors are issued for shape files that exist but are not well-formed
    SVG or cannot be read.

    Warnings are issued for:
    - an empty cut list
    - shape files that do not exist
    - zero-thickness cuts
    - heights off the slice grid, which get widened to the next boundary
    - offsets outside the canvas
    """
    from sandwich.infrastructure.shape_resolver import ShapeResolutionError, SvgShapeResolver

    result = ValidationResult()

    if not config.cuts:
        result.add_warning(
            "cuts",
            "No cuts configured; the sandwich will have no layers",
            "Add cuts to the file or pass them on the command line",
        )
        return result

    step = config.slicing.step
    z_origin = min(cut.z_min for cut in config.cuts)
    resolver = SvgShapeResolver()

    for i, cut in enumerate(config.cuts):
        path = f"cuts[{i}]"

        shape_path = Path(resolve_shape_path(cut.shape, base_dir))
        if not shape_path.is_file():
            result.add_warning(
                f"{path}.shape",
                f"Shape file not found: {shape_path}",
                "Exports will fail until the file exists",
            )
        else:
            try:
                resolver.resolve(str(shape_path))
            except ShapeResolutionError as e:
                result.add_error(f"{path}.shape", str(e), value=cut.shape)

        if cut.z_max - cut.z_min <= Z_TOLERANCE:
            result.add_warning(
                f"{path}.z_max",
                f"Cut has zero thickness at {cut.z_min}mm",
                f"It will occupy a single {step}mm slice",
            )

        for name in ("z_min", "z_max"):
            value = getattr(cut, name)
            if _off_grid(value, z_origin, step):
                result.add_warning(
                    f"{path}.{name}",
                    f"{name} {value}mm is not on a {step}mm slice boundary",
                    "The cut will be widened to the enclosing slice boundaries",
                )

        if config.canvas is not None:
            right = config.canvas.origin_x + config.canvas.width
            bottom = config.canvas.origin_y + config.canvas.height
            if not (config.canvas.origin_x <= cut.x < right) or not (
                config.canvas.origin_y <= cut.y < bottom
            ):
                result.add_warning(
                    path,
                    f"Offset ({cut.x}, {cut.y}) lies outside the canvas",
                    "Enlarge the canvas or move the cut",
                )

    return result


def validate_config(
    config: SandwichConfiguration, base_dir: Path | None = None
) -> ValidationResult:
    """Perform full validation of an already schema-valid configuration.

    Args:
        config: Configuration loaded with load_config.
        base_dir: Directory relative shape paths are resolved against.

    Returns:
        ValidationResult with any errors and warnings found.
    """
    result = ValidationResult()

    if config.canvas is None and "svg" in config.output.formats:
        result.add_warning(
            "canvas",
            "No canvas configured for SVG output",
            "Pass the sheet size on the command line or add a canvas section",
        )

    return result.merge(check_cut_advisories(config, base_dir))
