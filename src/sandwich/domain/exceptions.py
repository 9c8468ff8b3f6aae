"""Errors raised by the slicing core."""


class SandwichError(Exception):
    """Base class for errors raised while building a layer stack."""

    pass


class InvalidConfigurationError(SandwichError, ValueError):
    """Raised when the slicing step is not a finite, strictly positive number."""

    def __init__(self, step: float) -> None:
        self.step = step
        super().__init__(f"Slicing step must be a positive number of mm, got {step!r}")


class InvalidExtrusionError(SandwichError, ValueError):
    """Raised when an extrusion has an inverted or non-finite height range.

    Attributes:
        index: Position of the offending extrusion in the input sequence.
        extrusion: The offending extrusion.
    """

    def __init__(self, index: int, extrusion: object, reason: str) -> None:
        self.index = index
        self.extrusion = extrusion
        super().__init__(f"Extrusion #{index} ({extrusion}) is invalid: {reason}")
