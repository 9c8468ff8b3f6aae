"""Application commands (use cases) for building a sandwich."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sandwich.domain import SandwichError, build_layers

from .dtos import CanvasInput, SandwichOutput, SlicingParametersInput

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .dtos import CutInput

logger = logging.getLogger(__name__)


class BuildSandwichCommand:
    """Command to turn a list of 3D cuts into a merged layer stack."""

    def execute(
        self,
        cuts: Sequence[CutInput],
        params_input: SlicingParametersInput | None = None,
        canvas_input: CanvasInput | None = None,
    ) -> SandwichOutput:
        """Execute the build.

        Input problems are reported through ``SandwichOutput.errors`` and
        produce no layers; nothing is partially built.

        Args:
            cuts: 3D cuts in stacking order.
            params_input: Slicing parameters (default step 0.5mm).
            canvas_input: Sheet canvas, only carried through for exporters.
                Defaults to a canvas that fits every placement offset.

        Returns:
            SandwichOutput with the layers, or with errors.
        """
        params_input = params_input or SlicingParametersInput()
        canvas_input = canvas_input or self._default_canvas(cuts)

        errors = params_input.validate() + canvas_input.validate()
        for cut in cuts:
            errors.extend(cut.validate())

        if errors:
            return SandwichOutput(
                layers=[], canvas=canvas_input, step=params_input.step, errors=errors
            )

        extrusions = [cut.to_extrusion() for cut in cuts]
        try:
            layers = build_layers(extrusions, params_input.step)
        except SandwichError as e:
            return SandwichOutput(
                layers=[], canvas=canvas_input, step=params_input.step, errors=[str(e)]
            )

        logger.info(f"Built {len(layers)} layers from {len(cuts)} cuts")
        return SandwichOutput(layers=layers, canvas=canvas_input, step=params_input.step)

    @staticmethod
    def _default_canvas(cuts: Sequence[CutInput]) -> CanvasInput:
        """Smallest canvas reaching every placement offset, at least 100mm square."""
        width = max([100.0] + [cut.x for cut in cuts])
        height = max([100.0] + [cut.y for cut in cuts])
        return CanvasInput(width=width, height=height)
