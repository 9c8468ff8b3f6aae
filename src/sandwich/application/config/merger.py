"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values; cuts given on the command line are
stacked after the cuts of the configuration file.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from sandwich.application.config.loader import _validation_error
from sandwich.application.config.schema import SandwichConfiguration


def merge_config_with_cli(
    config: SandwichConfiguration,
    *,
    step: float | None = None,
    canvas_width: float | None = None,
    canvas_height: float | None = None,
    output_dir: str | None = None,
    project_name: str | None = None,
    formats: list[str] | None = None,
    skip_empty: bool | None = None,
    extra_cuts: list[dict[str, Any]] | None = None,
) -> SandwichConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base SandwichConfiguration to merge with
        step: Override for slicing.step
        canvas_width: Override for canvas.width
        canvas_height: Override for canvas.height
        output_dir: Override for output.directory
        project_name: Override for output.project_name
        formats: Override for output.formats
        skip_empty: Override for output.skip_empty
        extra_cuts: Cut dictionaries appended after the configured cuts

    Returns:
        A new, re-validated SandwichConfiguration

    Raises:
        ConfigError: If the merged values fail validation (for example a
            canvas width without a height and no canvas in the file).

    Example:
        >>> merged = merge_config_with_cli(config, step=1.0)
        >>> merged.slicing.step
        1.0
    """
    data = config.model_dump()

    if step is not None:
        data["slicing"]["step"] = step

    if canvas_width is not None or canvas_height is not None:
        canvas = data.get("canvas") or {}
        if canvas_width is not None:
            canvas["width"] = canvas_width
        if canvas_height is not None:
            canvas["height"] = canvas_height
        data["canvas"] = canvas

    data["output"].update(
        _overrides(
            directory=output_dir,
            project_name=project_name,
            formats=formats,
            skip_empty=skip_empty,
        )
    )

    if extra_cuts:
        data["cuts"] = data["cuts"] + list(extra_cuts)

    try:
        return SandwichConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e)


def _overrides(**values: Any) -> dict[str, Any]:
    """Keep only the values that were actually given."""
    return {key: value for key, value in values.items() if value is not None}
