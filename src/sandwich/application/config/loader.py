"""Configuration file loader with error reporting.

Loads JSON configuration files describing a sandwich, and reports file
system errors, JSON syntax errors and schema violations as ConfigError with
enough detail for the CLI to point at the offending field.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from sandwich.application.config.schema import SandwichConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Line/column for JSON errors, one entry per field for
            validation errors
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("canvas", "width"))
        'canvas.width'
        >>> _format_json_path(("cuts", 2, "z_max"))
        'cuts[2].z_max'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _validation_error(
    error: PydanticValidationError, path: Path | None = None
) -> ConfigError:
    """Turn a Pydantic ValidationError into a ConfigError with one detail per field."""
    details = [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]

    lines = ["Configuration validation failed:"]
    for detail in details:
        # Whole-object inputs are noise in a one-line summary
        value = detail["value"]
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")

    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=path,
        details=details,
    )


def load_config(path: Path) -> SandwichConfiguration:
    """Load and validate a sandwich configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated SandwichConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            error_type attribute tells which step failed.

    Example:
        >>> try:
        ...     config = load_config(Path("my-sandwich.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    try:
        config = SandwichConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, path)

    logger.debug(f"Loaded {len(config.cuts)} cuts from {path}")
    return config


def load_config_from_dict(data: dict[str, Any]) -> SandwichConfiguration:
    """Load and validate a sandwich configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return SandwichConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e)
