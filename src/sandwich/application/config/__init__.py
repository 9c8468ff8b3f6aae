"""Configuration schema and loading for sandwich designs.

Public API:
    - SandwichConfiguration: Root configuration model
    - CutConfig, CanvasConfig, SlicingConfig, OutputConfig: Section models
    - load_config / load_config_from_dict: Load and validate a configuration
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply command-line overrides
    - validate_config: Advisory checks on a loaded configuration
    - config_to_*: Conversion into application DTOs

Example:
    >>> from pathlib import Path
    >>> from sandwich.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-sandwich.json"))
    ...     print(f"{len(config.cuts)} cuts at {config.slicing.step}mm")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from sandwich.application.config.adapter import (
    config_to_canvas,
    config_to_cut_inputs,
    config_to_export_options,
    config_to_slicing_params,
    resolve_shape_path,
)
from sandwich.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from sandwich.application.config.merger import merge_config_with_cli
from sandwich.application.config.schema import (
    SUPPORTED_VERSIONS,
    CanvasConfig,
    CompositeConfig,
    CutConfig,
    OutputConfig,
    SandwichConfiguration,
    SlicingConfig,
    StyleConfig,
)
from sandwich.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_cut_advisories,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CanvasConfig",
    "CompositeConfig",
    "ConfigError",
    "CutConfig",
    "OutputConfig",
    "SandwichConfiguration",
    "SlicingConfig",
    "StyleConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_cut_advisories",
    "config_to_canvas",
    "config_to_cut_inputs",
    "config_to_export_options",
    "config_to_slicing_params",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "resolve_shape_path",
    "validate_config",
]
