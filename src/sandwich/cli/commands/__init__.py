"""CLI command implementations for the sandwich application.

This package contains:
- validate: Validate a configuration file
- output_handlers: Format parsing and multi-format export
"""

from sandwich.cli.commands.output_handlers import handle_export, parse_formats
from sandwich.cli.commands.validate import validate_command

__all__ = ["handle_export", "parse_formats", "validate_command"]
