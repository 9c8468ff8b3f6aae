"""Export handling for the sandwich CLI."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer

from sandwich.infrastructure.exporters import ExporterRegistry, ExportManager
from sandwich.infrastructure.shape_resolver import ShapeResolutionError

if TYPE_CHECKING:
    from sandwich.application.dtos import SandwichOutput

__all__ = [
    "handle_export",
    "parse_formats",
]


def parse_formats(formats_str: str) -> list[str]:
    """Parse a comma-separated format list, or "all" for every registered format.

    Unknown formats are reported on stderr and end the command with code 1.
    """
    if formats_str.strip().lower() == "all":
        return ExporterRegistry.available_formats()

    formats = [f.strip().lower() for f in formats_str.split(",") if f.strip()]
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)
    check_formats(formats)
    return formats


def check_formats(formats: list[str]) -> None:
    """Exit with code 1 if any format has no registered exporter."""
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)


def handle_export(
    formats: list[str],
    output_dir: Path,
    project_name: str,
    result: SandwichOutput,
    options: dict[str, dict[str, Any]] | None = None,
) -> dict[str, list[Path]]:
    """Export the layer stack to every requested format.

    Args:
        formats: Format names, already checked against the registry.
        output_dir: Directory receiving the files.
        project_name: Base name of the written files.
        result: The built layer stack.
        options: Per-format exporter options.

    Returns:
        Mapping of format name to written paths.
    """
    check_formats(formats)
    manager = ExportManager(output_dir, options)

    try:
        exported = manager.export_all(formats, result, project_name)
    except ShapeResolutionError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)
    except (OSError, ValueError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, paths in exported.items():
        for path in paths:
            typer.echo(f"  {fmt.upper()}: {path}")
    return exported
