"""Typer CLI for building laminated sandwiches from 2D cuts."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from sandwich import __version__
from sandwich.application import BuildSandwichCommand, CutInput, SandwichOutput
from sandwich.application.config import (
    ConfigError,
    SandwichConfiguration,
    config_to_canvas,
    config_to_cut_inputs,
    config_to_export_options,
    config_to_slicing_params,
    load_config,
    merge_config_with_cli,
)
from sandwich.cli.commands import handle_export, parse_formats, validate_command
from sandwich.infrastructure import JsonManifestExporter, LayerTableFormatter

CUT_HELP = "A 3D cut: svg_path,x,y,z_min,z_max (offsets and heights in mm)"


app = typer.Typer(
    name="sandwich",
    help="Slice height-ranged 2D cuts into a stack of laminated layers.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _parse_cuts(texts: list[str] | None, absolute: bool) -> list[dict]:
    """Parse command-line cuts into configuration dictionaries.

    When a configuration file is in use its directory anchors relative shape
    paths, so command-line shapes are made absolute to keep them relative to
    the working directory.
    """
    cuts: list[dict] = []
    for text in texts or []:
        try:
            cut = CutInput.parse(text)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        shape = str(Path(cut.shape).absolute()) if absolute else cut.shape
        cuts.append(
            {"shape": shape, "x": cut.x, "y": cut.y, "z_min": cut.z_min, "z_max": cut.z_max}
        )
    return cuts


def _load_inputs(
    config_file: Path | None,
    cut_texts: list[str] | None,
    **overrides,
) -> tuple[SandwichConfiguration, Path | None]:
    """Load the configuration file (if any) and apply command-line values.

    Returns:
        The merged configuration and the directory relative shape paths in
        it are resolved against.
    """
    base_dir: Path | None = None
    try:
        if config_file is not None:
            config = load_config(config_file)
            base_dir = config_file.parent
        else:
            config = SandwichConfiguration(schema_version="1.0")

        extra_cuts = _parse_cuts(cut_texts, absolute=base_dir is not None)
        config = merge_config_with_cli(config, extra_cuts=extra_cuts, **overrides)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    return config, base_dir


def _build(config: SandwichConfiguration, base_dir: Path | None) -> SandwichOutput:
    command = BuildSandwichCommand()
    result = command.execute(
        config_to_cut_inputs(config, base_dir),
        config_to_slicing_params(config),
        config_to_canvas(config),
    )
    if not result.is_valid:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)
    return result


@app.command()
def build(
    output_dir: Annotated[Path, typer.Argument(help="Output directory")],
    size_x: Annotated[
        float, typer.Argument(help="Sandwich overall width, used as canvas size, in mm")
    ],
    size_y: Annotated[
        float, typer.Argument(help="Sandwich overall height, used as canvas size, in mm")
    ],
    cuts: Annotated[list[str] | None, typer.Argument(help=CUT_HELP)] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    step: Annotated[
        float | None,
        typer.Option("--step", help="Slice height in mm (default: 0.5)"),
    ] = None,
    formats: Annotated[
        str | None,
        typer.Option("--formats", "-f", help="Comma-separated export formats: svg,json (or 'all')"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
    skip_empty: Annotated[
        bool,
        typer.Option("--skip-empty", help="Do not export layers without any cut"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log slicing and export details"),
    ] = False,
) -> None:
    """Build the layer stack and export one SVG sheet per layer.

    Cuts come from the command line, from a JSON configuration file, or
    both; command-line cuts are stacked after the configured ones.

    Examples:
        sandwich build out 200 150 ring.svg,10,10,0,3 hole.svg,40,40,1,2
        sandwich build out 200 150 --config box.json --step 1
        sandwich build out 200 150 --config box.json --formats svg,json
    """
    _configure_logging(verbose)

    config, base_dir = _load_inputs(
        config_file,
        cuts,
        step=step,
        canvas_width=size_x,
        canvas_height=size_y,
        output_dir=str(output_dir),
        project_name=project_name,
        formats=parse_formats(formats) if formats is not None else None,
        skip_empty=skip_empty or None,
    )
    if not config.cuts:
        typer.echo("Error: No cuts given. Pass cuts as arguments or use --config.", err=True)
        raise typer.Exit(code=1)

    result = _build(config, base_dir)
    empty = len(result.layers) - len(result.non_empty_layers)
    typer.echo(
        f"Built {len(result.layers)} layers ({empty} empty) from {len(config.cuts)} cuts, "
        f"{result.total_height:g}mm high"
    )

    handle_export(
        config.output.formats,
        output_dir,
        config.output.project_name,
        result,
        config_to_export_options(config),
    )


@app.command()
def layers(
    cuts: Annotated[list[str] | None, typer.Argument(help=CUT_HELP)] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    step: Annotated[
        float | None,
        typer.Option("--step", help="Slice height in mm (default: 0.5)"),
    ] = None,
    skip_empty: Annotated[
        bool,
        typer.Option("--skip-empty", help="Hide layers without any cut"),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the layer manifest as JSON"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log slicing details"),
    ] = False,
) -> None:
    """Show the layer stack without writing any file.

    Examples:
        sandwich layers ring.svg,10,10,0,3 hole.svg,40,40,1,2
        sandwich layers --config box.json --step 1 --json
    """
    _configure_logging(verbose)

    config, base_dir = _load_inputs(
        config_file, cuts, step=step, skip_empty=skip_empty or None
    )
    result = _build(config, base_dir)

    if as_json:
        exporter = JsonManifestExporter(skip_empty=config.output.skip_empty)
        typer.echo(exporter.export_string(result, config.output.project_name))
    else:
        formatter = LayerTableFormatter(show_empty=not config.output.skip_empty)
        typer.echo(formatter.format(result.layers))


@app.command()
def version() -> None:
    """Show the sandwich version."""
    typer.echo(f"sandwich {__version__}")


if __name__ == "__main__":
    app()
