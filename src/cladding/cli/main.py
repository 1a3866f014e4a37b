"""Typer CLI for panel layout calculation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cladding.application import (
    CalculateLayoutCommand,
    ExclusionInput,
    LayoutOutput,
    PanelInput,
    WallInput,
)
from cladding.application.config import (
    ConfigError,
    config_to_dtos,
    load_config,
    merge_config_with_cli,
)
from cladding.application.config.schema import (
    DEFAULT_PANEL_HEIGHT,
    DEFAULT_PANEL_WIDTH,
    CladdingConfiguration,
)
from cladding.cli.commands import display_load_error, validate_command
from cladding.domain import ExclusionType
from cladding.infrastructure import (
    ExporterRegistry,
    ExportManager,
    JsonLayoutExporter,
    LayoutRenderer,
    LayoutSummaryFormatter,
    PlacementTableFormatter,
)

OUTPUT_FORMATS = ("summary", "table", "json", "diagram", "svg", "all")


def parse_exclusion(value: str, index: int) -> ExclusionInput:
    """Parse an ``x,y,width,height[,type]`` option value.

    Args:
        value: Raw option value in centimeters.
        index: 1-based position, used as the exclusion id.

    Raises:
        typer.BadParameter: If the value cannot be parsed.
    """
    parts = [p.strip() for p in value.split(",")]
    if len(parts) not in (4, 5):
        raise typer.BadParameter(
            f"Expected x,y,width,height[,type], got '{value}'",
            param_hint="--exclusion",
        )
    try:
        x, y, width, height = (float(p) for p in parts[:4])
    except ValueError:
        raise typer.BadParameter(
            f"Exclusion values must be numbers, got '{value}'",
            param_hint="--exclusion",
        )
    kind = parts[4].lower() if len(parts) == 5 else ExclusionType.CUSTOM.value
    return ExclusionInput(id=str(index), x=x, y=y, width=width, height=height, kind=kind)


def _resolve_export_formats(value: str) -> list[str]:
    """Turn an ``--output-formats`` value into registered format names.

    Raises:
        typer.Exit: If a name is unknown or nothing is left to export.
    """
    known = ExporterRegistry.available_formats()
    if value.strip().lower() == "all":
        return known

    requested = [name.strip().lower() for name in value.split(",") if name.strip()]
    unknown = sorted(set(requested) - set(known))
    if unknown:
        typer.echo(f"Unknown formats: {', '.join(unknown)}", err=True)
        typer.echo(f"Available formats: {', '.join(known)}", err=True)
        raise typer.Exit(code=1)
    if not requested:
        typer.echo("No export formats given.", err=True)
        raise typer.Exit(code=1)
    return requested


def _export_files(
    formats_value: str,
    directory: Path | None,
    project_name: str,
    output: LayoutOutput,
    exporter_options: dict | None = None,
) -> None:
    """Write one file per requested format and list them."""
    formats = _resolve_export_formats(formats_value)
    manager = ExportManager(directory or Path("."))
    try:
        written = manager.export_all(formats, output, project_name, exporter_options)
    except (OSError, ValueError) as e:
        typer.echo(f"Export failed: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for name, path in written.items():
        typer.echo(f"  {name}: {path}")


app = typer.Typer(
    name="cladding",
    help="Plan running-bond wall cladding and estimate how many panels to order.",
)

app.command(name="validate")(validate_command)


@app.command()
def calculate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ] = None,
    wall_width: Annotated[
        float | None,
        typer.Option("--wall-width", help="Wall width in cm"),
    ] = None,
    wall_height: Annotated[
        float | None,
        typer.Option("--wall-height", help="Wall height in cm"),
    ] = None,
    panel_width: Annotated[
        float | None,
        typer.Option("--panel-width", help=f"Panel width in cm (default {DEFAULT_PANEL_WIDTH:g})"),
    ] = None,
    panel_height: Annotated[
        float | None,
        typer.Option("--panel-height", help=f"Panel height in cm (default {DEFAULT_PANEL_HEIGHT:g})"),
    ] = None,
    exclusions: Annotated[
        list[str] | None,
        typer.Option(
            "--exclusion",
            "-e",
            help="Opening as x,y,width,height[,type] in cm; repeatable",
        ),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: summary, table, json, diagram, svg, all"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write json or svg output to this file"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: json,svg,csv (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Calculate the panel layout and order advice for a wall.

    Example:
        cladding calculate --wall-width 500 --wall-height 300 -e 200,0,100,210,door
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config: CladdingConfiguration | None = None
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            display_load_error(e)
            raise typer.Exit(code=1)
        try:
            config = merge_config_with_cli(
                config,
                wall_width=wall_width,
                wall_height=wall_height,
                panel_width=panel_width,
                panel_height=panel_height,
                output_format=output_format,
            )
        except ValueError as e:
            typer.echo(f"Errors:\n  {e}", err=True)
            raise typer.Exit(code=1)
        wall_input, panel_input, exclusion_inputs = config_to_dtos(config)
    else:
        if wall_width is None or wall_height is None:
            typer.echo(
                "Error: --wall-width and --wall-height are required without --config",
                err=True,
            )
            raise typer.Exit(code=1)
        wall_input = WallInput(width=wall_width, height=wall_height)
        panel_input = PanelInput(
            width=panel_width if panel_width is not None else DEFAULT_PANEL_WIDTH,
            height=panel_height if panel_height is not None else DEFAULT_PANEL_HEIGHT,
        )
        exclusion_inputs = []

    start = len(exclusion_inputs)
    for offset, raw in enumerate(exclusions or []):
        exclusion_inputs.append(parse_exclusion(raw, start + offset + 1))

    fmt = output_format or (config.output.format if config else "summary")
    if fmt not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {fmt}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    result = CalculateLayoutCommand().execute(wall_input, panel_input, exclusion_inputs)

    if not result.is_valid:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)

    svg_options = config.output.svg.model_dump() if config else {}
    name = project_name or (config.project_name if config else "wall")

    formats_str = output_formats
    if formats_str is None and config is not None and config.output.formats:
        formats_str = ",".join(config.output.formats)
    if formats_str is not None:
        directory = output_dir
        if directory is None and config is not None and config.output.output_dir:
            directory = Path(config.output.output_dir)
        _export_files(
            formats_str, directory, name, result, {"svg": svg_options}
        )
        return

    renderer = LayoutRenderer(**svg_options)
    if fmt == "summary":
        typer.echo(LayoutSummaryFormatter().format(result))
    elif fmt == "table":
        typer.echo(PlacementTableFormatter().format(result))
    elif fmt == "diagram":
        typer.echo(renderer.render_ascii(result))
    elif fmt == "json":
        content = JsonLayoutExporter().export_string(result)
        if output_file is not None:
            output_file.write_text(content, encoding="utf-8")
            typer.echo(f"JSON exported to: {output_file}")
        else:
            typer.echo(content)
    elif fmt == "svg":
        content = renderer.render_svg(result)
        if output_file is not None:
            output_file.write_text(content, encoding="utf-8")
            typer.echo(f"SVG exported to: {output_file}")
        else:
            typer.echo(content)
    else:  # "all"
        typer.echo(LayoutSummaryFormatter().format(result))
        typer.echo()
        typer.echo(renderer.render_ascii(result))
        typer.echo()
        typer.echo(PlacementTableFormatter().format(result))


if __name__ == "__main__":
    app()
