"""The ``validate`` command: check a job file without calculating a layout."""

from pathlib import Path
from typing import Annotated

import typer

from cladding.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Check a job file for syntax, schema and geometry problems.

    Openings that stick out of the wall or overlap each other are reported
    as warnings, since they skew the net area and waste figures.

    Exit codes:
        0 - Job file is valid with no warnings
        1 - Job file has errors (cannot be used)
        2 - Job file is valid but has warnings

    Example:
        cladding validate garage.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    outcome = validate_config(config)
    _report(outcome)
    raise typer.Exit(code=outcome.exit_code)


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    if error.error_type == "json_parse":
        lines = ["Invalid JSON syntax"]
        lines.extend(
            f"  Line {d.get('line', '?')}, Column {d.get('column', '?')}: "
            f"{d.get('message', 'unknown problem')}"
            for d in error.details
        )
        return lines
    if error.error_type == "validation":
        lines = []
        for d in error.details:
            lines.append(f"{d.get('path', '?')}: {d.get('message', 'unknown problem')}")
            value = d.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                lines.append(f"  Value: {value!r}")
        return lines
    return [error.message]


def display_load_error(error: ConfigError) -> None:
    """Print why a job file could not be loaded, on stderr."""
    typer.echo("Errors:", err=True)
    for line in _load_error_lines(error):
        typer.echo(f"  {line}", err=True)
    typer.echo()
    typer.echo("Validation failed.", err=True)


def _report(outcome: ValidationResult) -> None:
    if outcome.errors:
        typer.echo("Errors:", err=True)
        for issue in outcome.errors:
            typer.echo(f"  {issue.path}: {issue.message}", err=True)
            if issue.value is not None:
                typer.echo(f"    Value: {issue.value!r}", err=True)
        typer.echo()

    if outcome.warnings:
        typer.echo("Warnings:")
        for advisory in outcome.warnings:
            typer.echo(f"  {advisory.path}: {advisory.message}")
            if advisory.suggestion:
                typer.echo(f"    Suggestion: {advisory.suggestion}")
        typer.echo()

    errors, warnings = len(outcome.errors), len(outcome.warnings)
    if errors:
        typer.echo(f"Validation failed: {errors} error(s), {warnings} warning(s)", err=True)
    elif warnings:
        typer.echo(f"Validation passed with {warnings} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
