"""Merge CLI overrides into a loaded job configuration."""

from __future__ import annotations

from typing import Any

from cladding.application.config.schema import CladdingConfiguration


def merge_config_with_cli(
    config: CladdingConfiguration,
    *,
    wall_width: float | None = None,
    wall_height: float | None = None,
    panel_width: float | None = None,
    panel_height: float | None = None,
    output_format: str | None = None,
) -> CladdingConfiguration:
    """Merge CLI arguments with configuration values.

    CLI arguments override corresponding config values only when the CLI
    argument is not None, so a base job file can be reused with a different
    wall or panel size.

    Returns:
        A new CladdingConfiguration with merged values; the input is not modified.

    Example:
        >>> merged = merge_config_with_cli(config, panel_width=120.0)
        >>> merged.panel.width
        120.0
    """
    wall_data: dict[str, Any] = config.wall.model_dump()
    if wall_width is not None:
        wall_data["width"] = wall_width
    if wall_height is not None:
        wall_data["height"] = wall_height

    panel_data: dict[str, Any] = config.panel.model_dump()
    if panel_width is not None:
        panel_data["width"] = panel_width
    if panel_height is not None:
        panel_data["height"] = panel_height

    output_data: dict[str, Any] = config.output.model_dump()
    if output_format is not None:
        output_data["format"] = output_format

    data = config.model_dump(mode="json")
    data["wall"] = wall_data
    data["panel"] = panel_data
    data["output"] = output_data
    return CladdingConfiguration.model_validate(data)
