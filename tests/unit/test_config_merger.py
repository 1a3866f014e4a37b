"""Unit tests for CLI overrides and configuration-to-DTO conversion."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cladding.application.config import (
    CladdingConfiguration,
    config_to_dtos,
    merge_config_with_cli,
)


@pytest.fixture
def base_config() -> CladdingConfiguration:
    return CladdingConfiguration.model_validate(
        {
            "schema_version": "1.0",
            "project_name": "garage",
            "wall": {"width": 500, "height": 300},
            "panel": {"width": 120, "height": 60},
            "exclusions": [
                {"type": "window", "x": 50, "y": 100, "width": 100, "height": 100}
            ],
            "output": {"format": "table", "svg": {"scale": 3.0}},
        }
    )


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli."""

    def test_no_overrides_keeps_values(self, base_config: CladdingConfiguration) -> None:
        merged = merge_config_with_cli(base_config)
        assert merged == base_config

    def test_overrides_replace_only_given_values(
        self, base_config: CladdingConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config, wall_width=600, panel_height=40)
        assert merged.wall.width == 600
        assert merged.wall.height == 300
        assert merged.panel.width == 120
        assert merged.panel.height == 40

    def test_output_format_override(self, base_config: CladdingConfiguration) -> None:
        merged = merge_config_with_cli(base_config, output_format="json")
        assert merged.output.format == "json"
        assert merged.output.svg.scale == 3.0

    def test_input_not_modified(self, base_config: CladdingConfiguration) -> None:
        merge_config_with_cli(base_config, wall_width=600)
        assert base_config.wall.width == 500

    def test_exclusions_preserved(self, base_config: CladdingConfiguration) -> None:
        merged = merge_config_with_cli(base_config, wall_height=250)
        assert merged.exclusions[0].id == "1"
        assert merged.exclusions[0].type.value == "window"

    def test_invalid_override_rejected(self, base_config: CladdingConfiguration) -> None:
        with pytest.raises(ValidationError):
            merge_config_with_cli(base_config, wall_width=-10)


class TestConfigToDtos:
    """Tests for config_to_dtos."""

    def test_conversion(self, base_config: CladdingConfiguration) -> None:
        wall, panel, exclusions = config_to_dtos(base_config)

        assert (wall.width, wall.height) == (500, 300)
        assert (panel.width, panel.height) == (120, 60)
        assert len(exclusions) == 1
        assert exclusions[0].id == "1"
        assert exclusions[0].kind == "window"
        assert exclusions[0].validate() == []
