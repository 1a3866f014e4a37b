"""Integration tests for the calculate CLI command."""

import json
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from cladding.cli.main import app, parse_exclusion

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


DOOR_ARGS = [
    "calculate",
    "--wall-width",
    "500",
    "--wall-height",
    "300",
    "-e",
    "200,0,100,210,door",
]


class TestParseExclusion:
    """Tests for the --exclusion option parser."""

    def test_four_values(self) -> None:
        exclusion = parse_exclusion("10, 20, 30, 40", 3)
        assert (exclusion.id, exclusion.x, exclusion.y) == ("3", 10, 20)
        assert (exclusion.width, exclusion.height, exclusion.kind) == (30, 40, "custom")

    def test_kind(self) -> None:
        assert parse_exclusion("0,0,1,1,Window", 1).kind == "window"

    @pytest.mark.parametrize("value", ["1,2,3", "a,b,c,d", "1,2,3,4,door,extra"])
    def test_bad_values(self, value: str) -> None:
        with pytest.raises(typer.BadParameter):
            parse_exclusion(value, 1)


class TestCalculateCommand:
    """Tests for the calculate command."""

    def test_summary(self, runner: CliRunner) -> None:
        result = runner.invoke(app, DOOR_ARGS)

        assert result.exit_code == 0
        assert "Theoretical: 26 panels" in result.output
        assert "Practical:   28 panels (order advice)" in result.output
        assert "Waste:       1.1 m²" in result.output

    def test_requires_wall_without_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "--wall-width", "500"])

        assert result.exit_code == 1
        assert "--wall-height are required" in result.output

    def test_invalid_dimensions(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "--wall-width", "500", "--wall-height", "300", "--panel-width", "0"]
        )

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "Panel width must be positive" in result.output

    def test_unknown_exclusion_type(self, runner: CliRunner) -> None:
        result = runner.invoke(app, DOOR_ARGS[:-1] + ["200,0,100,210,skylight"])

        assert result.exit_code == 1
        assert "type must be one of" in result.output

    def test_bad_exclusion_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(app, DOOR_ARGS[:-1] + ["200,0,100"])
        assert result.exit_code != 0

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, DOOR_ARGS + ["--format", "pdf"])

        assert result.exit_code == 1
        assert "Unknown format: pdf" in result.output

    def test_table(self, runner: CliRunner) -> None:
        result = runner.invoke(app, DOOR_ARGS + ["--format", "table"])

        assert result.exit_code == 0
        assert "PLACEMENTS" in result.output
        assert "31 pieces from 28 stock panels" in result.output

    def test_diagram(self, runner: CliRunner) -> None:
        result = runner.invoke(app, DOOR_ARGS + ["-f", "diagram"])

        assert result.exit_code == 0
        assert "Wall 500 x 300 cm" in result.output
        assert "X" in result.output

    def test_json_stdout(self, runner: CliRunner) -> None:
        result = runner.invoke(app, DOOR_ARGS + ["-f", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["summary"]["practical_panels"] == 28

    def test_json_file(self, runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "layout.json"
        result = runner.invoke(app, DOOR_ARGS + ["-f", "json", "-o", str(out)])

        assert result.exit_code == 0
        assert "JSON exported to:" in result.output
        assert json.loads(out.read_text(encoding="utf-8"))["summary"]["placed_count"] == 31

    def test_svg_file(self, runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "layout.svg"
        result = runner.invoke(app, DOOR_ARGS + ["-f", "svg", "-o", str(out)])

        assert result.exit_code == 0
        assert "SVG exported to:" in result.output
        assert out.read_text(encoding="utf-8").startswith("<svg")

    def test_all(self, runner: CliRunner) -> None:
        result = runner.invoke(app, DOOR_ARGS + ["-f", "all"])

        assert result.exit_code == 0
        assert "PANEL LAYOUT" in result.output
        assert "Wall 500 x 300 cm" in result.output
        assert "PLACEMENTS" in result.output

    def test_custom_panel(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "calculate",
                "--wall-width",
                "250",
                "--wall-height",
                "50",
                "--panel-width",
                "125",
                "--panel-height",
                "50",
            ],
        )
        assert result.exit_code == 0
        assert "Practical:   2 panels" in result.output


class TestCalculateWithConfig:
    """Tests for calculate driven by a job file."""

    def test_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-c", str(FIXTURES_PATH / "valid_door.json")])

        assert result.exit_code == 0
        assert "Practical:   28 panels" in result.output

    def test_cli_overrides_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "calculate",
                "-c",
                str(FIXTURES_PATH / "valid_minimal.json"),
                "--wall-width",
                "150",
                "--wall-height",
                "100",
            ],
        )
        assert result.exit_code == 0
        assert "Practical:   3 panels" in result.output

    def test_cli_exclusions_are_appended(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "calculate",
                "-c",
                str(FIXTURES_PATH / "valid_door.json"),
                "-e",
                "0,0,100,50",
                "-f",
                "json",
            ],
        )
        assert result.exit_code == 0
        exclusions = json.loads(result.output)["exclusions"]
        assert [e["id"] for e in exclusions] == ["door", "2"]

    def test_invalid_override(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["calculate", "-c", str(FIXTURES_PATH / "valid_door.json"), "--wall-width", "-5"],
        )
        assert result.exit_code == 1
        assert "Errors:" in result.output

    def test_missing_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-c", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_config_export_formats(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "calculate",
                "-c",
                str(FIXTURES_PATH / "with_exports.json"),
                "--output-dir",
                str(tmp_path),
            ],
        )

        assert result.exit_code == 0
        assert "Exported files:" in result.output
        assert (tmp_path / "shed_json.json").exists()
        assert (tmp_path / "shed_csv.csv").exists()
        assert not (tmp_path / "shed_svg.svg").exists()


class TestMultiFormatExport:
    """Tests for --output-formats."""

    def test_all_formats(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            DOOR_ARGS
            + ["--output-formats", "all", "--output-dir", str(tmp_path), "--project-name", "garage"],
        )

        assert result.exit_code == 0
        for name in ("garage_json.json", "garage_svg.svg", "garage_csv.csv"):
            assert (tmp_path / name).exists()

    def test_unknown_format(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, DOOR_ARGS + ["--output-formats", "json,dxf", "--output-dir", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "Unknown formats: dxf" in result.output
        assert not (tmp_path / "wall_json.json").exists()

    def test_config_svg_options_used(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "job.json"
        config.write_text(
            json.dumps(
                {
                    "schema_version": "1.0",
                    "wall": {"width": 100, "height": 50},
                    "output": {"svg": {"scale": 3.0}},
                }
            )
        )
        result = runner.invoke(
            app,
            ["calculate", "-c", str(config), "--output-formats", "svg", "--output-dir", str(tmp_path)],
        )

        assert result.exit_code == 0
        assert 'width="300"' in (tmp_path / "wall_svg.svg").read_text(encoding="utf-8")
