"""Pydantic configuration schema models for cladding job files.

This module defines the schema for JSON job files describing one wall,
one stock panel size and the openings to leave uncovered. It uses
Pydantic v2 for validation and serialization.

The ExclusionType enum is reused from the domain layer to ensure
consistency and avoid duplication.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cladding.domain.value_objects import ExclusionType

# Supported schema versions for job files
# Version 1.0: Wall, panel, rectangular exclusions and output options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Defaults match the usual 5 m x 3 m wall and 100 x 50 cm insulation board
DEFAULT_WALL_WIDTH: float = 500.0
DEFAULT_WALL_HEIGHT: float = 300.0
DEFAULT_PANEL_WIDTH: float = 100.0
DEFAULT_PANEL_HEIGHT: float = 50.0

OutputFormat = Literal["summary", "table", "json", "diagram", "svg", "all"]


class WallConfig(BaseModel):
    """Wall dimensions in centimeters.

    Attributes:
        width: Wall width.
        height: Wall height.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=DEFAULT_WALL_WIDTH, gt=0, description="Wall width in cm")
    height: float = Field(default=DEFAULT_WALL_HEIGHT, gt=0, description="Wall height in cm")


class PanelConfig(BaseModel):
    """Stock panel dimensions in centimeters.

    Attributes:
        width: Panel width.
        height: Panel height.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=DEFAULT_PANEL_WIDTH, gt=0, description="Panel width in cm")
    height: float = Field(default=DEFAULT_PANEL_HEIGHT, gt=0, description="Panel height in cm")


class ExclusionConfig(BaseModel):
    """Configuration for a window or door opening.

    Attributes:
        id: Optional identifier; assigned from the list position if omitted.
        type: Kind of opening (window, door, custom).
        x: Distance from the wall's left edge to the opening's left edge.
        y: Distance from the wall's bottom edge to the opening's bottom edge.
        width: Opening width.
        height: Opening height.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    type: ExclusionType = ExclusionType.CUSTOM
    x: float = Field(description="Distance from wall left edge")
    y: float = Field(description="Distance from wall bottom edge")
    width: float = Field(gt=0, description="Opening width")
    height: float = Field(gt=0, description="Opening height")


class SvgOutputConfigSchema(BaseModel):
    """SVG drawing configuration.

    Attributes:
        scale: Pixels per centimeter.
        show_exclusions: Whether to draw openings over the panels.
        show_legend: Whether to add a colour legend below the wall.
        show_titles: Whether to add a hover tooltip per panel.
    """

    model_config = ConfigDict(extra="forbid")

    scale: float = Field(default=2.0, gt=0, description="Pixels per centimeter")
    show_exclusions: bool = True
    show_legend: bool = True
    show_titles: bool = True


class OutputConfig(BaseModel):
    """Configuration for output format and file export.

    Attributes:
        format: Report printed by the CLI.
        formats: Export formats to write (json, svg, csv).
        output_dir: Directory for exported files.
        svg: SVG drawing configuration.
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = "summary"
    formats: list[str] = Field(default_factory=list, description="Export formats to generate")
    output_dir: str | None = Field(default=None, description="Directory for exported files")
    svg: SvgOutputConfigSchema = Field(default_factory=SvgOutputConfigSchema)


class CladdingConfiguration(BaseModel):
    """Root configuration model for a cladding job file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        project_name: Base name for exported files
        wall: Wall dimensions
        panel: Stock panel dimensions
        exclusions: Openings that need no cladding
        output: Output configuration

    Example:
        >>> config = CladdingConfiguration(
        ...     schema_version="1.0",
        ...     wall=WallConfig(width=500, height=300),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    project_name: str = Field(default="wall", min_length=1)
    wall: WallConfig = Field(default_factory=WallConfig)
    panel: PanelConfig = Field(default_factory=PanelConfig)
    exclusions: list[ExclusionConfig] = Field(default_factory=list)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def check_version(cls, v: str) -> str:
        """Accept any minor release of a supported major version."""
        major = v.partition(".")[0]
        if any(supported.partition(".")[0] == major for supported in SUPPORTED_VERSIONS):
            return v
        raise ValueError(
            f"Unsupported schema version '{v}' "
            f"(supported: {', '.join(sorted(SUPPORTED_VERSIONS))})"
        )

    @model_validator(mode="after")
    def assign_exclusion_ids(self) -> "CladdingConfiguration":
        """Give unnamed exclusions their 1-based list position as id."""
        for index, exclusion in enumerate(self.exclusions):
            if exclusion.id is None:
                exclusion.id = str(index + 1)
        return self
