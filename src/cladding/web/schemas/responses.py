"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PlacedPanelSchema(BaseModel):
    """One piece placed on the wall."""

    id: str = Field(..., description="Stable piece id, p-{row}-{column}")
    row: int = Field(..., description="Course index, bottom course is 0")
    column: int = Field(..., description="Column index within the course")
    x: float = Field(..., description="Left edge in cm")
    y: float = Field(..., description="Bottom edge in cm")
    width: float = Field(..., description="Visible width in cm")
    height: float = Field(..., description="Visible height in cm")
    is_cut: bool = Field(..., description="Narrower or lower than a stock panel")
    is_offcut_reuse: bool = Field(..., description="Taken from an earlier offcut")


class LayoutSummarySchema(BaseModel):
    """Headline figures of a layout."""

    gross_area: float = Field(..., description="Wall area in cm²")
    net_area: float = Field(..., description="Wall area minus openings in cm²")
    theoretical_panels: int = Field(..., description="Lower bound ignoring cutting loss")
    practical_panels: int = Field(..., description="Stock panels to order")
    waste_area: float = Field(..., description="Ordered area minus net area in cm²")
    placed_count: int = Field(..., description="Pieces on the wall")
    reused_count: int = Field(..., description="Pieces cut from offcuts")


class LayoutResponseSchema(BaseModel):
    """Response for layout calculation."""

    summary: LayoutSummarySchema
    placed_panels: list[PlacedPanelSchema] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(default_factory=list, description="Blocking errors")
    warnings: list[dict[str, Any]] = Field(default_factory=list, description="Advisories")


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
