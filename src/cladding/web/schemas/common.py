"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field

from cladding.domain.value_objects import ExclusionType

MAX_WALL_DIMENSION = 10_000.0
MAX_PANEL_DIMENSION = 1_000.0


class WallSchema(BaseModel):
    """Wall dimensions in centimeters, at most 100 m per side.

    Positivity is checked by the layout command so that invalid inputs are
    reported with the same error shape as other layout failures.
    """

    width: float = Field(..., le=MAX_WALL_DIMENSION, description="Wall width in cm")
    height: float = Field(..., le=MAX_WALL_DIMENSION, description="Wall height in cm")


class PanelSchema(BaseModel):
    """Stock panel dimensions in centimeters."""

    width: float = Field(default=100.0, le=MAX_PANEL_DIMENSION, description="Panel width in cm")
    height: float = Field(default=50.0, le=MAX_PANEL_DIMENSION, description="Panel height in cm")


class ExclusionSchema(BaseModel):
    """A window or door opening, bottom-left corner relative to the wall."""

    id: str | None = Field(default=None, description="Identifier; list position if omitted")
    type: ExclusionType = Field(default=ExclusionType.CUSTOM, description="Kind of opening")
    x: float = Field(..., description="Distance from wall left edge in cm")
    y: float = Field(..., description="Distance from wall bottom edge in cm")
    width: float = Field(..., description="Opening width in cm")
    height: float = Field(..., description="Opening height in cm")
