"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from cladding.web.schemas.common import ExclusionSchema, PanelSchema, WallSchema


class LayoutRequest(BaseModel):
    """Request for calculating a wall layout."""

    wall: WallSchema = Field(..., description="Wall dimensions")
    panel: PanelSchema = Field(default_factory=PanelSchema, description="Stock panel dimensions")
    exclusions: list[ExclusionSchema] = Field(
        default_factory=list, description="Window and door openings"
    )


class LayoutFromConfigRequest(BaseModel):
    """Request for calculating a layout from a full job configuration."""

    config: dict[str, Any] = Field(..., description="Full job configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a job configuration."""

    config: dict[str, Any] = Field(..., description="Job configuration JSON")
