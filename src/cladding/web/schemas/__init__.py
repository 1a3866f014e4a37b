"""Pydantic schemas for the REST API."""

from cladding.web.schemas.common import ExclusionSchema, PanelSchema, WallSchema
from cladding.web.schemas.requests import (
    ConfigValidateRequest,
    LayoutFromConfigRequest,
    LayoutRequest,
)
from cladding.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    LayoutResponseSchema,
    LayoutSummarySchema,
    PlacedPanelSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "ExclusionSchema",
    "PanelSchema",
    "WallSchema",
    # Requests
    "ConfigValidateRequest",
    "LayoutFromConfigRequest",
    "LayoutRequest",
    # Responses
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "LayoutResponseSchema",
    "LayoutSummarySchema",
    "PlacedPanelSchema",
    "ValidationResultSchema",
]
