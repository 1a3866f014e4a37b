"""Domain layer - core layout logic."""

from .exceptions import InvalidInputError
from .services import OffcutPool, PanelTilingEngine, layout
from .value_objects import (
    ExclusionType,
    ExclusionZone,
    LayoutResult,
    Offcut,
    PanelSpec,
    PlacedPanel,
    WallSurface,
)

__all__ = [
    "ExclusionType",
    "ExclusionZone",
    "InvalidInputError",
    "LayoutResult",
    "Offcut",
    "OffcutPool",
    "PanelSpec",
    "PanelTilingEngine",
    "PlacedPanel",
    "WallSurface",
    "layout",
]
