"""Domain services for panel cladding layouts."""

from .tiling import (
    EPSILON,
    OffcutPool,
    PanelTilingEngine,
    course_count,
    course_offset,
    layout,
)

__all__ = [
    "EPSILON",
    "OffcutPool",
    "PanelTilingEngine",
    "course_count",
    "course_offset",
    "layout",
]
