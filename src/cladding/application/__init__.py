"""Application layer - use cases and orchestration."""

from .commands import CalculateLayoutCommand
from .dtos import ExclusionInput, LayoutOutput, PanelInput, WallInput

__all__ = [
    "CalculateLayoutCommand",
    "ExclusionInput",
    "LayoutOutput",
    "PanelInput",
    "WallInput",
]
