"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from cladding.domain import (
    ExclusionType,
    ExclusionZone,
    LayoutResult,
    PanelSpec,
    WallSurface,
)


def _is_positive(value: float) -> bool:
    return value > 0 and math.isfinite(value)


@dataclass
class WallInput:
    """Input DTO for wall dimensions in centimeters."""

    width: float
    height: float

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not _is_positive(self.width):
            errors.append("Wall width must be positive")
        if not _is_positive(self.height):
            errors.append("Wall height must be positive")
        return errors

    def to_wall_surface(self) -> WallSurface:
        """Convert to WallSurface value object."""
        return WallSurface(width=self.width, height=self.height)


@dataclass
class PanelInput:
    """Input DTO for stock panel dimensions in centimeters."""

    width: float = 100.0
    height: float = 50.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not _is_positive(self.width):
            errors.append("Panel width must be positive")
        if not _is_positive(self.height):
            errors.append("Panel height must be positive")
        return errors

    def to_panel_spec(self) -> PanelSpec:
        """Convert to PanelSpec value object."""
        return PanelSpec(width=self.width, height=self.height)


@dataclass
class ExclusionInput:
    """Input DTO for a window or door opening."""

    id: str
    x: float
    y: float
    width: float
    height: float
    kind: str = "custom"

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        label = f"Exclusion '{self.id}'"
        if not math.isfinite(self.x):
            errors.append(f"{label}: x must be a finite number")
        if not math.isfinite(self.y):
            errors.append(f"{label}: y must be a finite number")
        if not _is_positive(self.width):
            errors.append(f"{label}: width must be positive")
        if not _is_positive(self.height):
            errors.append(f"{label}: height must be positive")
        valid_kinds = [k.value for k in ExclusionType]
        if self.kind not in valid_kinds:
            errors.append(f"{label}: type must be one of: {', '.join(valid_kinds)}")
        return errors

    def to_exclusion_zone(self) -> ExclusionZone:
        """Convert to ExclusionZone value object."""
        return ExclusionZone(
            id=self.id,
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            kind=ExclusionType(self.kind),
        )


@dataclass
class LayoutOutput:
    """Output DTO containing the computed layout and its inputs.

    Renderers need the wall and exclusions alongside the result, so they
    travel together.
    """

    wall: WallSurface | None
    panel: PanelSpec | None
    exclusions: tuple[ExclusionZone, ...] = ()
    result: LayoutResult | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout was computed without errors."""
        return len(self.errors) == 0 and self.result is not None
