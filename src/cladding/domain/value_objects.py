"""Value objects for wall cladding layouts.

All measurements are centimeters and all areas are square centimeters.
Coordinates have their origin at the bottom-left corner of the wall, with
x increasing to the right and y increasing upward.

All dataclasses are frozen (immutable) so layouts can be shared freely
between threads and compared by value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidInputError

# Square centimeters per square meter
CM2_PER_M2: float = 10_000.0


def _require_positive(value: float, field: str) -> None:
    # NaN fails every comparison, so test the positive case
    if not (value > 0) or not math.isfinite(value):
        raise InvalidInputError(
            f"{field} must be a positive finite number (got {value!r})",
            field=field,
            value=value,
        )


def _require_finite(value: float, field: str) -> None:
    if not math.isfinite(value):
        raise InvalidInputError(
            f"{field} must be a finite number (got {value!r})",
            field=field,
            value=value,
        )


class ExclusionType(str, Enum):
    """Kinds of openings that do not need cladding.

    The kind is informational only: it is carried through to reports and
    drawings but never changes how panels are laid out.
    """

    WINDOW = "window"
    DOOR = "door"
    CUSTOM = "custom"


@dataclass(frozen=True)
class WallSurface:
    """The full rectangular area to be covered."""

    width: float
    height: float

    def __post_init__(self) -> None:
        _require_positive(self.width, "wall.width")
        _require_positive(self.height, "wall.height")

    @property
    def area(self) -> float:
        """Gross wall area in square centimeters."""
        return self.width * self.height


@dataclass(frozen=True)
class PanelSpec:
    """Dimensions of one stock panel. All stock panels are identical."""

    width: float
    height: float

    def __post_init__(self) -> None:
        _require_positive(self.width, "panel.width")
        _require_positive(self.height, "panel.height")

    @property
    def area(self) -> float:
        """Panel area in square centimeters."""
        return self.width * self.height


@dataclass(frozen=True)
class ExclusionZone:
    """A rectangular opening (window, door) that needs no coverage.

    Position is the bottom-left corner relative to the wall origin.
    Exclusions may overlap each other or extend past the wall; checking
    that is left to the caller.

    Attributes:
        id: Caller-supplied identifier.
        x: Distance from the wall's left edge.
        y: Distance from the wall's bottom edge.
        width: Opening width.
        height: Opening height.
        kind: Kind of opening, used for reporting only.
    """

    id: str
    x: float
    y: float
    width: float
    height: float
    kind: ExclusionType = ExclusionType.CUSTOM

    def __post_init__(self) -> None:
        _require_finite(self.x, f"exclusion[{self.id}].x")
        _require_finite(self.y, f"exclusion[{self.id}].y")
        _require_positive(self.width, f"exclusion[{self.id}].width")
        _require_positive(self.height, f"exclusion[{self.id}].height")

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def top(self) -> float:
        """Y coordinate of the top edge."""
        return self.y + self.height

    @property
    def area(self) -> float:
        """Opening area in square centimeters."""
        return self.width * self.height

    def contains(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        tolerance: float = 0.0,
    ) -> bool:
        """Check whether a rectangle lies entirely inside this zone.

        Args:
            x: Left edge of the rectangle.
            y: Bottom edge of the rectangle.
            width: Rectangle width.
            height: Rectangle height.
            tolerance: Slack allowed on each edge.

        Returns:
            True if every edge of the rectangle is within the zone.
        """
        return (
            x >= self.x - tolerance
            and x + width <= self.right + tolerance
            and y >= self.y - tolerance
            and y + height <= self.top + tolerance
        )


@dataclass(frozen=True)
class Offcut:
    """A scrap piece left over after cutting a stock panel to width.

    Offcuts are reused whole or not at all; they are never subdivided.
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        _require_positive(self.width, "offcut.width")
        _require_positive(self.height, "offcut.height")

    def fits(self, width: float, height: float, tolerance: float = 0.0) -> bool:
        """Check whether this offcut can cover a width x height footprint."""
        return self.width >= width - tolerance and self.height >= height - tolerance


@dataclass(frozen=True)
class PlacedPanel:
    """One piece of material (full or cut) placed on the wall.

    ``width`` and ``height`` are the visible footprint actually covering
    the wall, which can be smaller than the stock panel at the wall edges.

    Attributes:
        id: Stable identifier, ``p-{row}-{column}``.
        x: Left edge of the footprint.
        y: Bottom edge of the footprint.
        width: Visible width.
        height: Visible height.
        is_cut: True if the piece is narrower or lower than a stock panel.
        is_offcut_reuse: True if the piece came from the offcut pool.
        row: Zero-based course index.
        column: Zero-based column index within the course.
    """

    id: str
    x: float
    y: float
    width: float
    height: float
    is_cut: bool = False
    is_offcut_reuse: bool = False
    row: int = 0
    column: int = 0

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def top(self) -> float:
        """Y coordinate of the top edge."""
        return self.y + self.height

    @property
    def area(self) -> float:
        """Visible area in square centimeters."""
        return self.width * self.height


@dataclass(frozen=True)
class LayoutResult:
    """Placement plan and summary statistics for one wall.

    Attributes:
        net_area: Gross area minus summed exclusion areas.
        gross_area: Wall width times wall height.
        theoretical_panels: ceil(net_area / panel area), ignoring cutting loss.
        practical_panels: Stock panels actually consumed (the order advice).
        placed_panels: Placed pieces, bottom course first, left to right.
        waste_area: practical_panels * panel area - net_area (not clamped).
    """

    net_area: float
    gross_area: float
    theoretical_panels: int
    practical_panels: int
    placed_panels: tuple[PlacedPanel, ...]
    waste_area: float

    @property
    def placed_count(self) -> int:
        """Number of pieces on the wall, including reused offcuts."""
        return len(self.placed_panels)

    @property
    def full_count(self) -> int:
        """Number of uncut stock panels on the wall."""
        return sum(1 for p in self.placed_panels if not p.is_cut)

    @property
    def cut_count(self) -> int:
        """Number of pieces cut from a new stock panel."""
        return sum(
            1 for p in self.placed_panels if p.is_cut and not p.is_offcut_reuse
        )

    @property
    def reused_count(self) -> int:
        """Number of pieces taken from the offcut pool."""
        return sum(1 for p in self.placed_panels if p.is_offcut_reuse)

    @property
    def net_area_m2(self) -> float:
        """Net area in square meters."""
        return self.net_area / CM2_PER_M2

    @property
    def waste_area_m2(self) -> float:
        """Waste area in square meters."""
        return self.waste_area / CM2_PER_M2
