"""Panel tiling engine for running-bond wall cladding.

Lays identical stock panels over a rectangular wall in horizontal courses,
shifting every second course by half a panel (half-bond), skipping cells
that sit entirely inside a window or door opening, and reusing offcuts from
earlier cuts with a greedy first-fit search.

The engine is a pure function of its inputs. The only working state is an
``OffcutPool`` created for each call and passed through the computation.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from cladding.domain.exceptions import InvalidInputError
from cladding.domain.value_objects import (
    ExclusionZone,
    LayoutResult,
    Offcut,
    PanelSpec,
    PlacedPanel,
    WallSurface,
)

logger = logging.getLogger(__name__)

# Absolute tolerance in centimeters for clipping, fit and containment tests
EPSILON: float = 1e-9


@dataclass
class OffcutPool:
    """Offcuts available for reuse during a single layout run.

    Offcuts are kept in creation order. ``take`` removes the first one that
    covers the requested footprint; oversized offcuts are consumed whole and
    nothing is returned to the pool.

    Attributes:
        offcuts: Offcuts in creation order.
        created: Total offcuts added during the run.
    """

    offcuts: list[Offcut] = field(default_factory=list)
    created: int = 0

    def add(self, offcut: Offcut) -> None:
        """Append an offcut to the end of the pool."""
        self.offcuts.append(offcut)
        self.created += 1

    def take(self, width: float, height: float) -> Offcut | None:
        """Remove and return the first offcut that fits, or None."""
        for index, offcut in enumerate(self.offcuts):
            if offcut.fits(width, height, EPSILON):
                return self.offcuts.pop(index)
        return None

    def __len__(self) -> int:
        return len(self.offcuts)


@dataclass(frozen=True)
class _Cell:
    """Visible footprint of one nominal grid cell."""

    row: int
    column: int
    x: float
    y: float
    width: float
    height: float


def _validate_inputs(
    wall: WallSurface,
    panel: PanelSpec,
    exclusions: Sequence[ExclusionZone],
) -> None:
    """Reject unusable dimensions, including on objects built without validation."""
    checks = [
        ("wall.width", wall.width),
        ("wall.height", wall.height),
        ("panel.width", panel.width),
        ("panel.height", panel.height),
    ]
    for exclusion in exclusions:
        checks.append((f"exclusion[{exclusion.id}].width", exclusion.width))
        checks.append((f"exclusion[{exclusion.id}].height", exclusion.height))
    for name, value in checks:
        if not (value > 0) or not math.isfinite(value):
            raise InvalidInputError(
                f"{name} must be a positive finite number (got {value!r})",
                field=name,
                value=value,
            )


def course_count(wall: WallSurface, panel: PanelSpec) -> int:
    """Number of courses needed to reach the top of the wall."""
    return math.ceil(wall.height / panel.height)


def course_offset(row: int, panel: PanelSpec) -> float:
    """Starting x of a course: zero for even rows, half a panel left for odd."""
    return -(panel.width / 2) if row % 2 == 1 else 0.0


def _course_cells(
    row: int, wall: WallSurface, panel: PanelSpec
) -> list[_Cell]:
    """Clip the nominal cells of one course to the wall bounds."""
    y = row * panel.height
    top = min(wall.height, y + panel.height)
    visible_height = top - y
    shift = course_offset(row, panel)

    cells: list[_Cell] = []
    column = 0
    nominal_x = shift
    while nominal_x < wall.width:
        start_x = max(0.0, nominal_x)
        end_x = min(wall.width, nominal_x + panel.width)
        visible_width = end_x - start_x
        if visible_width > EPSILON and visible_height > EPSILON:
            cells.append(
                _Cell(
                    row=row,
                    column=column,
                    x=start_x,
                    y=y,
                    width=visible_width,
                    height=visible_height,
                )
            )
        column += 1
        nominal_x = shift + column * panel.width
    return cells


def _is_excluded(cell: _Cell, exclusions: Sequence[ExclusionZone]) -> bool:
    """True if a single exclusion fully contains the cell.

    Partial overlap does not exclude the cell: a partially obstructed cell
    still needs material.
    """
    return any(
        exclusion.contains(cell.x, cell.y, cell.width, cell.height, EPSILON)
        for exclusion in exclusions
    )


class PanelTilingEngine:
    """Computes running-bond panel layouts with first-fit offcut reuse.

    The engine holds no state between calls, so one instance can serve any
    number of threads or requests.

    Example:
        >>> engine = PanelTilingEngine()
        >>> result = engine.layout(
        ...     WallSurface(250, 50), PanelSpec(100, 50), []
        ... )
        >>> result.practical_panels
        3
    """

    def layout(
        self,
        wall: WallSurface,
        panel: PanelSpec,
        exclusions: Sequence[ExclusionZone] = (),
    ) -> LayoutResult:
        """Lay out panels over a wall.

        Args:
            wall: Wall extent.
            panel: Stock panel extent.
            exclusions: Openings that need no cladding. Order is irrelevant
                to the result; overlapping or out-of-bounds zones are
                accepted.

        Returns:
            LayoutResult with placements ordered bottom course first, then
            left to right.

        Raises:
            InvalidInputError: If any wall, panel or exclusion dimension is
                not a positive finite number.
        """
        exclusions = tuple(exclusions)
        _validate_inputs(wall, panel, exclusions)

        pool = OffcutPool()
        placed: list[PlacedPanel] = []
        new_panels = 0
        rows = course_count(wall, panel)

        for row in range(rows):
            for cell in _course_cells(row, wall, panel):
                if _is_excluded(cell, exclusions):
                    continue
                piece, consumed = self._place(cell, panel, pool)
                placed.append(piece)
                new_panels += consumed

        gross_area = wall.area
        net_area = gross_area - sum(e.width * e.height for e in exclusions)
        panel_area = panel.area
        waste_area = new_panels * panel_area - net_area

        logger.debug(
            f"Laid out {rows} courses on {wall.width}x{wall.height} wall: "
            f"{len(placed)} pieces, {new_panels} stock panels, "
            f"{pool.created} offcuts created, {len(pool)} unused"
        )

        return LayoutResult(
            net_area=net_area,
            gross_area=gross_area,
            theoretical_panels=math.ceil(net_area / panel_area),
            practical_panels=new_panels,
            placed_panels=tuple(placed),
            waste_area=waste_area,
        )

    @staticmethod
    def _place(
        cell: _Cell, panel: PanelSpec, pool: OffcutPool
    ) -> tuple[PlacedPanel, int]:
        """Cover one cell from the pool or a new stock panel.

        Returns:
            The placed piece and the number of stock panels consumed (0 or 1).
        """
        clipped_width = cell.width < panel.width - EPSILON
        clipped_height = cell.height < panel.height - EPSILON

        reused = pool.take(cell.width, cell.height) is not None
        consumed = 0
        if not reused:
            consumed = 1
            # Only horizontal remainders are kept; the top course trim is waste
            if clipped_width:
                pool.add(Offcut(width=panel.width - cell.width, height=panel.height))

        piece = PlacedPanel(
            id=f"p-{cell.row}-{cell.column}",
            x=cell.x,
            y=cell.y,
            width=cell.width,
            height=cell.height,
            is_cut=clipped_width or clipped_height,
            is_offcut_reuse=reused,
            row=cell.row,
            column=cell.column,
        )
        return piece, consumed


def layout(
    wall: WallSurface,
    panel: PanelSpec,
    exclusions: Sequence[ExclusionZone] = (),
) -> LayoutResult:
    """Lay out panels over a wall with a fresh engine.

    See ``PanelTilingEngine.layout``.
    """
    return PanelTilingEngine().layout(wall, panel, exclusions)
