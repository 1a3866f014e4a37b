"""Unit tests for domain value objects."""

from __future__ import annotations

import math

import pytest

from cladding.domain import (
    ExclusionType,
    ExclusionZone,
    InvalidInputError,
    LayoutResult,
    Offcut,
    PanelSpec,
    PlacedPanel,
    WallSurface,
)


class TestWallSurface:
    """Tests for WallSurface."""

    def test_area(self) -> None:
        assert WallSurface(width=500, height=300).area == 150000

    @pytest.mark.parametrize("width,height", [(0, 300), (500, -1), (math.nan, 300), (math.inf, 300)])
    def test_rejects_unusable_dimensions(self, width: float, height: float) -> None:
        """Zero, negative, NaN and infinite dimensions are rejected."""
        with pytest.raises(InvalidInputError):
            WallSurface(width=width, height=height)

    def test_error_names_field(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            WallSurface(width=500, height=0)
        assert exc_info.value.field == "wall.height"
        assert exc_info.value.value == 0

    def test_invalid_input_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            WallSurface(width=-5, height=10)


class TestPanelSpec:
    """Tests for PanelSpec."""

    def test_area(self) -> None:
        assert PanelSpec(width=100, height=50).area == 5000

    def test_rejects_zero_height(self) -> None:
        with pytest.raises(InvalidInputError, match="panel.height"):
            PanelSpec(width=100, height=0)


class TestExclusionZone:
    """Tests for ExclusionZone."""

    @pytest.fixture
    def window(self) -> ExclusionZone:
        return ExclusionZone(
            id="w1", x=100, y=50, width=200, height=100, kind=ExclusionType.WINDOW
        )

    def test_edges_and_area(self, window: ExclusionZone) -> None:
        assert window.right == 300
        assert window.top == 150
        assert window.area == 20000

    def test_default_kind_is_custom(self) -> None:
        zone = ExclusionZone(id="z", x=0, y=0, width=10, height=10)
        assert zone.kind is ExclusionType.CUSTOM

    def test_contains_inner_rectangle(self, window: ExclusionZone) -> None:
        assert window.contains(100, 50, 100, 50)
        assert window.contains(200, 100, 100, 50)

    def test_does_not_contain_partially_overlapping_rectangle(
        self, window: ExclusionZone
    ) -> None:
        assert not window.contains(50, 50, 100, 50)
        assert not window.contains(100, 120, 100, 50)

    def test_contains_with_tolerance(self, window: ExclusionZone) -> None:
        """Edges within the tolerance still count as inside."""
        assert not window.contains(100, 50, 200.000001, 100)
        assert window.contains(100, 50, 200.000001, 100, tolerance=1e-3)

    def test_accepts_position_outside_wall(self) -> None:
        zone = ExclusionZone(id="d", x=-10, y=-5, width=20, height=20)
        assert zone.right == 10

    def test_rejects_infinite_position(self) -> None:
        with pytest.raises(InvalidInputError, match=r"exclusion\[d\]\.x"):
            ExclusionZone(id="d", x=math.inf, y=0, width=10, height=10)

    def test_rejects_zero_width(self) -> None:
        with pytest.raises(InvalidInputError):
            ExclusionZone(id="d", x=0, y=0, width=0, height=10)

    def test_exclusion_type_values(self) -> None:
        assert {k.value for k in ExclusionType} == {"window", "door", "custom"}


class TestOffcut:
    """Tests for Offcut."""

    def test_fits_smaller_footprint(self) -> None:
        offcut = Offcut(width=50, height=50)
        assert offcut.fits(50, 50)
        assert offcut.fits(30, 20)

    def test_does_not_fit_larger_footprint(self) -> None:
        offcut = Offcut(width=50, height=50)
        assert not offcut.fits(60, 50)
        assert not offcut.fits(50, 51)

    def test_fits_with_tolerance(self) -> None:
        offcut = Offcut(width=49.9999999999, height=50)
        assert not offcut.fits(50, 50)
        assert offcut.fits(50, 50, tolerance=1e-9)

    def test_rejects_non_positive_dimensions(self) -> None:
        with pytest.raises(InvalidInputError, match=r"offcut\.width"):
            Offcut(width=0, height=50)
        with pytest.raises(InvalidInputError, match=r"offcut\.height"):
            Offcut(width=50, height=-1)


class TestPlacedPanel:
    """Tests for PlacedPanel."""

    def test_edges_and_area(self) -> None:
        panel = PlacedPanel(id="p-0-1", x=100, y=0, width=50, height=50, is_cut=True)
        assert panel.right == 150
        assert panel.top == 50
        assert panel.area == 2500

    def test_defaults(self) -> None:
        panel = PlacedPanel(id="p-0-0", x=0, y=0, width=100, height=50)
        assert not panel.is_cut
        assert not panel.is_offcut_reuse
        assert panel.row == 0
        assert panel.column == 0

    def test_is_frozen(self) -> None:
        panel = PlacedPanel(id="p-0-0", x=0, y=0, width=100, height=50)
        with pytest.raises(AttributeError):
            panel.x = 10  # type: ignore[misc]


class TestLayoutResult:
    """Tests for LayoutResult derived counts."""

    @pytest.fixture
    def result(self) -> LayoutResult:
        return LayoutResult(
            net_area=15000,
            gross_area=15000,
            theoretical_panels=3,
            practical_panels=3,
            placed_panels=(
                PlacedPanel(id="p-0-0", x=0, y=0, width=100, height=50),
                PlacedPanel(id="p-0-1", x=100, y=0, width=50, height=50, is_cut=True),
                PlacedPanel(
                    id="p-1-0",
                    x=0,
                    y=50,
                    width=50,
                    height=50,
                    is_cut=True,
                    is_offcut_reuse=True,
                    row=1,
                ),
                PlacedPanel(id="p-1-1", x=50, y=50, width=100, height=50, row=1, column=1),
            ),
            waste_area=0,
        )

    def test_counts(self, result: LayoutResult) -> None:
        assert result.placed_count == 4
        assert result.full_count == 2
        assert result.cut_count == 1
        assert result.reused_count == 1

    def test_square_meters(self, result: LayoutResult) -> None:
        assert result.net_area_m2 == pytest.approx(1.5)
        assert result.waste_area_m2 == 0
