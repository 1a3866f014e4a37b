"""Tests for the SVG and ASCII layout renderer."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from cladding.application import LayoutOutput
from cladding.infrastructure import LayoutRenderer
from cladding.infrastructure.layout_renderer import (
    CUT_PANEL_COLOR,
    FULL_PANEL_COLOR,
    REUSED_OFFCUT_COLOR,
    flip_y,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


def _panel_rects(svg: str) -> dict[str, ET.Element]:
    root = ET.fromstring(svg)
    return {
        rect.get("id"): rect
        for rect in root.iter(f"{SVG_NS}rect")
        if rect.get("id")
    }


class TestFlipY:
    """Tests for the bottom-left to top-left conversion."""

    def test_bottom_course_moves_to_bottom_of_drawing(self) -> None:
        assert flip_y(300, 0, 50) == 250

    def test_top_course_moves_to_top_of_drawing(self) -> None:
        assert flip_y(300, 250, 50) == 0


class TestRenderSvg:
    """Tests for LayoutRenderer.render_svg."""

    def test_well_formed(self, door_output: LayoutOutput) -> None:
        root = ET.fromstring(LayoutRenderer().render_svg(door_output))
        assert root.tag == f"{SVG_NS}svg"
        assert root.get("viewBox") == "0 0 500 320"

    def test_scale_sets_pixel_size_only(self, door_output: LayoutOutput) -> None:
        root = ET.fromstring(
            LayoutRenderer(scale=1.5, show_legend=False).render_svg(door_output)
        )
        assert root.get("width") == "750"
        assert root.get("height") == "450"
        assert root.get("viewBox") == "0 0 500 300"

    def test_one_rect_per_placed_panel(self, door_output: LayoutOutput) -> None:
        rects = _panel_rects(LayoutRenderer().render_svg(door_output))
        assert set(rects) == {p.id for p in door_output.result.placed_panels}

    def test_y_axis_is_flipped(self, door_output: LayoutOutput) -> None:
        rects = _panel_rects(LayoutRenderer().render_svg(door_output))
        assert rects["p-0-0"].get("y") == "250"
        assert rects["p-5-0"].get("y") == "0"

    def test_colours_by_kind(self, small_output: LayoutOutput) -> None:
        rects = _panel_rects(LayoutRenderer().render_svg(small_output))
        assert rects["p-0-0"].get("fill") == FULL_PANEL_COLOR
        assert rects["p-0-1"].get("fill") == CUT_PANEL_COLOR
        assert rects["p-1-0"].get("fill") == REUSED_OFFCUT_COLOR

    def test_titles(self, small_output: LayoutOutput) -> None:
        svg = LayoutRenderer().render_svg(small_output)
        assert "<title>Panel: 50x50cm</title>" in svg
        no_titles = LayoutRenderer(show_titles=False).render_svg(small_output)
        assert "Panel:" not in no_titles

    def test_exclusions_drawn(self, door_output: LayoutOutput) -> None:
        svg = LayoutRenderer().render_svg(door_output)
        assert "<title>door door</title>" in svg
        assert 'y="90" width="100" height="210"' in svg

    def test_exclusions_hidden(self, door_output: LayoutOutput) -> None:
        svg = LayoutRenderer(show_exclusions=False).render_svg(door_output)
        assert "Exclusions" not in svg

    def test_legend(self, door_output: LayoutOutput) -> None:
        assert "Reused offcut" in LayoutRenderer().render_svg(door_output)
        assert "Reused offcut" not in LayoutRenderer(show_legend=False).render_svg(door_output)

    def test_invalid_output_rejected(self, invalid_output: LayoutOutput) -> None:
        with pytest.raises(ValueError):
            LayoutRenderer().render_svg(invalid_output)


class TestRenderAscii:
    """Tests for LayoutRenderer.render_ascii."""

    def test_frame(self, door_output: LayoutOutput) -> None:
        lines = LayoutRenderer().render_ascii(door_output, width=60).splitlines()

        assert lines[0] == "Wall 500 x 300 cm"
        assert lines[1] == "+" + "-" * 58 + "+"
        assert all(len(line) == 60 for line in lines[1:-1])
        assert lines[-1].startswith("# full")

    def test_door_drawn(self, door_output: LayoutOutput) -> None:
        drawing = LayoutRenderer().render_ascii(door_output)
        assert "X" in drawing

    def test_reused_offcuts_marked(self, small_output: LayoutOutput) -> None:
        grid = LayoutRenderer().render_ascii(small_output).splitlines()[2:-2]
        assert any("+" in row[1:-1] for row in grid)
        assert any("/" in row for row in grid)

    def test_invalid_output_rejected(self, invalid_output: LayoutOutput) -> None:
        with pytest.raises(ValueError):
            LayoutRenderer().render_ascii(invalid_output)
