"""Unit tests for the pie chart renderer."""

from __future__ import annotations

import math

import pytest

from textcharts.domain import BLANK, ChartKind, Record, StyleParameters
from textcharts.infrastructure.renderers import pie_percentages, render_pie
from textcharts.infrastructure.renderers.pie import (
    PIE_SIZE,
    cell_angle,
    in_disc,
    slice_index,
)


def graph_lines(text: str) -> list[str]:
    lines = text.split("\n")
    return lines[lines.index("Graph") + 1 : -1]


class TestPercentages:
    """Tests for slice shares."""

    def test_percentages_sum_to_one_hundred(self) -> None:
        records = [Record("a", 1), Record("b", 1), Record("c", 2)]
        assert pie_percentages(records) == [25.0, 25.0, 50.0]

    def test_zero_total_gives_zero_shares(self) -> None:
        """A zero total does not divide by zero."""
        assert pie_percentages([Record("a", 0), Record("b", 0)]) == [0.0, 0.0]


class TestGeometry:
    """Tests for cell classification."""

    def test_center_cells_are_in_disc(self) -> None:
        assert in_disc(11, 11)
        assert in_disc(12, 12)

    def test_corners_are_outside(self) -> None:
        assert not in_disc(0, 0)
        assert not in_disc(23, 23)

    def test_aspect_ratio_squashes_vertically(self) -> None:
        """The disc reaches further across than down."""
        assert in_disc(11, 2)
        assert not in_disc(2, 11)

    def test_cell_angle_is_non_negative(self) -> None:
        """Angles are normalized into [0, 2π)."""
        angle = cell_angle(11, 11)
        assert 0 <= angle < 2 * math.pi
        assert angle == pytest.approx(5 * math.pi / 4)

    def test_slice_index_walks_cumulative_sweeps(self) -> None:
        """Angles map to slices in record order."""
        assert slice_index(0.1, [50.0, 50.0]) == 0
        assert slice_index(math.pi + 0.1, [50.0, 50.0]) == 1

    def test_slice_index_falls_back_to_first_slice(self) -> None:
        """Angles past every boundary belong to the first slice."""
        assert slice_index(6.0, [10.0, 10.0]) == 0


class TestRenderPie:
    """Tests for the rendered artifact."""

    def test_even_split_fills_two_halves(self, hash_style: StyleParameters) -> None:
        """Slice 0 covers the lower half, slice 1 the upper half."""
        records = [Record("A", 1), Record("B", 1)]
        lines = graph_lines(render_pie(records, hash_style).text)

        assert len(lines) == PIE_SIZE
        assert all(len(line) == PIE_SIZE for line in lines)
        assert lines[12][11] == "#"
        assert lines[11][11] == "*"
        assert lines[0][0] == BLANK

    def test_legend_lines(self, hash_style: StyleParameters) -> None:
        """Glyph, padded label, value and percentage."""
        records = [Record("A", 1), Record("B", 1)]
        text = render_pie(records, hash_style).text

        assert f"# A{' ' * 19} 1 (50.0%)\n" in text
        assert f"* B{' ' * 19} 1 (50.0%)\n" in text

    def test_fractional_legend_value(self, hash_style: StyleParameters) -> None:
        """Fractional values show one decimal place."""
        records = [Record("x", 2.75), Record("y", 2.75)]
        text = render_pie(records, hash_style).text

        assert " 2.8 (50.0%)" in text

    def test_legend_ties_round_up(self, hash_style: StyleParameters) -> None:
        """One-decimal legend text rounds exact ties up."""
        value_text = render_pie([Record("a", 0.25), Record("b", 1)], hash_style).text
        share_text = render_pie([Record("a", 1), Record("b", 15)], hash_style).text

        assert f"# a{' ' * 19} 0.3 (20.0%)\n" in value_text
        assert f"# a{' ' * 19} 1 (6.3%)\n" in share_text
        assert f"* b{' ' * 19} 15 (93.8%)\n" in share_text

    def test_only_used_glyphs_appear(self, hash_style: StyleParameters) -> None:
        """Glyphs past the record count are never drawn."""
        records = [Record("A", 3), Record("B", 1)]
        graph = "".join(graph_lines(render_pie(records, hash_style).text))

        assert "#" in graph
        assert "*" in graph
        assert "+" not in graph
        assert "o" not in graph

    def test_zero_total_paints_first_glyph(self, hash_style: StyleParameters) -> None:
        """With no share to split, every disc cell gets the first glyph."""
        records = [Record("A", 0), Record("B", 0)]
        lines = graph_lines(render_pie(records, hash_style).text)

        assert lines[11][11] == "#"
        assert "*" not in "".join(lines)
        assert "(0.0%)" in render_pie(records, hash_style).text

    def test_artifact_kind_and_title(self, hash_style: StyleParameters) -> None:
        artifact = render_pie([Record("A", 1)], hash_style)

        assert artifact.kind is ChartKind.PIE
        assert artifact.text.startswith("Pie Chart\n\nLegend\n")


class TestPieGlyphPreconditions:
    """Tests for glyph count checks."""

    def test_no_glyphs(self, two_records: list[Record]) -> None:
        artifact = render_pie(two_records, StyleParameters(pie_chars=()))

        assert artifact.is_error
        assert artifact.text == "Error: At least one character is required for pie chart."

    def test_too_few_glyphs_reports_counts(self) -> None:
        """The message names both the required and selected counts."""
        records = [Record(c, 1) for c in "abc"]
        artifact = render_pie(records, StyleParameters(pie_chars=("#", "*")))

        assert artifact.text == (
            "Error: Please select at least 3 characters for 3 data points. "
            "You have 2 selected."
        )
        assert artifact.error is not None
        assert artifact.error.required == 3
        assert artifact.error.selected == 2

    def test_default_glyphs_cover_twelve_records(self) -> None:
        """The default palette has twelve glyphs."""
        records = [Record(f"r{i}", i + 1) for i in range(12)]

        assert not render_pie(records, StyleParameters()).is_error
        assert render_pie(records + [Record("extra", 1)], StyleParameters()).is_error
