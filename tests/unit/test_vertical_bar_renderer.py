"""Unit tests for the vertical bar chart renderer."""

from __future__ import annotations

import pytest

from textcharts.domain import BLANK, ChartKind, Record, StyleParameters
from textcharts.infrastructure.renderers import render_vertical_bar
from textcharts.infrastructure.renderers.vertical_bar import (
    CHART_HEIGHT,
    bar_height,
    bar_span,
    chart_width,
)


def graph_lines(text: str) -> list[str]:
    lines = text.split("\n")
    return lines[lines.index("Graph") + 1 : -1]


class TestGeometry:
    """Tests for width and height calculations."""

    @pytest.mark.parametrize(("count", "width"), [(1, 50), (2, 50), (8, 50), (9, 55), (10, 61)])
    def test_chart_width(self, count: int, width: int) -> None:
        """Width is the bar span plus margin, with a floor of 50."""
        assert chart_width(count) == width

    def test_bar_span(self) -> None:
        """Three-cell bars with three-cell gaps."""
        assert bar_span(2) == 9

    @pytest.mark.parametrize(
        ("value", "maximum", "height"),
        [(20, 20, 15), (10, 20, 8), (0, 20, 1), (0, 0, 1), (0.1, 100, 1)],
    )
    def test_bar_height(self, value: float, maximum: float, height: int) -> None:
        """Heights round half up and never drop below one row."""
        assert bar_height(value, maximum) == height


class TestRenderVerticalBar:
    """Tests for the rendered artifact."""

    @pytest.fixture
    def lines(self, hash_style: StyleParameters) -> list[str]:
        records = [Record("Alpha", 10), Record("Beta", 20)]
        return graph_lines(render_vertical_bar(records, hash_style).text)

    def test_graph_has_canvas_axis_and_label_rows(self, lines: list[str]) -> None:
        """15 canvas rows, the x axis, then the label row."""
        assert len(lines) == CHART_HEIGHT + 2
        assert lines[CHART_HEIGHT] == " " * 6 + "└" + "─" * 50

    def test_bars_are_centered_and_bottom_aligned(self, lines: list[str]) -> None:
        """Bars sit at columns 20-22 and 26-28 and grow up from the axis."""
        prefix = len("   20│")
        top_row = lines[0][prefix:]
        bottom_row = lines[CHART_HEIGHT - 1][prefix:]

        assert top_row == BLANK * 26 + "###" + BLANK * 21
        assert bottom_row == BLANK * 20 + "###" + BLANK * 3 + "###" + BLANK * 21

    def test_half_height_bar_rounds_up(self, lines: list[str]) -> None:
        """10 of 20 gives 7.5 rows, drawn as 8 starting at row 7."""
        prefix = len("   20│")
        assert lines[6][prefix + 20] == BLANK
        assert lines[7][prefix + 20] == "#"

    def test_y_axis_labels(self, lines: list[str]) -> None:
        """Every row is labelled with its right-aligned axis value."""
        assert lines[0].startswith("   20│")
        assert lines[7].startswith("   11│")
        assert lines[14].startswith("    1│")

    def test_labels_are_truncated_and_centered(self, lines: list[str]) -> None:
        """Labels keep four characters and sit under their bars."""
        label_row = lines[-1]

        assert len(label_row) == 57
        assert label_row[26:30] == "Alph"
        assert label_row[32:36] == "Beta"
        assert label_row[:7] == BLANK * 7

    def test_legend_keeps_full_labels(self, hash_style: StyleParameters) -> None:
        """Truncation applies to the axis only."""
        records = [Record("Alpha", 10), Record("Beta", 20)]
        text = render_vertical_bar(records, hash_style).text

        assert text.startswith("Vertical Bar Chart\n\nLegend\nAlpha: 10\nBeta: 20\n")

    def test_many_records_widen_canvas(self, hash_style: StyleParameters) -> None:
        """Ten bars need a 61-cell canvas and every label fits."""
        records = [Record(f"R{i}", i + 1) for i in range(10)]
        lines = graph_lines(render_vertical_bar(records, hash_style).text)

        assert lines[CHART_HEIGHT] == " " * 6 + "└" + "─" * 61
        for i in range(10):
            assert f"R{i}" in lines[-1]

    def test_artifact_kind(self, two_records: list[Record], hash_style: StyleParameters) -> None:
        artifact = render_vertical_bar(two_records, hash_style)
        assert artifact.kind is ChartKind.VERTICAL_BAR

    def test_missing_bar_char_is_error_artifact(self, two_records: list[Record]) -> None:
        """An empty bar glyph produces an error artifact."""
        artifact = render_vertical_bar(two_records, StyleParameters(bar_char=""))

        assert artifact.is_error
        assert artifact.error is not None
        assert artifact.error.message == "Bar character is required."
