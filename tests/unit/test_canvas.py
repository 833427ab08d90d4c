"""Unit tests for Canvas."""

from __future__ import annotations

import pytest

from textcharts.domain import BLANK, Canvas


@pytest.fixture
def canvas() -> Canvas:
    """Small 3x4 canvas."""
    return Canvas(3, 4)


class TestCanvasConstruction:
    """Tests for canvas creation."""

    def test_cells_start_blank(self, canvas: Canvas) -> None:
        """Every cell holds the blank placeholder."""
        assert all(canvas.get(r, c) == BLANK for r in range(3) for c in range(4))

    def test_blank_is_not_an_ordinary_space(self) -> None:
        """The placeholder is a non-breaking space."""
        assert BLANK == "\u00a0"
        assert BLANK != " "

    def test_custom_fill_char(self) -> None:
        """The fill character can be chosen."""
        assert Canvas(1, 2, fill_char=".").serialize() == "..\n"

    @pytest.mark.parametrize(("height", "width"), [(0, 5), (5, 0), (-1, 3)])
    def test_non_positive_dimensions_raise(self, height: int, width: int) -> None:
        """Canvases need at least one cell."""
        with pytest.raises(ValueError, match="must be positive"):
            Canvas(height, width)


class TestCanvasWrites:
    """Tests for set/get and fills."""

    def test_set_and_get(self, canvas: Canvas) -> None:
        """A written cell reads back."""
        canvas.set(1, 2, "#")
        assert canvas.get(1, 2) == "#"

    @pytest.mark.parametrize(("row", "col"), [(-1, 0), (0, -1), (3, 0), (0, 4), (99, 99)])
    def test_out_of_bounds_set_is_ignored(
        self, canvas: Canvas, row: int, col: int
    ) -> None:
        """Writes outside the grid are silently dropped."""
        before = canvas.serialize()
        canvas.set(row, col, "#")
        assert canvas.serialize() == before

    def test_out_of_bounds_get_returns_fill(self, canvas: Canvas) -> None:
        """Reads outside the grid return the fill character."""
        assert canvas.get(-1, 10) == BLANK

    def test_fill_column_paints_to_bottom(self, canvas: Canvas) -> None:
        """fill_column covers from_row through the last row."""
        canvas.fill_column(0, 1, "#")
        assert [canvas.get(r, 0) for r in range(3)] == [BLANK, "#", "#"]

    def test_fill_column_from_negative_row(self, canvas: Canvas) -> None:
        """A start above the grid fills the whole column."""
        canvas.fill_column(3, -2, "#")
        assert [canvas.get(r, 3) for r in range(3)] == ["#", "#", "#"]

    def test_fill_rect_clips_to_grid(self, canvas: Canvas) -> None:
        """Rectangles hanging off the grid are clipped."""
        canvas.fill_rect(2, 3, 5, 8, "#")
        assert canvas.get(2, 3) == "#"
        assert canvas.row_text(2) == BLANK * 3 + "#"


class TestCanvasSerialize:
    """Tests for serialization."""

    def test_rows_are_newline_terminated(self, canvas: Canvas) -> None:
        """One newline-terminated line per row."""
        text = canvas.serialize()
        assert text.count("\n") == 3
        assert text.endswith("\n")
        assert text.split("\n")[:-1] == [BLANK * 4] * 3

    def test_row_major_order(self, canvas: Canvas) -> None:
        """Columns are concatenated left to right within each row."""
        canvas.set(0, 0, "a")
        canvas.set(0, 3, "b")
        canvas.set(2, 1, "c")
        lines = canvas.serialize().split("\n")
        assert lines[0] == "a" + BLANK * 2 + "b"
        assert lines[2] == BLANK + "c" + BLANK * 2

    def test_identical_writes_give_identical_output(self) -> None:
        """Serialization is deterministic."""
        first, second = Canvas(2, 2), Canvas(2, 2)
        for c in (first, second):
            c.set(1, 1, "x")
        assert first.serialize() == second.serialize()
