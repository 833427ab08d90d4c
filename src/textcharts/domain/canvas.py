"""Fixed-size character grid shared by the chart renderers."""

from __future__ import annotations

from collections.abc import Iterator

from .value_objects import BLANK


class Canvas:
    """A 2D grid of single display characters.

    The grid is sized once and never resized. Writes outside the grid are
    ignored, since layout rounding can land one cell past an edge.

    Attributes:
        height: Number of rows.
        width: Number of columns.
        fill_char: Character every cell starts with.
    """

    def __init__(self, height: int, width: int, fill_char: str = BLANK) -> None:
        if height <= 0 or width <= 0:
            raise ValueError(
                f"Canvas dimensions must be positive, got {height}x{width}"
            )
        self.height = height
        self.width = width
        self.fill_char = fill_char
        self._cells: list[list[str]] = [
            [fill_char] * width for _ in range(height)
        ]

    def contains(self, row: int, col: int) -> bool:
        """Whether (row, col) lies on the grid."""
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> str:
        if self.contains(row, col):
            return self._cells[row][col]
        return self.fill_char

    def set(self, row: int, col: int, char: str) -> None:
        if self.contains(row, col):
            self._cells[row][col] = char

    def fill_column(self, col: int, from_row: int, char: str) -> None:
        """Paint ``char`` from ``from_row`` down to the bottom row."""
        for row in range(max(from_row, 0), self.height):
            self.set(row, col, char)

    def fill_rect(
        self, top: int, left: int, bottom: int, right: int, char: str
    ) -> None:
        """Paint every cell in the inclusive rectangle."""
        for row in range(top, bottom + 1):
            for col in range(left, right + 1):
                self.set(row, col, char)

    def row_text(self, row: int) -> str:
        return "".join(self._cells[row])

    def rows(self) -> Iterator[str]:
        for row in range(self.height):
            yield self.row_text(row)

    def serialize(self) -> str:
        """Row-major text block with every row newline-terminated."""
        return "".join(f"{line}\n" for line in self.rows())

    def __repr__(self) -> str:
        return f"Canvas(height={self.height}, width={self.width})"
