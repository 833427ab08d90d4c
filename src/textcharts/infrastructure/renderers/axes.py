"""Axis decorations shared by the vertical bar and area charts."""

from __future__ import annotations

from textcharts.domain import Canvas, LabelRow, axis_value

Y_AXIS_WIDTH = 6
Y_AXIS_RULE = "│"
X_AXIS_CORNER = "└"
X_AXIS_RULE = "─"


def label_left_edge() -> int:
    """First column of the x-axis label row that lies under the canvas."""
    return Y_AXIS_WIDTH + 1


def y_axis_labels(
    height: int, maximum: float, suppress_repeats: bool = False
) -> list[str]:
    """Right-aligned value labels for every canvas row, top to bottom.

    Args:
        height: Canvas height in rows.
        maximum: Value at the top of the axis.
        suppress_repeats: Leave a row blank when its rounded value equals
            the previous printed label.
    """
    labels: list[str] = []
    last_printed: int | None = None
    for row in range(height):
        value = axis_value(row, height, maximum)
        if suppress_repeats and value == last_printed:
            labels.append(" " * (Y_AXIS_WIDTH - 1))
            continue
        labels.append(str(value).rjust(Y_AXIS_WIDTH - 1))
        last_printed = value
    return labels


def frame_canvas(
    canvas: Canvas,
    maximum: float,
    label_row: LabelRow,
    suppress_repeats: bool = False,
) -> str:
    """Serialize a canvas with its y axis, x axis and label row."""
    lines = [
        f"{label}{Y_AXIS_RULE}{canvas.row_text(row)}"
        for row, label in enumerate(
            y_axis_labels(canvas.height, maximum, suppress_repeats)
        )
    ]
    lines.append(" " * Y_AXIS_WIDTH + X_AXIS_CORNER + X_AXIS_RULE * canvas.width)
    lines.append(label_row.text())
    return "".join(f"{line}\n" for line in lines)
