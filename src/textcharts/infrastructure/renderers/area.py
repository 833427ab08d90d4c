"""Area chart renderer.

Records become points spread evenly across the canvas. Every column gets a
line glyph at the interpolated height of the segment it falls in, and fill
glyphs from there down to the bottom row.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from textcharts.domain import (
    Artifact,
    Canvas,
    ChartKind,
    LabelPolicy,
    PreconditionError,
    Record,
    StyleParameters,
    format_value,
    place_labels,
    round_half_up,
    safe_ratio,
)

from .artifact import ArtifactWriter, LegendItem
from .axes import Y_AXIS_WIDTH, frame_canvas, label_left_edge
from .base import RendererRegistry

logger = logging.getLogger(__name__)

CHART_HEIGHT = 15
MIN_CHART_WIDTH = 40
COLUMNS_PER_RECORD = 4
MIN_LABEL_LENGTH = 4


@dataclass(frozen=True)
class DataPoint:
    """A record mapped onto canvas coordinates."""

    x: int
    y: int


def chart_width(count: int) -> int:
    return max(count * COLUMNS_PER_RECORD, MIN_CHART_WIDTH)


def point_x(index: int, count: int, width: int) -> int:
    return round_half_up(index / ((count - 1) or 1) * (width - 1))


def data_points(records: Sequence[Record], width: int) -> list[DataPoint]:
    """Canvas coordinates of every record, left to right."""
    max_value = max(record.value for record in records)
    count = len(records)
    points: list[DataPoint] = []
    for index, record in enumerate(records):
        rise = round_half_up(safe_ratio(record.value, max_value) * CHART_HEIGHT)
        points.append(DataPoint(x=point_x(index, count, width), y=CHART_HEIGHT - 1 - rise))
    return points


def interpolate_y(points: list[DataPoint], col: int) -> int:
    """Row of the line at ``col``.

    The first segment whose x range contains ``col`` is used. Columns
    outside every segment extrapolate from the first one.
    """
    if len(points) == 1:
        return points[0].y

    segment = 0
    for index in range(len(points) - 1):
        if points[index].x <= col <= points[index + 1].x:
            segment = index
            break

    start, end = points[segment], points[segment + 1]
    if start.x == end.x:
        return start.y
    t = (col - start.x) / (end.x - start.x)
    return round_half_up(start.y + t * (end.y - start.y))


@RendererRegistry.register(ChartKind.AREA)
def render_area(records: Sequence[Record], style: StyleParameters) -> Artifact:
    """Render an area chart with a line glyph over a filled region."""
    writer = ArtifactWriter(ChartKind.AREA, style)
    line_char, fill_char = style.area_chars
    if not line_char or not fill_char:
        logger.warning("Area chart requested without line and fill characters")
        return writer.error(
            PreconditionError("Both line and fill characters are required.")
        )

    count = len(records)
    max_value = max(record.value for record in records)
    width = chart_width(count)
    points = data_points(records, width)
    logger.debug(f"Rendering area chart: {count} records, canvas {CHART_HEIGHT}x{width}")

    canvas = Canvas(CHART_HEIGHT, width)
    for col in range(width):
        y = interpolate_y(points, col)
        canvas.set(y, col, line_char)
        canvas.fill_column(col, y + 1, fill_char)

    max_label_length = max(MIN_LABEL_LENGTH, width // count - 1)
    labels = [
        (label_left_edge() + point.x, record.label[:max_label_length])
        for point, record in zip(points, records)
    ]
    label_row = place_labels(
        labels,
        width=Y_AXIS_WIDTH + 1 + width,
        left_edge=label_left_edge(),
        policy=LabelPolicy.SHIFT,
    )

    legend = [
        LegendItem(label=record.label, value_text=format_value(record.value))
        for record in records
    ]
    graph = frame_canvas(canvas, max_value, label_row, suppress_repeats=True)
    return writer.compose(legend, graph_block=graph)
