"""Vertical bar chart renderer."""

from __future__ import annotations

import logging
from collections.abc import Sequence

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
MIN_CHART_WIDTH = 50
BAR_WIDTH = 3
BAR_SPACING = 3
# Extra columns beyond the bars themselves.
CHART_MARGIN = 4


def chart_width(count: int) -> int:
    """Canvas width for ``count`` bars."""
    return max(bar_span(count) + CHART_MARGIN, MIN_CHART_WIDTH)


def bar_span(count: int) -> int:
    """Columns covered by ``count`` bars and the gaps between them."""
    return count * BAR_WIDTH + (count - 1) * BAR_SPACING


def bar_start(index: int, offset: int) -> int:
    return offset + index * (BAR_WIDTH + BAR_SPACING)


def bar_height(value: float, max_value: float) -> int:
    return max(1, round_half_up(safe_ratio(value, max_value) * CHART_HEIGHT))


@RendererRegistry.register(ChartKind.VERTICAL_BAR)
def render_vertical_bar(
    records: Sequence[Record], style: StyleParameters
) -> Artifact:
    """Render bars standing on a shared x axis, centered on the canvas."""
    writer = ArtifactWriter(ChartKind.VERTICAL_BAR, style)
    if not style.bar_char:
        logger.warning("Vertical bar chart requested without a bar character")
        return writer.error(PreconditionError("Bar character is required."))

    count = len(records)
    max_value = max(record.value for record in records)
    width = chart_width(count)
    offset = (width - bar_span(count)) // 2
    logger.debug(
        f"Rendering vertical bar chart: {count} records, canvas "
        f"{CHART_HEIGHT}x{width}, offset={offset}"
    )

    canvas = Canvas(CHART_HEIGHT, width)
    for index, record in enumerate(records):
        left = bar_start(index, offset)
        top = CHART_HEIGHT - bar_height(record.value, max_value)
        canvas.fill_rect(top, left, CHART_HEIGHT - 1, left + BAR_WIDTH - 1, style.bar_char)

    max_label_length = BAR_WIDTH + BAR_SPACING // 2
    labels = [
        (
            label_left_edge() + bar_start(index, offset) + BAR_WIDTH // 2,
            record.label[:max_label_length],
        )
        for index, record in enumerate(records)
    ]
    label_row = place_labels(
        labels,
        width=Y_AXIS_WIDTH + 1 + width,
        left_edge=label_left_edge(),
        policy=LabelPolicy.SKIP,
        max_length=max_label_length,
    )

    legend = [
        LegendItem(label=record.label, value_text=format_value(record.value))
        for record in records
    ]
    graph = frame_canvas(canvas, max_value, label_row)
    return writer.compose(legend, graph_block=graph)
