"""Pie chart renderer.

Monospace cells are roughly twice as tall as they are wide, so the distance
test stretches the vertical offset by ``ASPECT_RATIO`` to make the disc look
round. Slice membership uses the unstretched angle, which keeps each slice's
angular share equal to its record's percentage.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from textcharts.domain import (
    Artifact,
    Canvas,
    ChartKind,
    PreconditionError,
    Record,
    StyleParameters,
    format_legend_value,
)

from .artifact import ArtifactWriter, LegendItem
from .base import RendererRegistry

logger = logging.getLogger(__name__)

PIE_SIZE = 24
ASPECT_RATIO = 2.0
CENTER = PIE_SIZE / 2 - 0.5
RADIUS = PIE_SIZE / 2 - 2
MIN_LABEL_WIDTH = 20


def pie_percentages(records: Sequence[Record]) -> list[float]:
    """Percentage of the total for each record; all zero when the total is."""
    total = sum(record.value for record in records)
    if total == 0:
        return [0.0 for _ in records]
    return [record.value / total * 100 for record in records]


def slice_index(angle: float, percentages: Sequence[float]) -> int:
    """Index of the slice containing ``angle`` (radians, in [0, 2π)).

    Falls back to the first slice when rounding leaves ``angle`` past the
    last boundary.
    """
    cumulative = 0.0
    for index, percentage in enumerate(percentages):
        sweep = percentage / 100 * 2 * math.pi
        if cumulative <= angle < cumulative + sweep:
            return index
        cumulative += sweep
    return 0


def cell_angle(row: int, col: int) -> float:
    """Unscaled angle of a cell around the pie center, in [0, 2π)."""
    angle = math.atan2(row - CENTER, col - CENTER)
    if angle < 0:
        angle += 2 * math.pi
    return angle


def in_disc(row: int, col: int) -> bool:
    dx = col - CENTER
    dy = (row - CENTER) * ASPECT_RATIO
    return math.sqrt(dx * dx + dy * dy) <= RADIUS


def _check_glyphs(
    records: Sequence[Record], glyphs: Sequence[str]
) -> PreconditionError | None:
    if not glyphs:
        return PreconditionError("At least one character is required for pie chart.")
    count = len(records)
    if len(glyphs) < count:
        plural = "s" if count > 1 else ""
        return PreconditionError(
            f"Please select at least {count} character{plural} for {count} "
            f"data point{plural}. You have {len(glyphs)} selected.",
            required=count,
            selected=len(glyphs),
        )
    return None


@RendererRegistry.register(ChartKind.PIE)
def render_pie(records: Sequence[Record], style: StyleParameters) -> Artifact:
    """Render a pie chart on a fixed 24x24 grid with a percentage legend."""
    writer = ArtifactWriter(ChartKind.PIE, style)
    glyphs = style.pie_chars
    failure = _check_glyphs(records, glyphs)
    if failure is not None:
        logger.warning(f"Pie chart precondition failed: {failure.message}")
        return writer.error(failure)

    percentages = pie_percentages(records)
    label_width = max(max(len(record.label) for record in records), MIN_LABEL_WIDTH)
    logger.debug(f"Rendering pie chart: {len(records)} records")

    legend = [
        LegendItem(
            label=record.label,
            value_text=format_legend_value(record.value),
            glyph=glyphs[index % len(glyphs)],
            percentage=percentage,
            padding=label_width - len(record.label),
        )
        for index, (record, percentage) in enumerate(zip(records, percentages))
    ]

    canvas = Canvas(PIE_SIZE, PIE_SIZE)
    for row in range(PIE_SIZE):
        for col in range(PIE_SIZE):
            if in_disc(row, col):
                index = slice_index(cell_angle(row, col), percentages)
                canvas.set(row, col, glyphs[index % len(glyphs)])

    return writer.compose(legend, graph_block=canvas.serialize())
