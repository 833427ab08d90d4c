"""Horizontal bar graph renderer."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from textcharts.domain import (
    Artifact,
    ChartKind,
    PreconditionError,
    Record,
    StyleParameters,
    format_value,
    round_half_up,
)

from .artifact import ArtifactWriter, LegendItem
from .base import RendererRegistry

logger = logging.getLogger(__name__)

BAR_WIDTH = 50
MIN_LABEL_WIDTH = 20


def bar_lengths(records: Sequence[Record], bar_width: int = BAR_WIDTH) -> list[int]:
    """Bar length in cells for each record, never less than one."""
    max_value = max(record.value for record in records)
    scale = bar_width / max_value if max_value != 0 else 0.0
    return [max(1, round_half_up(record.value * scale)) for record in records]


@RendererRegistry.register(ChartKind.BAR)
def render_horizontal_bar(
    records: Sequence[Record], style: StyleParameters
) -> Artifact:
    """Render one labelled bar per record plus a scale row.

    Labels are left-aligned in a column at least 20 cells wide. The longest
    bar spans 50 cells.
    """
    writer = ArtifactWriter(ChartKind.BAR, style)
    if not style.bar_char:
        logger.warning("Bar graph requested without a bar character")
        return writer.error(PreconditionError("Bar character is required."))

    max_value = max(record.value for record in records)
    label_width = max(max(len(record.label) for record in records), MIN_LABEL_WIDTH)
    logger.debug(
        f"Rendering bar graph: {len(records)} records, max={max_value}, "
        f"label_width={label_width}"
    )

    rows: list[str] = []
    legend: list[LegendItem] = []
    for record, length in zip(records, bar_lengths(records)):
        value_text = format_value(record.value)
        padding = " " * (label_width - len(record.label))
        rows.append(f"{record.label}{padding} │{style.bar_char * length} {value_text}")
        legend.append(LegendItem(label=record.label, value_text=value_text))

    scale_row = (
        f"{' ' * (label_width + 2)}0{' ' * (BAR_WIDTH - 1)}{format_value(max_value)}"
    )
    return writer.compose(legend, graph_rows=rows, scale_row=scale_row)
