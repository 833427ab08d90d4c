"""Artifact serialization for rendered charts.

Every renderer hands its legend entries and graph text to an
``ArtifactWriter``, which produces either plain text or HTML markup. Plain
text carries no escaping; markup escapes every label and glyph it embeds.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from textcharts.domain import (
    Artifact,
    ChartKind,
    OutputFormat,
    PreconditionError,
    StyleParameters,
    format_fixed,
)


@dataclass(frozen=True)
class LegendItem:
    """One legend line.

    Attributes:
        label: Record label.
        value_text: Formatted record value.
        glyph: Slice glyph (pie legend only).
        percentage: Share of the total (pie legend only).
        padding: Spaces inserted after the label to align values.
    """

    label: str
    value_text: str
    glyph: str | None = None
    percentage: float | None = None
    padding: int = 0


class ArtifactWriter:
    """Compose legend and graph sections into an Artifact."""

    def __init__(self, kind: ChartKind, style: StyleParameters) -> None:
        self.kind = kind
        self.style = style

    @property
    def title(self) -> str:
        return self.style.title if self.style.title is not None else self.kind.title

    @property
    def is_html(self) -> bool:
        return self.style.output_format is OutputFormat.HTML

    def error(self, failure: PreconditionError) -> Artifact:
        """Artifact describing a precondition failure."""
        message = f"Error: {failure.message}"
        if self.is_html:
            text = f"<div class='graph-wrapper'><p>{escape(message)}</p></div>"
        else:
            text = message
        return Artifact(
            text=text,
            kind=self.kind,
            output_format=self.style.output_format,
            error=failure,
        )

    def compose(
        self,
        legend: list[LegendItem],
        graph_block: str | None = None,
        graph_rows: list[str] | None = None,
        scale_row: str | None = None,
    ) -> Artifact:
        """Build the finished artifact.

        Args:
            legend: Legend entries in record order.
            graph_block: Serialized canvas with axis decorations.
            graph_rows: Graph as individual rows (horizontal bar graph).
            scale_row: Trailing scale indicator (horizontal bar graph).
        """
        if self.is_html:
            text = self._compose_html(legend, graph_block, graph_rows, scale_row)
        else:
            text = self._compose_text(legend, graph_block, graph_rows, scale_row)
        return Artifact(text=text, kind=self.kind, output_format=self.style.output_format)

    # ------------------------------------------------------------------
    # Plain text
    # ------------------------------------------------------------------

    def _compose_text(
        self,
        legend: list[LegendItem],
        graph_block: str | None,
        graph_rows: list[str] | None,
        scale_row: str | None,
    ) -> str:
        lines: list[str] = [self.title, "", "Legend"]
        lines.extend(self._legend_line(item) for item in legend)
        lines.extend(["", "Graph"])
        if graph_rows is not None:
            lines.extend(graph_rows)
        if graph_block is not None:
            lines.extend(graph_block.rstrip("\n").split("\n"))
        if scale_row is not None:
            lines.append(scale_row)
        return "\n".join(lines) + "\n"

    def _legend_line(self, item: LegendItem) -> str:
        if item.glyph is None:
            return f"{item.label}: {item.value_text}"
        pad = " " * item.padding
        return (
            f"{item.glyph} {item.label}{pad} {item.value_text} "
            f"({format_fixed(item.percentage or 0.0)}%)"
        )

    # ------------------------------------------------------------------
    # HTML
    # ------------------------------------------------------------------

    def _compose_html(
        self,
        legend: list[LegendItem],
        graph_block: str | None,
        graph_rows: list[str] | None,
        scale_row: str | None,
    ) -> str:
        legend_content = "".join(self._legend_html(item) for item in legend)

        graph_content = ""
        if graph_rows is not None:
            graph_content += "".join(
                f'<div class="graph-row">{escape(row)}</div>' for row in graph_rows
            )
        if scale_row is not None:
            graph_content += f'<div class="graph-scale">{escape(scale_row)}</div>'
        if graph_block is not None:
            graph_content += escape(graph_block)

        background = escape(self.style.background_color)
        color = escape(self.style.text_color)
        parts = [
            f'<div class="graph-wrapper" style="background-color: {background}; '
            f'color: {color};">',
            f'  <h1 class="graph-heading">{escape(self.title)}</h1>',
            '  <section class="legend-section">',
            '    <h2 class="legend-heading">Legend</h2>',
            f'    <div class="legend-content">{legend_content}</div>',
            "  </section>",
            '  <section class="graph-section">',
            '    <h2 class="graph-section-heading">Graph</h2>',
            f'    <div class="graph-content">{graph_content}</div>',
            "  </section>",
            "</div>",
        ]
        return "\n".join(parts) + "\n"

    def _legend_html(self, item: LegendItem) -> str:
        label = f'<span class="legend-label">{escape(item.label)}</span>'
        value = f'<span class="legend-value">{escape(item.value_text)}</span>'
        if item.glyph is None:
            return f'<div class="legend-item">{label}: {value}</div>'
        pad = " " * item.padding
        percent = format_fixed(item.percentage or 0.0)
        return (
            f'<div class="legend-item">'
            f'<span class="legend-char">{escape(item.glyph)}</span> '
            f"{label}{pad} {value} "
            f'(<span class="legend-percentage">{percent}%</span>)'
            f"</div>"
        )
