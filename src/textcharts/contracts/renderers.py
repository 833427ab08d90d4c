"""Renderer protocol for chart layout engines.

A renderer turns a dataset and style parameters into an Artifact. It never
raises for missing glyphs; it returns an error artifact instead.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from textcharts.domain import Artifact, Record, StyleParameters


class RendererProtocol(Protocol):
    """Protocol for chart renderers.

    Example:
        ```python
        @RendererRegistry.register(ChartKind.PIE)
        def render_pie(records, style):
            # Implementation
            ...
        ```
    """

    def __call__(
        self, records: Sequence[Record], style: StyleParameters
    ) -> Artifact:
        """Render a chart.

        Args:
            records: Non-empty dataset in display order.
            style: Glyphs, colors and output format.

        Returns:
            The rendered artifact, or an error artifact when a glyph
            precondition fails.
        """
        ...
