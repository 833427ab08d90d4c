"""Chart renderers with a registry keyed by chart kind.

Registered renderers:
- bar: horizontal bar graph with a scale row
- vertical_bar: vertical bars on a 15 row canvas
- area: interpolated line over a filled area
- pie: pie chart on a 24x24 grid

Usage:
    from textcharts.infrastructure.renderers import render

    artifact = render("pie", records, StyleParameters())
    print(artifact.text)
"""

from textcharts.infrastructure.renderers.artifact import ArtifactWriter, LegendItem
from textcharts.infrastructure.renderers.base import (
    RendererRegistry,
    UnsupportedChartKindError,
    render,
)

# Import renderers to trigger registration
from textcharts.infrastructure.renderers.area import render_area
from textcharts.infrastructure.renderers.horizontal_bar import render_horizontal_bar
from textcharts.infrastructure.renderers.pie import pie_percentages, render_pie
from textcharts.infrastructure.renderers.vertical_bar import render_vertical_bar

__all__ = [
    # Framework
    "ArtifactWriter",
    "LegendItem",
    "RendererRegistry",
    "UnsupportedChartKindError",
    "render",
    # Registered renderers
    "render_area",
    "render_horizontal_bar",
    "render_pie",
    "render_vertical_bar",
    "pie_percentages",
]
