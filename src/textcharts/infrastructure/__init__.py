"""Infrastructure layer - chart renderers and artifact serialization."""

from .renderers import (
    ArtifactWriter,
    LegendItem,
    RendererRegistry,
    UnsupportedChartKindError,
    pie_percentages,
    render,
    render_area,
    render_horizontal_bar,
    render_pie,
    render_vertical_bar,
)

__all__ = [
    "ArtifactWriter",
    "LegendItem",
    "RendererRegistry",
    "UnsupportedChartKindError",
    "pie_percentages",
    "render",
    "render_area",
    "render_horizontal_bar",
    "render_pie",
    "render_vertical_bar",
]
