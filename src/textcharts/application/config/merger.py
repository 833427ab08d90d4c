"""Configuration merging for CLI overrides.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from textcharts.application.config.loader import load_config_from_dict
from textcharts.application.config.schema import ChartConfiguration
from textcharts.domain import ChartKind, StyleParameters


def merge_config_with_cli(
    config: ChartConfiguration,
    *,
    kind: str | None = None,
    title: str | None = None,
    bar_char: str | None = None,
    line_char: str | None = None,
    fill_char: str | None = None,
    pie_chars: list[str] | None = None,
    background_color: str | None = None,
    text_color: str | None = None,
    output_format: str | None = None,
    delimiter: str | None = None,
) -> ChartConfiguration:
    """Merge CLI arguments with configuration values.

    Returns:
        A new, re-validated ChartConfiguration with merged values.

    Raises:
        ConfigError: If an override fails validation.

    Example:
        >>> merged = merge_config_with_cli(config, kind="pie", output_format="html")
        >>> merged.chart.kind
        <ChartKind.PIE: 'pie'>
    """
    data = config.model_dump(mode="json")

    _override(data["chart"], "kind", kind)
    _override(data["chart"], "title", title)

    style = data["style"]
    _override(style, "bar_char", bar_char)
    _override(style, "pie_chars", pie_chars)
    _override(style, "background_color", background_color)
    _override(style, "text_color", text_color)
    line, fill = style["area_chars"]
    style["area_chars"] = [
        line_char if line_char is not None else line,
        fill_char if fill_char is not None else fill,
    ]

    _override(data["output"], "format", output_format)
    _override(data["output"], "delimiter", delimiter)

    return load_config_from_dict(data)


def _override(section: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        section[key] = value


def config_to_style(config: ChartConfiguration) -> StyleParameters:
    """Build the StyleParameters a render call needs from a configuration."""
    style = config.style
    line, fill = style.area_chars
    return StyleParameters(
        bar_char=style.bar_char,
        area_chars=(line, fill),
        pie_chars=tuple(style.pie_chars),
        background_color=style.background_color,
        text_color=style.text_color,
        title=config.chart.title,
        output_format=config.output.format,
    )


def config_to_kind(config: ChartConfiguration) -> ChartKind:
    return config.chart.kind
