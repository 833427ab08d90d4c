"""Render label/value data as monospace text charts.

Example:
    >>> from textcharts import parse_dataset, render
    >>> records = parse_dataset("External,14\\nInternal,23")
    >>> print(render("bar", records).text)
"""

from textcharts.application import FormatError, parse_dataset
from textcharts.domain import (
    Artifact,
    ChartKind,
    OutputFormat,
    PreconditionError,
    Record,
    StyleParameters,
)
from textcharts.infrastructure import UnsupportedChartKindError, render

__version__ = "1.0.0"

__all__ = [
    "Artifact",
    "ChartKind",
    "FormatError",
    "OutputFormat",
    "PreconditionError",
    "Record",
    "StyleParameters",
    "UnsupportedChartKindError",
    "parse_dataset",
    "render",
]
