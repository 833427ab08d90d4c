"""Application layer - parsing and render use cases."""

from .commands import EmptyDatasetError, RenderChartCommand
from .dtos import ChartOutput
from .parser import (
    DEFAULT_DELIMITER,
    FormatError,
    parse_dataset,
    parse_dataset_file,
    parse_number,
)

__all__ = [
    "ChartOutput",
    "DEFAULT_DELIMITER",
    "EmptyDatasetError",
    "FormatError",
    "RenderChartCommand",
    "parse_dataset",
    "parse_dataset_file",
    "parse_number",
]
