"""Configuration schema and loading for chart rendering.

Public API:
    - ChartConfiguration: Root configuration model
    - ChartConfig, StyleConfig, OutputConfig: Section models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - config_to_style: Convert a configuration to StyleParameters

Example:
    >>> from pathlib import Path
    >>> from textcharts.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("chart.json"))
    ...     print(f"Chart kind: {config.chart.kind.value}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from textcharts.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from textcharts.application.config.merger import (
    config_to_kind,
    config_to_style,
    merge_config_with_cli,
)
from textcharts.application.config.schema import (
    SUPPORTED_VERSIONS,
    ChartConfig,
    ChartConfiguration,
    OutputConfig,
    StyleConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ChartConfig",
    "ChartConfiguration",
    "ConfigError",
    "OutputConfig",
    "StyleConfig",
    "config_to_kind",
    "config_to_style",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
