"""Pydantic models for chart rendering configuration files.

Example configuration::

    {
      "schema_version": "1.0",
      "chart": {"kind": "pie", "title": "Traffic sources"},
      "style": {"pie_chars": ["#", "*", "+"]},
      "output": {"format": "html"}
    }
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from textcharts.domain import (
    DEFAULT_AREA_CHARS,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BAR_CHAR,
    DEFAULT_PIE_CHARS,
    DEFAULT_TEXT_COLOR,
    ChartKind,
    OutputFormat,
)

# Version 1.0: Initial schema with chart, style and output sections
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class ChartConfig(BaseModel):
    """Which chart to draw.

    Attributes:
        kind: Chart kind ("bar", "vertical_bar", "area" or "pie").
        title: Heading override for the artifact.
    """

    model_config = ConfigDict(extra="forbid")

    kind: ChartKind = ChartKind.BAR
    title: str | None = Field(default=None, max_length=200)

    @field_validator("kind", mode="before")
    @classmethod
    def resolve_alias(cls, v: object) -> object:
        """Accept kind aliases such as "verticalBar"."""
        if isinstance(v, str):
            return ChartKind.parse(v)
        return v


class StyleConfig(BaseModel):
    """Glyphs and colors.

    Empty glyphs are allowed here. The renderer reports them as an error
    artifact, the same way it does for any other caller.
    """

    model_config = ConfigDict(extra="forbid")

    bar_char: str = DEFAULT_BAR_CHAR
    area_chars: list[str] = Field(
        default_factory=lambda: list(DEFAULT_AREA_CHARS), min_length=2, max_length=2
    )
    pie_chars: list[str] = Field(default_factory=lambda: list(DEFAULT_PIE_CHARS))
    background_color: str = DEFAULT_BACKGROUND_COLOR
    text_color: str = DEFAULT_TEXT_COLOR


class OutputConfig(BaseModel):
    """Output serialization and input parsing options.

    Attributes:
        format: "text" for plain text, "html" for markup.
        delimiter: Field separator of the input data.
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["text", "html"] = OutputFormat.TEXT.value
    delimiter: str = Field(default=",", min_length=1, max_length=1)


class ChartConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor".
        chart: Chart kind and title.
        style: Glyphs and colors.
        output: Output format and input delimiter.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    chart: ChartConfig = Field(default_factory=ChartConfig)
    style: StyleConfig = Field(default_factory=StyleConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
