"""Pydantic request schemas for the REST API."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from textcharts.web.schemas.common import RecordSchema, StyleSchema


class RenderRequest(BaseModel):
    """Request for rendering a chart.

    Exactly one of ``data`` (raw delimited text) or ``records`` must be given.
    """

    data: str | None = Field(default=None, description="Delimited label,value text")
    records: list[RecordSchema] | None = Field(
        default=None, description="Already parsed records"
    )
    kind: str = Field(default="bar", description="Chart kind")
    style: StyleSchema = Field(default_factory=StyleSchema, description="Glyphs and colors")
    title: str | None = Field(default=None, max_length=200, description="Heading override")
    format: Literal["text", "html"] = Field(default="text", description="Output format")
    delimiter: str = Field(
        default=",", min_length=1, max_length=1, description="Field separator for data"
    )

    @model_validator(mode="after")
    def check_single_source(self) -> "RenderRequest":
        if (self.data is None) == (self.records is None):
            raise ValueError("Provide exactly one of 'data' or 'records'")
        return self


class ParseRequest(BaseModel):
    """Request for parsing delimited text into records."""

    data: str = Field(..., description="Delimited label,value text")
    delimiter: str = Field(default=",", min_length=1, max_length=1)
