"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from textcharts.web.schemas.common import RecordSchema


class RenderResponseSchema(BaseModel):
    """Response for chart rendering."""

    kind: str = Field(..., description="Rendered chart kind")
    format: str = Field(..., description="Output format of the artifact")
    artifact: str = Field(..., description="Rendered chart text or markup")
    is_valid: bool = Field(..., description="False when the artifact reports an error")
    errors: list[str] = Field(default_factory=list, description="Precondition messages")
    percentages: list[float] = Field(
        default_factory=list, description="Share of the total per record (pie only)"
    )


class ParseResponseSchema(BaseModel):
    """Response for parsing delimited text."""

    records: list[RecordSchema] = Field(..., description="Parsed records in order")


class ChartKindSchema(BaseModel):
    """Single chart kind in the list."""

    name: str = Field(..., description="Kind identifier")
    title: str = Field(..., description="Default heading")


class ChartKindListSchema(BaseModel):
    """Response for chart kind listing."""

    kinds: list[ChartKindSchema] = Field(..., description="Available chart kinds")


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional details")
