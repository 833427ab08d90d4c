"""Pydantic schemas for the REST API."""

from textcharts.web.schemas.common import RecordSchema, StyleSchema
from textcharts.web.schemas.requests import ParseRequest, RenderRequest
from textcharts.web.schemas.responses import (
    ChartKindListSchema,
    ChartKindSchema,
    ErrorResponseSchema,
    ParseResponseSchema,
    RenderResponseSchema,
)

__all__ = [
    # Common
    "RecordSchema",
    "StyleSchema",
    # Requests
    "ParseRequest",
    "RenderRequest",
    # Responses
    "ChartKindListSchema",
    "ChartKindSchema",
    "ErrorResponseSchema",
    "ParseResponseSchema",
    "RenderResponseSchema",
]
