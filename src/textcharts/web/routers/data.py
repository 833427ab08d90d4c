"""Data parsing and chart kind discovery endpoints."""

from fastapi import APIRouter

from textcharts.application import parse_dataset
from textcharts.domain import ChartKind
from textcharts.infrastructure import RendererRegistry
from textcharts.web.schemas.common import RecordSchema
from textcharts.web.schemas.requests import ParseRequest
from textcharts.web.schemas.responses import (
    ChartKindListSchema,
    ChartKindSchema,
    ErrorResponseSchema,
    ParseResponseSchema,
)

router = APIRouter(tags=["data"])


@router.post(
    "/parse",
    response_model=ParseResponseSchema,
    responses={422: {"model": ErrorResponseSchema, "description": "Unparseable data"}},
)
async def parse_data(request: ParseRequest) -> ParseResponseSchema:
    """Parse delimited text into records without rendering."""
    records = parse_dataset(request.data, delimiter=request.delimiter)
    return ParseResponseSchema(
        records=[RecordSchema(label=r.label, value=r.value) for r in records]
    )


@router.get("/kinds", response_model=ChartKindListSchema)
async def list_kinds() -> ChartKindListSchema:
    """List the registered chart kinds."""
    return ChartKindListSchema(
        kinds=[
            ChartKindSchema(name=name, title=ChartKind(name).title)
            for name in RendererRegistry.available_kinds()
        ]
    )
