"""Chart rendering endpoints."""

from fastapi import APIRouter

from textcharts.application import ChartOutput
from textcharts.domain import StyleParameters
from textcharts.web.dependencies import RenderCommandDep
from textcharts.web.schemas.requests import RenderRequest
from textcharts.web.schemas.responses import ErrorResponseSchema, RenderResponseSchema

router = APIRouter(prefix="/render", tags=["render"])


def _style_from_request(request: RenderRequest) -> StyleParameters:
    style = request.style
    return StyleParameters(
        bar_char=style.bar_char,
        area_chars=style.area_chars,
        pie_chars=tuple(style.pie_chars),
        background_color=style.background_color,
        text_color=style.text_color,
        title=request.title,
        output_format=request.format,
    )


def _output_to_schema(output: ChartOutput) -> RenderResponseSchema:
    return RenderResponseSchema(
        kind=output.kind.value,
        format=output.artifact.output_format.value,
        artifact=output.text,
        is_valid=output.is_valid,
        errors=output.errors,
        percentages=output.percentages,
    )


@router.post(
    "",
    response_model=RenderResponseSchema,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Unsupported chart kind"},
        422: {"model": ErrorResponseSchema, "description": "Unparseable or empty data"},
    },
)
async def render_chart(
    request: RenderRequest,
    command: RenderCommandDep,
) -> RenderResponseSchema:
    """Render a chart from raw delimited text or parsed records.

    Missing glyphs do not fail the request: the response carries the error
    artifact with ``is_valid`` set to false.
    """
    style = _style_from_request(request)
    if request.data is not None:
        output = command.execute_text(
            request.data, request.kind, style=style, delimiter=request.delimiter
        )
    else:
        records = [record.to_domain() for record in request.records or []]
        output = command.execute(records, request.kind, style=style)
    return _output_to_schema(output)
