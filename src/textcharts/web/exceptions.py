"""Exception handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from textcharts.application import EmptyDatasetError, FormatError
from textcharts.infrastructure import UnsupportedChartKindError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(FormatError)
    async def format_error_handler(request: Request, exc: FormatError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "format",
                "details": {"line": exc.line, "token": exc.token},
            },
        )

    @app.exception_handler(EmptyDatasetError)
    async def empty_dataset_handler(
        request: Request, exc: EmptyDatasetError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "empty_dataset",
                "details": None,
            },
        )

    @app.exception_handler(UnsupportedChartKindError)
    async def unsupported_kind_handler(
        request: Request, exc: UnsupportedChartKindError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_kind",
                "details": {"kind": exc.kind, "available": exc.available},
            },
        )
