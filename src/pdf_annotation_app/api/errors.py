"""Translate service errors into JSON responses."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pdf_annotation_app.annotations.errors import InputError, StoreError
from pdf_annotation_app.config.logging import get_logger

LOGGER = get_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InputError)
    async def handle_input_error(request: Request, exc: InputError) -> JSONResponse:
        LOGGER.info(
            "Rejected request",
            extra={"path": request.url.path, "error": exc.code, "field": exc.field},
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        loc = errors[0].get("loc", ()) if errors else ()
        error = InputError(
            "Request body is not a valid payload",
            code="invalid_payload",
            field=str(loc[0]) if loc else None,
        )
        return await handle_input_error(request, error)

    # Driver details are logged where the error is raised and never returned.
    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": exc.code, "detail": exc.message},
        )
