"""Translate core exceptions into consistent JSON error responses."""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..exceptions import NotFound, StorageUnavailable


logger = logging.getLogger(__name__)


def _error_body(
    *, error_code: str, message: str, details: Any | None = None
) -> dict[str, Any]:
    return {
        "error_code": error_code,
        "message": message,
        "details": details,
        "timestamp": datetime.now(tz=UTC).isoformat(),
    }


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers for the task core's error taxonomy."""

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body(
                error_code="NOT_FOUND",
                message=str(exc),
                details={"entity": exc.entity, "identifier": exc.identifier},
            ),
        )

    @app.exception_handler(StorageUnavailable)
    async def storage_unavailable_handler(
        request: Request, exc: StorageUnavailable
    ) -> JSONResponse:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(
            status_code=503,
            content=_error_body(
                error_code="STORAGE_UNAVAILABLE",
                message="The task store is currently unavailable.",
            ),
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=_error_body(error_code="INVALID_REQUEST", message=str(exc)),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body(
                error_code="VALIDATION_ERROR",
                message="Invalid request parameters.",
                details=jsonable_encoder(exc.errors()),
            ),
        )
