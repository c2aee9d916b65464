"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain, storage, and
framework exceptions to HTTP responses.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from filekeeper.core.config import get_settings
from filekeeper.domain.exceptions import FilekeeperException

logger = logging.getLogger(__name__)

# Map error_code to HTTP status; unknown codes are server errors.
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "VALIDATION_ERROR": 400,
    "FILE_SAVE_ERROR": 422,
    "STORAGE_NOT_FOUND": 500,
    "STORAGE_IO_ERROR": 500,
    "STORAGE_PERMISSION_ERROR": 500,
    "STORAGE_SERVICE_ERROR": 500,
    "STORAGE_CLIENT_ERROR": 503,
    "SERVICE_UNAVAILABLE": 503,
}


def status_for_error_code(error_code: str) -> int:
    """Return the HTTP status for a FilekeeperException error_code."""
    return _ERROR_CODE_STATUS.get(error_code, 500)


def _filekeeper_exception_handler(
    request: Request, exc: FilekeeperException
) -> JSONResponse:
    """Return JSON from FilekeeperException.to_dict() with appropriate status code."""
    status = status_for_error_code(exc.error_code)
    if status >= 500:
        logger.error(
            "[%s] %s %s failed: %s",
            exc.error_code,
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc.__cause__ is not None,
        )
    else:
        logger.info(
            "[%s] %s %s: %s", exc.error_code, request.method, request.url.path, exc.message
        )
    return JSONResponse(status_code=status, content=exc.to_dict())


def _jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Return validation errors without non-serializable ctx/input values."""
    return [
        {k: v for k, v in err.items() if k in ("type", "loc", "msg")}
        for err in exc.errors()
    ]


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": _jsonable_errors(exc),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: FilekeeperException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(FilekeeperException, _filekeeper_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
