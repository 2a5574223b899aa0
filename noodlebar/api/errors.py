"""Unified error handling: every failure leaves the app as a JSON envelope."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from noodlebar.services import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ServiceError,
    ValidationError,
)

log = structlog.get_logger(__name__)

_STATUS_MAP: dict[type[ServiceError], int] = {
    ValidationError: 400,
    AuthenticationError: 401,
    NotFoundError: 404,
    ConflictError: 409,
    PersistenceError: 500,
}


def _failure(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    content: dict = {"message": message, "status": False}
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)


async def _service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    status = 500
    for cls in type(exc).__mro__:
        if cls in _STATUS_MAP:
            status = _STATUS_MAP[cls]
            break
    error = exc.detail if isinstance(exc, PersistenceError) else None
    return _failure(status, str(exc), error)


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = []
    for err in exc.errors():
        loc = " → ".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}")
    return _failure(400, "Invalid request", "; ".join(messages))


async def _unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    # Starlette still re-raises after sending, so the server logs the traceback
    log.error("unhandled error", error_type=type(exc).__name__)
    return _failure(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app."""
    app.add_exception_handler(ServiceError, _service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)
