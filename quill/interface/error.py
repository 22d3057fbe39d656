"""Mapping of errors to HTTP responses.

Domain errors propagate out of use cases untouched; the handlers here turn
them into the response envelope with a matching status code.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quill.domain.error import (
    ConflictError,
    ContentDeletedException,
    DomainError,
    InvalidArgumentError,
    NotAuthorizedError,
    NotFoundError,
)
from quill.interface.api.envelope import failure

# Most specific first
DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ContentDeletedException, status.HTTP_404_NOT_FOUND),
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, code in DOMAIN_ERROR_STATUS:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def _response(code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=code, content=failure(code, message).model_dump(mode="json")
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    logfire.warn(
        "Domain error",
        error_type=type(exc).__name__,
        error=str(exc),
        path=request.url.path,
        status_code=code,
    )
    return _response(code, str(exc))


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return _response(exc.status_code, str(exc.detail))


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logfire.info("Request validation failed", path=request.url.path, details=details)
    return _response(status.HTTP_400_BAD_REQUEST, details or "Invalid request")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        error_type=type(exc).__name__,
        error=str(exc),
        path=request.url.path,
    )
    return _response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope error handlers on ``app``."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
