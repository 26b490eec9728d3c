"""Exception handlers mapping domain errors to JSON responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from stackit.domain.error import (
    DomainError,
    MismatchError,
    NotAuthorError,
    NotAuthorizedError,
    NotFoundError,
    SelfVoteError,
    ValidationError,
)

# Most specific first; the first match wins
ERROR_STATUS: tuple[tuple[type[DomainError], int], ...] = (
    (SelfVoteError, status.HTTP_400_BAD_REQUEST),
    (MismatchError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotAuthorError, status.HTTP_403_FORBIDDEN),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
)


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error, 400 for any unlisted one."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def setup_error_handlers(app: FastAPI) -> None:
    """Register exception handlers.

    Domain errors become ``{"detail", "code"}`` bodies. Anything else is
    logged and returned as a 500 without internals.
    """

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_for(exc)
        logfire.info(
            "Request rejected",
            path=request.url.path,
            code=exc.code,
            status_code=status_code,
        )
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "code": exc.code},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logfire.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
