"""Global exception handlers mapping domain errors to HTTP responses.

Every error response has the body ``{"error": <message>}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from quotevote.domain.error import (
    AlreadyExistsError,
    ConflictError,
    DomainError,
    NotFoundError,
    StoreError,
    UnauthorizedError,
    ValidationError,
)

# Most specific first; the first isinstance match wins. A timeout is a
# StoreError and shares its 500.
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (StoreError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        """Handle all domain and store errors."""
        status_code = status_for(exc)
        if status_code >= 500:
            logfire.error(
                "Store failure",
                path=request.url.path,
                error=exc.message,
                error_type=type(exc).__name__,
            )
        else:
            logfire.warn(
                "Request rejected",
                path=request.url.path,
                error=exc.message,
                error_type=type(exc).__name__,
                status_code=status_code,
            )
        return JSONResponse(status_code=status_code, content=error_body(exc.message))


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle malformed request bodies and parameters as 400."""
        errors = exc.errors()
        if errors:
            first = errors[0]
            field = ".".join(str(part) for part in first["loc"] if part != "body")
            message = f"{field}: {first['msg']}" if field else first["msg"]
        else:
            message = "invalid request"
        logfire.warn("Request validation failed", path=request.url.path, error=message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message)
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all that never leaks internal details."""
        logfire.exception(
            "Unhandled exception", path=request.url.path, error_type=type(exc).__name__
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("internal server error"),
        )
