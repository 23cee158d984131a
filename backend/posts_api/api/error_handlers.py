"""Error Handlers — the single mapping from error kind to HTTP status and body.

Invariants:
    - STATUS_BY_KIND is the only place an ErrorKind becomes a status code
    - PostsApiError → structured JSON with code, message, kind, severity
    - RequestValidationError → 400 with field-level details
    - Unmatched routes, unmatched methods and missing static files → 404 with a
      generic message
    - Every error body carries a real kind; other HTTP statuses derive it from
      their status class
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - error_response() shared by exception handlers and the Outcome adapter
      (api/outcomes.py): raised and returned failures render identically
    - Starlette HTTPException handled here so router errors share the envelope
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from posts_api.core.domain_types import ErrorKind
from posts_api.core.errors import PostsApiError, ErrorSeverity

logger = logging.getLogger(__name__)

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

NOT_FOUND_MESSAGE = "Not found"

UNMATCHED_STATUSES = frozenset({
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
})


def status_for_kind(kind: ErrorKind) -> int:
    return STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def kind_for_status(status_code: int) -> ErrorKind:
    """Closest ErrorKind for a bare HTTP status."""
    if status_code == status.HTTP_404_NOT_FOUND:
        return ErrorKind.NOT_FOUND
    if 400 <= status_code < 500:
        return ErrorKind.VALIDATION
    return ErrorKind.UNEXPECTED


def error_response(exc: PostsApiError) -> JSONResponse:
    """Render a PostsApiError with the status its kind maps to."""
    return JSONResponse(
        status_code=status_for_kind(exc.kind), content=exc.to_response(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_posts_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_posts_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(PostsApiError)
    async def posts_error_handler(request: Request, exc: PostsApiError):
        """Handle all Posts API domain/infrastructure errors."""
        logger.error(
            f"PostsApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return error_response(exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed bodies and path parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status_for_kind(ErrorKind.VALIDATION),
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register router-level HTTP error handler (not-found, method not allowed)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Not-found for unmatched paths and methods; other statuses pass through."""
        if exc.status_code in UNMATCHED_STATUSES:
            logger.info(f"No route or file for {request.method} {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=_build_error_body(
                    "NOT_FOUND", NOT_FOUND_MESSAGE, ErrorKind.NOT_FOUND,
                ),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=_build_error_body(
                "HTTP_ERROR", str(exc.detail), kind_for_status(exc.status_code),
            ),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status_for_kind(ErrorKind.UNEXPECTED),
            content=_build_error_body(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorKind.UNEXPECTED, ErrorSeverity.CRITICAL,
            ),
        )


def _build_error_body(
    code: str,
    message: str,
    kind: ErrorKind,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "kind": kind.value,
            "severity": severity.value,
        },
    }


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    body = _build_error_body(
        "VALIDATION_ERROR", "Invalid request data", ErrorKind.VALIDATION,
    )
    body["error"]["details"] = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return body
