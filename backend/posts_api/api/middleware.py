"""Request Logging Middleware — one log line per request, never alters the flow.

Invariants:
    - Always calls the next handler; never short-circuits or mutates the request
    - Logs method, path, status code and duration (timestamp added by the formatter)
    - Exceptions are logged and re-raised untouched for the error handlers
"""

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger("posts_api.access")


def register_request_logging(app: FastAPI) -> None:
    """Attach the request logger as an HTTP middleware."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        extra = {
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else None,
        }
        try:
            response = await call_next(request)
        except Exception:
            extra["duration_ms"] = _elapsed_ms(started)
            extra["status_code"] = 500
            logger.error(
                f"{request.method} {request.url.path} failed", extra=extra,
            )
            raise
        extra["duration_ms"] = _elapsed_ms(started)
        extra["status_code"] = response.status_code
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra=extra,
        )
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
