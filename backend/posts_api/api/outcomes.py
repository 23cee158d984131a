"""Outcome Adapter — turns controller Outcomes into HTTP responses.

Invariants:
    - Success: serialize(value) with the route's success status
    - Failure: rendered by error_handlers.error_response (kind → status lives there)
"""

from typing import Any, Callable

from fastapi.responses import JSONResponse

from posts_api.api.error_handlers import error_response
from posts_api.core.outcome import Outcome


def render_outcome(
    outcome: Outcome,
    success_status: int,
    serialize: Callable[[Any], Any],
) -> JSONResponse:
    if not outcome.ok:
        return error_response(outcome.error)
    return JSONResponse(
        status_code=success_status, content=serialize(outcome.value),
    )
