"""Public Files — the static mount behind the API routes.

Invariants:
    - Only GET and HEAD are served; any other method is a plain 404
    - A missing file raises HTTPException(404), rendered by api/error_handlers.py

Design Decisions:
    - Mounted at "/", so it receives every unmatched path for every method
    - get_response is the override point: html=True lookup stays untouched
"""

from fastapi import status
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from starlette.types import Scope

READ_METHODS = ("GET", "HEAD")


class PublicFiles(StaticFiles):
    """StaticFiles that treats non-read methods as unmatched requests."""

    async def get_response(self, path: str, scope: Scope):
        if scope["method"] not in READ_METHODS:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return await super().get_response(path, scope)
