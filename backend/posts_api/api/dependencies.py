"""Route Dependencies — hand the app-owned store to a per-request controller.

Invariants:
    - The store lives on app.state; nothing imports a store module-globally
    - Missing store is a startup bug, surfaced as RuntimeError (→ 500)
    - Post payloads arrive as JSON or as a urlencoded form; both reach the
      controller as the same plain mapping of strings

Design Decisions:
    - JSON stays with FastAPI's Body parsing (malformed JSON → 400 validation);
      FastAPI hands non-JSON bodies through as bytes, which the form branch
      re-reads with request.form()
"""

from typing import Any

from fastapi import Body, Depends, Request

from posts_api.core.repository_protocols import PostStore
from posts_api.services.post_controller import PostController

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def get_post_store(request: Request) -> PostStore:
    store = getattr(request.app.state, "post_store", None)
    if store is None:
        raise RuntimeError("Post store not initialized")
    return store


def get_post_controller(
    store: PostStore = Depends(get_post_store),
) -> PostController:
    return PostController(store)


async def get_post_payload(request: Request, payload: Any = Body(None)) -> Any:
    """The request body as JSON, or as a dict when it is a urlencoded form."""
    content_type = request.headers.get("content-type", "")
    if content_type.lower().startswith(FORM_CONTENT_TYPE):
        form = await request.form()
        return dict(form)
    return payload
