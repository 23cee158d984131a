"""Posts API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to structured JSON (api/error_handlers.py)
    - The post store is owned by the app (app.state.post_store), never module-global
    - Static files mounted AFTER API routes so /api/* takes precedence

Design Decisions:
    - create_app() factory: tests inject a store and settings, production uses `app`
    - Lifespan builds the configured store only when none was injected, and closes
      only the store it built
    - html=True on the static mount: directories serve their index.html
    - PublicFiles answers only GET/HEAD, so other methods on unmatched paths are 404
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from posts_api.api.error_handlers import register_error_handlers
from posts_api.api.middleware import register_request_logging
from posts_api.api.static import PublicFiles
from posts_api.api.routes import health, posts
from posts_api.config import Settings, get_settings
from posts_api.core.repository_protocols import PostStore
from posts_api.infrastructure.observability import setup_logging
from posts_api.infrastructure.store_factory import build_store

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, store: PostStore | None = None,
) -> FastAPI:
    """Wire middleware, routes, error handlers and the static mount."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        built_store = None
        if app.state.post_store is None:
            built_store = await build_store(settings)
            app.state.post_store = built_store
        logger.info("Posts API started")
        yield
        if built_store is not None:
            await built_store.close()
            app.state.post_store = None
        logger.info("Posts API shutting down")

    app = FastAPI(title="Posts API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.post_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_request_logging(app)

    app.include_router(health.router)
    app.include_router(posts.router)

    if settings.static_dir.is_dir():
        app.mount(
            "/", PublicFiles(directory=settings.static_dir, html=True),
            name="static",
        )
    else:
        logger.warning(f"Static directory {settings.static_dir} not found; not serving files")

    register_error_handlers(app)
    return app


app = create_app()
