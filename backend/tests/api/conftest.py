"""API test fixtures — app built by create_app() with an injected store.

Invariants:
    - Every test gets a fresh app, store and static directory
    - raise_app_exceptions=False: the catch-all handler's 500 reaches the client

Design Decisions:
    - Store injected instead of relying on lifespan: httpx ASGITransport does
      not run lifespan events
"""

import pytest
from httpx import ASGITransport, AsyncClient

from posts_api.config import Settings
from posts_api.infrastructure.memory_store import InMemoryPostStore
from posts_api.main import create_app


@pytest.fixture
def static_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>Posts</h1>")
    (public / "about.html").write_text("<h1>About</h1>")
    return public


@pytest.fixture
def settings(static_dir):
    return Settings(_env_file=None, static_dir=static_dir, log_format="text")


@pytest.fixture
def store():
    return InMemoryPostStore()


async def _client_for(app):
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


@pytest.fixture
async def client(settings, store):
    app = create_app(settings=settings, store=store)
    async with await _client_for(app) as c:
        yield c


@pytest.fixture
def make_client():
    """Build a client for a custom app (e.g. a different store or settings)."""
    return _client_for
