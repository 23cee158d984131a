"""Service test fixtures — stores and a controller wired to them.

Invariants:
    - Every test gets a fresh store (no state shared between tests)
    - sql_store uses an in-memory SQLite database, disposed after the test

Design Decisions:
    - SQLite in-memory: fast, no external dependency, exercises the real ORM path
    - failing_store raises StoreError on every call to drive the UNEXPECTED path
"""

import pytest

from posts_api.core.errors import StoreError
from posts_api.infrastructure.memory_store import InMemoryPostStore
from posts_api.infrastructure.sql_store import SqlPostStore
from posts_api.services.post_controller import PostController


@pytest.fixture
def memory_store():
    return InMemoryPostStore()


@pytest.fixture
async def sql_store():
    store = await SqlPostStore.connect("sqlite+aiosqlite:///:memory:")
    yield store
    await store.close()


@pytest.fixture(params=["memory", "sql"])
async def any_store(request):
    """Run the test once per store implementation."""
    if request.param == "memory":
        yield InMemoryPostStore()
        return
    store = await SqlPostStore.connect("sqlite+aiosqlite:///:memory:")
    yield store
    await store.close()


@pytest.fixture
def controller(any_store):
    return PostController(any_store)


class _FailingStore:
    """PostStore whose every operation fails like a dropped connection."""

    async def list_all(self):
        raise StoreError("Connection or operational error", "execute")

    async def get(self, post_id):
        raise StoreError("Connection or operational error", "execute")

    async def create(self, fields):
        raise StoreError("Integrity constraint violated", "commit")

    async def update(self, post_id, changes):
        raise StoreError("Integrity constraint violated", "commit")

    async def delete(self, post_id):
        raise StoreError("Integrity constraint violated", "commit")

    async def health_check(self):
        return False

    async def close(self):
        return None


@pytest.fixture
def failing_store():
    return _FailingStore()
