"""Post Stores — contract checks shared by the in-memory and SQL stores.

Tests cover:
    - Returned posts are copies (mutating them does not change the store)
    - update/delete report absence with None/False instead of raising
    - SQL timestamps come back timezone-aware
    - health_check reports availability
    - In-memory SQLite is pinned to a single shared connection
"""

from datetime import timezone

from sqlalchemy.pool import StaticPool

from posts_api.core.domain_types import PostId
from posts_api.infrastructure.database import DatabaseSessionManager


async def test_returned_posts_are_copies(any_store):
    created = await any_store.create({"title": "A", "body": "B"})
    created.title = "mutated"
    fetched = await any_store.get(created.id)
    assert fetched.title == "A"


async def test_update_missing_returns_none(any_store):
    assert await any_store.update(PostId(1), {"title": "X"}) is None


async def test_delete_missing_returns_false(any_store):
    assert await any_store.delete(PostId(1)) is False


async def test_update_refreshes_updated_at_only(any_store):
    created = await any_store.create({"title": "A", "body": "B"})
    updated = await any_store.update(created.id, {"title": "A2"})
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at


async def test_health_check(any_store):
    assert await any_store.health_check() is True


async def test_sql_timestamps_are_utc(sql_store):
    created = await sql_store.create({"title": "A", "body": "B"})
    fetched = await sql_store.get(created.id)
    assert fetched.created_at.tzinfo is not None
    assert fetched.created_at.utcoffset() == timezone.utc.utcoffset(None)


async def test_memory_store_ids_start_at_one(memory_store):
    first = await memory_store.create({"title": "A", "body": "B"})
    second = await memory_store.create({"title": "C", "body": "D"})
    assert (first.id, second.id) == (1, 2)


async def test_memory_sqlite_uses_static_pool():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    assert isinstance(manager.engine.pool, StaticPool)
    await manager.dispose()


async def test_file_sqlite_keeps_default_pool(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'posts.db'}")
    assert not isinstance(manager.engine.pool, StaticPool)
    await manager.dispose()


async def test_memory_sqlite_sessions_share_one_database(sql_store):
    created = await sql_store.create({"title": "A", "body": "B"})
    assert [post.id for post in await sql_store.list_all()] == [created.id]
