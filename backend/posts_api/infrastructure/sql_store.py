"""SQL Post Store — PostStore implementation over SQLAlchemy async ORM.

Invariants:
    - One session and one commit per operation (per-operation atomicity)
    - list_all orders by id, which matches creation order
    - ORM rows are converted to core Post before leaving this module
    - Driver/ORM failures surface as StoreError via DatabaseSessionManager

Design Decisions:
    - Identifiers come from the database autoincrement key, not a Python counter
    - Merge rules reused from core.post_rules so both stores update identically
"""

import logging
from typing import Mapping

from sqlalchemy import select

from posts_api.core.domain_types import Post, PostId, utc_now
from posts_api.core.post_rules import merge_post
from posts_api.infrastructure.database import DatabaseSessionManager
from posts_api.models.post import PostRecord

logger = logging.getLogger(__name__)


class SqlPostStore:
    """PostStore backed by a relational database."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    @classmethod
    async def connect(cls, database_url: str, **kwargs) -> "SqlPostStore":
        """Build the session manager and make sure the schema exists."""
        manager = DatabaseSessionManager(database_url, **kwargs)
        await manager.create_tables()
        return cls(manager)

    async def list_all(self) -> list[Post]:
        async with self._manager.session() as db:
            result = await db.execute(
                select(PostRecord).order_by(PostRecord.id),
            )
            return [record.to_domain() for record in result.scalars().all()]

    async def get(self, post_id: PostId) -> Post | None:
        async with self._manager.session() as db:
            record = await db.get(PostRecord, post_id)
            return record.to_domain() if record else None

    async def create(self, fields: Mapping[str, str]) -> Post:
        async with self._manager.session() as db:
            now = utc_now()
            record = PostRecord(
                title=fields["title"], body=fields["body"],
                created_at=now, updated_at=now,
            )
            db.add(record)
            await db.commit()
            await db.refresh(record)
            logger.debug(f"Stored post {record.id}", extra={"post_id": record.id})
            return record.to_domain()

    async def update(
        self, post_id: PostId, changes: Mapping[str, str],
    ) -> Post | None:
        async with self._manager.session() as db:
            record = await db.get(PostRecord, post_id)
            if record is None:
                return None
            merged = merge_post(record.to_domain(), changes)
            record.title = merged.title
            record.body = merged.body
            record.updated_at = merged.updated_at
            await db.commit()
            return merged

    async def delete(self, post_id: PostId) -> bool:
        async with self._manager.session() as db:
            record = await db.get(PostRecord, post_id)
            if record is None:
                return False
            await db.delete(record)
            await db.commit()
            return True

    async def health_check(self) -> bool:
        return await self._manager.health_check()

    async def close(self) -> None:
        await self._manager.dispose()
