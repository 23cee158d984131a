"""In-Memory Post Store — insertion-ordered dict guarded by an asyncio lock.

Invariants:
    - _posts preserves insertion order (list_all returns creation order)
    - _next_id only grows: deleted identifiers are never handed out again
    - Every mutating method holds _lock for its whole read-modify-write
    - Callers receive copies, never the stored Post objects

Design Decisions:
    - asyncio.Lock over threading.Lock: single-process uvicorn event loop
    - Identifiers start at 1 so the first created post is /api/posts/1
"""

import logging
import asyncio
from typing import Mapping

from posts_api.core.domain_types import Post, PostId, utc_now
from posts_api.core.post_rules import merge_post

logger = logging.getLogger(__name__)


class InMemoryPostStore:
    """PostStore implementation backed by a process-local dict."""

    def __init__(self, start_id: int = 1):
        self._posts: dict[PostId, Post] = {}
        self._next_id = start_id
        self._lock = asyncio.Lock()

    async def list_all(self) -> list[Post]:
        async with self._lock:
            return [post.copy() for post in self._posts.values()]

    async def get(self, post_id: PostId) -> Post | None:
        async with self._lock:
            post = self._posts.get(post_id)
            return post.copy() if post else None

    async def create(self, fields: Mapping[str, str]) -> Post:
        async with self._lock:
            now = utc_now()
            post = Post(
                id=PostId(self._next_id),
                title=fields["title"],
                body=fields["body"],
                created_at=now,
                updated_at=now,
            )
            self._posts[post.id] = post
            self._next_id += 1
            logger.debug(f"Stored post {post.id}", extra={"post_id": post.id})
            return post.copy()

    async def update(
        self, post_id: PostId, changes: Mapping[str, str],
    ) -> Post | None:
        async with self._lock:
            existing = self._posts.get(post_id)
            if existing is None:
                return None
            merged = merge_post(existing, changes)
            self._posts[post_id] = merged
            return merged.copy()

    async def delete(self, post_id: PostId) -> bool:
        async with self._lock:
            return self._posts.pop(post_id, None) is not None

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        async with self._lock:
            self._posts.clear()
