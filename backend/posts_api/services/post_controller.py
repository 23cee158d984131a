"""Post Controller — translates payloads into store operations and returns Outcomes.

Invariants:
    - The store is injected; the controller never builds or imports one
    - Every operation returns an Outcome; validation and not-found are never raised
    - A failed validation never touches the store
    - update/delete check existence before anything else: unknown ids leave the store unchanged
    - Ids no store can hold are NOT_FOUND without a store round-trip
    - StoreError becomes an UNEXPECTED Outcome with a generic client message

Design Decisions:
    - Thin orchestration around pure rules (core/post_rules.py): impureim sandwich
    - Delete confirmation is {"id", "deleted"} rather than the removed post
"""

import logging
from typing import Any

from posts_api.core.domain_types import Post, PostId
from posts_api.core.errors import (
    ErrorContext, PostsApiError, ResourceNotFoundError, StoreError,
)
from posts_api.core.outcome import Outcome
from posts_api.core.post_rules import (
    check_create_payload, check_update_payload, extract_fields, id_in_range,
)
from posts_api.core.repository_protocols import PostStore

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "Post"


class PostController:
    """CRUD operations for posts over an injected PostStore."""

    def __init__(self, store: PostStore):
        self.store = store

    async def list_posts(self) -> Outcome[list[Post]]:
        """All live posts in creation order. Empty store → empty list."""
        try:
            return Outcome.success(await self.store.list_all())
        except StoreError as e:
            return _store_failure(e)

    async def get_post(self, post_id: PostId) -> Outcome[Post]:
        if not id_in_range(post_id):
            return _not_found(post_id)
        try:
            post = await self.store.get(post_id)
        except StoreError as e:
            return _store_failure(e, post_id)
        if post is None:
            return _not_found(post_id)
        return Outcome.success(post)

    async def create_post(self, payload: Any) -> Outcome[Post]:
        """Validate, then persist. The store assigns the identifier."""
        error = check_create_payload(payload)
        if error:
            logger.info(
                f"Rejected post create: {error.message}",
                extra={"error_code": error.code},
            )
            return Outcome.failure(error)
        try:
            post = await self.store.create(extract_fields(payload))
        except StoreError as e:
            return _store_failure(e)
        logger.info(f"Created post {post.id}", extra={"post_id": post.id})
        return Outcome.success(post)

    async def update_post(self, post_id: PostId, payload: Any) -> Outcome[Post]:
        """Merge the supplied title/body into an existing post."""
        if not id_in_range(post_id):
            return _not_found(post_id)
        try:
            existing = await self.store.get(post_id)
        except StoreError as e:
            return _store_failure(e, post_id)
        if existing is None:
            return _not_found(post_id)

        error = check_update_payload(payload)
        if error:
            error.context.post_id = post_id
            return Outcome.failure(error)

        try:
            post = await self.store.update(post_id, extract_fields(payload))
        except StoreError as e:
            return _store_failure(e, post_id)
        # Deleted between the existence check and the write
        if post is None:
            return _not_found(post_id)
        logger.info(f"Updated post {post_id}", extra={"post_id": post_id})
        return Outcome.success(post)

    async def delete_post(self, post_id: PostId) -> Outcome[dict]:
        if not id_in_range(post_id):
            return _not_found(post_id)
        try:
            deleted = await self.store.delete(post_id)
        except StoreError as e:
            return _store_failure(e, post_id)
        if not deleted:
            return _not_found(post_id)
        logger.info(f"Deleted post {post_id}", extra={"post_id": post_id})
        return Outcome.success({"id": post_id, "deleted": True})


def _not_found(post_id: PostId) -> Outcome:
    return Outcome.failure(ResourceNotFoundError(
        RESOURCE_TYPE, str(post_id), ErrorContext(post_id=post_id),
    ))


def _store_failure(error: StoreError, post_id: PostId | None = None) -> Outcome:
    logger.error(
        f"Store failure during {error.operation}: {error.message}",
        extra={"error_code": error.code, "post_id": post_id},
    )
    return Outcome.failure(PostsApiError(
        "An unexpected error occurred", "INTERNAL_ERROR", error.kind,
        error.severity, ErrorContext(post_id=post_id, operation=error.operation),
    ))
