"""Post Schemas — Pydantic models for the JSON the posts endpoints return.

Invariants:
    - PostResponse mirrors core Post exactly (id, title, body, timestamps)
    - Timestamps serialize as ISO-8601 strings

Design Decisions:
    - from_attributes: built straight from the core Post dataclass
    - No request schemas: payload validation lives in core/post_rules.py
      so the controller owns it regardless of the transport
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from posts_api.core.domain_types import Post


class PostResponse(BaseModel):
    """Public-facing post."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    body: str
    created_at: datetime
    updated_at: datetime


class DeleteResponse(BaseModel):
    """Confirmation returned by DELETE /api/posts/{id}."""
    id: int
    deleted: bool


def serialize_post(post: Post) -> dict:
    return PostResponse.model_validate(post).model_dump(mode="json")


def serialize_posts(posts: list[Post]) -> list[dict]:
    return [serialize_post(post) for post in posts]


def serialize_deletion(confirmation: dict) -> dict:
    return DeleteResponse.model_validate(confirmation).model_dump(mode="json")
