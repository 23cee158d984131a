"""Post Rules — pure payload validation and field merging for create/update.

Invariants:
    - check_* functions are PURE: return an error descriptor or None, never raise
    - Only MERGEABLE_FIELDS ever reach the store; other keys are ignored
    - Stripping only decides blankness; values are persisted exactly as sent
    - Ids outside 1..MAX_POST_ID are never assigned, so they are never found
    - merge_post returns a new Post; the input Post is never mutated

Design Decisions:
    - Errors returned, not raised: the controller turns them into Outcomes
      without try/except around pure logic
    - First failing field wins: one clear message beats a partial list
"""

from datetime import datetime
from typing import Any, Mapping

from posts_api.core.domain_types import (
    MAX_POST_ID, MERGEABLE_FIELDS, REQUIRED_FIELDS, TITLE_MAX_LENGTH, Post,
    utc_now,
)
from posts_api.core.errors import PayloadValidationError


def check_create_payload(payload: Any) -> PayloadValidationError | None:
    """Create requires every REQUIRED_FIELDS entry as non-blank text."""
    if not isinstance(payload, Mapping):
        return PayloadValidationError("Payload must be a JSON object")
    for name in REQUIRED_FIELDS:
        if payload.get(name) is None:
            return PayloadValidationError(f"{name} is required", field=name)
        error = _check_text_field(name, payload[name])
        if error:
            return error
    return None


def check_update_payload(payload: Any) -> PayloadValidationError | None:
    """Update requires at least one mergeable field; supplied ones must be valid."""
    if not isinstance(payload, Mapping):
        return PayloadValidationError("Payload must be a JSON object")
    supplied = [
        name for name in MERGEABLE_FIELDS if payload.get(name) is not None
    ]
    if not supplied:
        return PayloadValidationError(
            f"At least one of {', '.join(MERGEABLE_FIELDS)} is required",
        )
    for name in supplied:
        error = _check_text_field(name, payload[name])
        if error:
            return error
    return None


def extract_fields(payload: Mapping) -> dict[str, str]:
    """Keep only mergeable, non-null fields, unmodified. Assumes a checked payload."""
    return {
        name: payload[name]
        for name in MERGEABLE_FIELDS
        if payload.get(name) is not None
    }


def id_in_range(post_id: int) -> bool:
    return 1 <= post_id <= MAX_POST_ID


def merge_post(
    post: Post, changes: Mapping[str, str], now: datetime | None = None,
) -> Post:
    """Apply changes onto a copy of post and refresh updated_at."""
    merged = post.copy()
    for name, value in changes.items():
        if name in MERGEABLE_FIELDS:
            setattr(merged, name, value)
    merged.updated_at = now or utc_now()
    return merged


def _check_text_field(name: str, value: Any) -> PayloadValidationError | None:
    if not isinstance(value, str):
        return PayloadValidationError(f"{name} must be a string", field=name)
    stripped = value.strip()
    if not stripped:
        return PayloadValidationError(
            f"{name} cannot be empty or whitespace", field=name,
        )
    if name == "title" and len(value) > TITLE_MAX_LENGTH:
        return PayloadValidationError(
            f"title must be at most {TITLE_MAX_LENGTH} characters", field=name,
        )
    return None
