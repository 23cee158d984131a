"""Domain Types — the Post entity and the enums shared across layers.

Invariants:
    - PostId wraps int: identifiers are assigned by the store, never by callers
    - Post is the single managed resource; timestamps are always UTC
    - All error kinds encoded as an Enum, no raw string matching

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Post as a plain dataclass: stores hand out copies, never live references
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", int)


# ─── Limits ──────────────────────────────────────────────────────

TITLE_MAX_LENGTH: int = 200
# 32-bit signed INTEGER primary key on every SQL backend
MAX_POST_ID: int = 2**31 - 1
MERGEABLE_FIELDS: tuple[str, ...] = ("title", "body")
REQUIRED_FIELDS: tuple[str, ...] = ("title", "body")


# ─── Enums ───────────────────────────────────────────────────────

class ErrorKind(str, Enum):
    """Failure kinds a controller operation can report."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNEXPECTED = "unexpected"


class StoreBackend(str, Enum):
    """Available Post Store implementations."""
    MEMORY = "memory"
    SQL = "sql"


# ─── Entity ──────────────────────────────────────────────────────

def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Post:
    """A stored post. id is assigned on creation and never reused."""
    id: PostId
    title: str
    body: str
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def copy(self) -> "Post":
        return replace(self)

