"""Post ORM — persisted form of the Post entity.

Invariants:
    - id is an autoincrement integer primary key
    - sqlite_autoincrement: deleted ids are never reused on SQLite
    - title is at most 200 chars; body is non-nullable text
    - created_at / updated_at stored timezone-aware (UTC)

Design Decisions:
    - Named PostRecord: keeps the ORM row distinct from core.domain_types.Post
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from posts_api.core.domain_types import TITLE_MAX_LENGTH, Post, PostId
from posts_api.db.base import Base


class PostRecord(Base):
    """Row in the posts table."""
    __tablename__ = "posts"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH), nullable=False,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_domain(self) -> Post:
        return Post(
            id=PostId(self.id),
            title=self.title,
            body=self.body,
            created_at=_as_utc(self.created_at),
            updated_at=_as_utc(self.updated_at),
        )


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
