"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - ORM rows never leave infrastructure/: stores convert them to core Post

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all
"""

from posts_api.models.post import PostRecord  # noqa: F401
