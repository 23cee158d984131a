"""Boundary Protocols — contract between the post controller and its store.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - Every store method is atomic within a single process
    - Stores hand out copies: mutating a returned Post never changes stored state
    - Absence is reported as None / False, never as an exception
    - Identifiers are assigned by the store and never reused

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations may do IO (SQL), the in-memory store
      simply never awaits anything slow
"""

from typing import Mapping, Protocol

from posts_api.core.domain_types import Post, PostId


class PostStore(Protocol):
    """Contract for post persistence, implemented in infrastructure/."""
    async def list_all(self) -> list[Post]: ...
    async def get(self, post_id: PostId) -> Post | None: ...
    async def create(self, fields: Mapping[str, str]) -> Post: ...
    async def update(
        self, post_id: PostId, changes: Mapping[str, str],
    ) -> Post | None: ...
    async def delete(self, post_id: PostId) -> bool: ...
    async def health_check(self) -> bool: ...
    async def close(self) -> None: ...
