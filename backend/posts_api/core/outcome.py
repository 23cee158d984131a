"""Operation Outcome — explicit success/failure value returned by controller operations.

Invariants:
    - Exactly one of value / error is meaningful: ok == (error is None)
    - A failed Outcome always carries a PostsApiError with its ErrorKind
    - Outcomes are immutable once built

Design Decisions:
    - Returned, not raised: controller callers decide how to render a failure
      (the web adapter maps kind → status in api/error_handlers.py)
    - Carries the typed error rather than a bare kind: the REST envelope is
      built by PostsApiError.to_response() in exactly one place
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from posts_api.core.domain_types import ErrorKind
from posts_api.core.errors import PostsApiError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a controller operation."""
    value: T | None = None
    error: PostsApiError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error else None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: PostsApiError) -> "Outcome[T]":
        return cls(error=error)
