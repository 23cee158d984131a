"""Store Factory — builds the configured PostStore at application startup.

Invariants:
    - Exactly one store per application instance (owned by create_app)
    - Unknown backends rejected by Settings validation before reaching here
"""

import logging

from posts_api.config import Settings
from posts_api.core.domain_types import StoreBackend
from posts_api.core.repository_protocols import PostStore
from posts_api.infrastructure.memory_store import InMemoryPostStore
from posts_api.infrastructure.sql_store import SqlPostStore

logger = logging.getLogger(__name__)


async def build_store(settings: Settings) -> PostStore:
    """Instantiate the store named by settings.store_backend."""
    if settings.store_backend == StoreBackend.SQL:
        logger.info("Using SQL post store")
        return await SqlPostStore.connect(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    logger.info("Using in-memory post store")
    return InMemoryPostStore()
