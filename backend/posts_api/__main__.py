"""Process entry point — `python -m posts_api` / `posts-api`.

Binds uvicorn to HOST:PORT from settings (PORT defaults to 8000).
"""

import logging

import uvicorn

from posts_api.config import get_settings
from posts_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Server is running on port {settings.port}")
    uvicorn.run(
        "posts_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
