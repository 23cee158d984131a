"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the service starts with no environment at all
    - get_settings() is cached (lru_cache): single instance per process
    - PORT defaults to 8000 when unset

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - static_dir defaults to the public/ folder shipped inside the package
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from posts_api.core.domain_types import StoreBackend

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent / "public"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8000, ge=1, le=65535)

    # Store
    store_backend: StoreBackend = StoreBackend.MEMORY
    database_url: str = "sqlite+aiosqlite:///./posts.db"
    database_pool_size: int = 5
    database_max_overflow: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    # Static files
    static_dir: Path = DEFAULT_STATIC_DIR

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
