"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - The connection string comes from the environment (CONN_STR or DATABASE_URL), never code
    - get_settings() is cached (lru_cache) - single instance per process
    - Missing connection string fails settings validation: the server cannot start without a store

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database
    database_url: str = Field(
        validation_alias=AliasChoices("conn_str", "database_url"),
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """libpq-style URLs become asyncpg URLs."""
        if isinstance(v, str):
            for prefix in ("postgresql://", "postgres://"):
                if v.startswith(prefix):
                    return v.replace(prefix, "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Server
    host: str = "localhost"
    port: int = 6942

    # API
    cors_origins: list[str] = ["*"]
    frontend_dir: str = "frontend"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
