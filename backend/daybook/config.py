"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All settings overridable by environment variables or .env
    - get_settings() is cached (lru_cache): single instance per process
    - password_iterations never drops below the PBKDF2 floor

Design Decisions:
    - SQLite by default: the journal is a local, single-user store;
      PostgreSQL URLs are accepted and routed through asyncpg
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from daybook.core.credentials import MIN_ITERATIONS, DEFAULT_SALT_BYTES


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./daybook.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 10
    create_schema_on_startup: bool = True
    seed_on_startup: bool = True

    # Credentials
    password_iterations: int = MIN_ITERATIONS
    salt_bytes: int = DEFAULT_SALT_BYTES
    session_token_bytes: int = 32

    @field_validator("password_iterations")
    @classmethod
    def enforce_iteration_floor(cls, v: int) -> int:
        if v < MIN_ITERATIONS:
            raise ValueError(f"password_iterations must be >= {MIN_ITERATIONS}")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
