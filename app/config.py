"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets and endpoints come from environment variables / .env (never hardcoded)
    - get_settings() is cached (lru_cache): single immutable instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from app.infrastructure.firebase_verifier import GOOGLE_JWKS_URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True,
    )

    # Database
    database_url: str = "postgresql+asyncpg://imago:imago@db:5432/imago"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Identity provider (Firebase Authentication)
    firebase_project_id: str = "imago-local"
    firebase_jwks_url: str = GOOGLE_JWKS_URL
    firebase_jwks_ttl_seconds: int = 3600
    token_clock_skew_seconds: int = 60

    # Usecase tuning
    identity_resolve_max_attempts: int = 3
    request_timeout_seconds: float = 15.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
