"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Cache TTL and timeout are bounded: TTL in whole seconds, timeout well under a request budget

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://soccer:soccer@db:5432/soccer_manager"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Redis (team cache + login attempts)
    redis_url: str = "redis://redis:6379/0"
    team_cache_ttl_seconds: int = Field(300, ge=1, le=86_400)
    team_cache_timeout_seconds: float = Field(0.25, gt=0, le=5)

    # Login limiter
    login_max_attempts: int = 5
    login_attempt_ttl_seconds: int = 900

    # New team economy
    initial_budget: int = Field(5_000_000, ge=0)
    initial_player_value: int = Field(1_000_000, ge=1)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
