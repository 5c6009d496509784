"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the service starts with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process
    - Only ENVIRONMENT=development exposes stack traces

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Settings passed explicitly into create_app(); nothing else reads the environment
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)

    # Largest accepted request body, in bytes
    max_body_bytes: int = Field(100 * 1024, ge=1)

    # "development" or "production"
    environment: str = "production"

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
