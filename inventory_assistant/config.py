"""Application configuration using pydantic-settings pattern."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Inventory Assistant"
    app_version: str = "0.1.0"
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Database (Turso / local SQLite holding the inventory tables)
    turso_database_url: str | None = Field(default=None)
    turso_auth_token: str | None = Field(default=None)

    # Fuzzy resolution
    fuzzy_accept_threshold: int = Field(
        default=60,
        ge=0,
        le=100,
        description="Minimum confidence for an automatic filter correction",
    )
    fuzzy_similarity_floor: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Trigram similarity a candidate must exceed to be returned",
    )
    fuzzy_similarity_limit: int = Field(
        default=5,
        ge=1,
        description="Maximum candidates returned by the similarity search",
    )
    fuzzy_locale_confidence: int = Field(
        default=95,
        ge=0,
        le=100,
        description="Confidence assigned to name-variant matches",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
