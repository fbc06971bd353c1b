"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEVELOPMENT_ENVIRONMENTS = frozenset({"development", "testing"})


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./lostfound.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    jwt_issuer: str = Field(default="LostAndFoundApp", min_length=1)
    jwt_audience: str = Field(default="LostAndFoundAppAudience", min_length=1)
    environment: str = Field(
        default="development",
        description="Deployment environment name (development, testing, production)",
    )
    allowed_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )
    log_level: str = Field(default="INFO")

    def allows_test_tokens(self) -> bool:
        """Return ``True`` when the development token endpoint may be used."""

        return self.environment.strip().lower() in DEVELOPMENT_ENVIRONMENTS


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
