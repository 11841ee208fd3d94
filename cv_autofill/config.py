"""Application configuration using pydantic-settings."""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: Environment = Environment.DEVELOPMENT
    debug: bool = True
    log_level: str = "INFO"

    # Form filling
    settle_interval_ms: int = Field(default=50, ge=0, le=2000)  # pause between DOM events
    banner_duration_ms: int = Field(default=5000, ge=0, le=60000)
    cv_locale: str = "pl"  # month names in the plain-text CV

    # Playwright Settings
    playwright_headless: bool = False  # the human reviews and submits
    playwright_slow_mo: int = Field(default=0, ge=0, le=1000)  # ms between actions
    browser_timeout: int = Field(default=30000, ge=5000, le=120000)  # ms

    # Host shell state (last profile, last options)
    data_dir: str = "~/.cv_autofill"

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.app_env == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.app_env == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience access
settings = get_settings()
