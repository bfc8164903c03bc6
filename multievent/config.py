"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from multievent.models.enumerations import UnitSystem


class Settings(BaseSettings):
    """Application settings, read from the environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Multi-Event Scoring API"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"
    CORS_ALLOW_ORIGINS: list[str] = Field(default=["*"])

    # Scoring
    DEFAULT_UNIT_SYSTEM: UnitSystem = UnitSystem.METRIC

    # Single implicit user until there is an auth model
    DEFAULT_USER_ID: int = Field(default=1, ge=1)

    # Redis (optional, caches static configuration responses)
    CACHE_ENABLED: bool = True
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_CONNECT_TIMEOUT: float = Field(default=2.0, gt=0, le=30)
    CACHE_TTL_EVENTS: int = Field(default=86400, ge=1)  # 24 hours

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production is not running in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
