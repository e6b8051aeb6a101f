"""
Configuration Management

Loads environment variables (and an optional .env file) into a cached
settings object. Settings only affect logging and the HTTP/PDF surfaces;
chart values never depend on them.
"""

import logging
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # ─── App ──────────────────────────────
    APP_NAME: str = "Kundli Chart API"
    APP_VERSION: str = "1.0.0"
    CORS_ORIGINS: List[str] = ["*"]

    # ─── Logging ──────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ─── Charts ───────────────────────────
    WARN_UNMODELED_DELTA_T: bool = True

    # ─── PDF ──────────────────────────────
    PDF_AUTHOR: str = "Kundli Chart Engine"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler. Called by entry points, never on import."""
    settings = get_settings()
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
    )
