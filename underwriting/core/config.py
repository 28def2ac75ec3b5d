# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Pricing and qualification policy values are not settings: they live in rate
sheets (see services/rate_sheet.py) and are passed explicitly to the engines.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "underwriting-core"
    DEBUG: bool = False
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level applied at startup (DEBUG, INFO, WARNING, ...).",
    )

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000"]

    # -- Pricing --
    RATE_SHEET_DIR: Path = Field(
        default=_PROJECT_ROOT / "config" / "rate_sheets",
        description="Directory holding per-market rate sheet YAML files.",
    )
    RATE_SHEET_MARKET: str = Field(
        default="default",
        description="Rate sheet used when a request does not name a market.",
    )


settings = Settings()
