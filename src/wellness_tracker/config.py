"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_dir: Path = Path("~/.wellness_tracker")
    storage_key: str = "myhealth-data"
    timezone: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="WELLNESS_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_timezone(raw: str | None) -> str | None:
    """Normalize a timezone setting; blank or "local" means system local."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned.lower() in {"", "local"}:
        return None
    return cleaned
