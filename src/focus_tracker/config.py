"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from focus_tracker.app_logging import DEFAULT_LOG_FORMAT

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path(".")
    users_file: str = "users.txt"
    timezone: str | None = None
    tick_seconds: float = 60.0
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FOCUS_TRACKER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def users_path(self) -> Path:
        """Return the credential file location."""
        return self.data_dir / self.users_file
