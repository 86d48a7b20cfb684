"""
Application configuration using Pydantic Settings.
Loads from environment variables and .env file.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Equipment Tracker API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    # Database
    db_path: str = "equipment.db"
    database_url: Optional[str] = None
    db_echo: bool = False

    # CORS
    cors_origins: list[str] = ["*"]

    @property
    def async_database_url(self) -> str:
        """Build async database URL for SQLAlchemy."""
        if self.database_url:
            url = self.database_url
            if url.startswith("sqlite:///"):
                url = url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
            return url

        return f"sqlite+aiosqlite:///{Path(self.db_path).expanduser()}"

    @property
    def sync_database_url(self) -> str:
        """Build sync database URL for Alembic migrations."""
        if self.database_url:
            return self.database_url.replace("sqlite+aiosqlite:///", "sqlite:///", 1)

        return f"sqlite:///{Path(self.db_path).expanduser()}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
