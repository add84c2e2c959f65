"""Application settings loaded from the environment."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the engagement store."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = "sqlite+aiosqlite:///./social_media.db"
    database_echo: bool = False
    log_level: str = "INFO"
    top_posts_limit: int = Field(default=10, gt=0)
    # CSV export of the flat activity dataset; bundled sample rows are used when unset.
    seed_csv_path: Path | None = None


settings = Settings()
