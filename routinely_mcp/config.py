"""Application configuration using environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_data_file() -> Path:
    return Path.home() / ".routinely" / "state.json"


class Settings(BaseSettings):
    """Load configuration from ``ROUTINELY_*`` environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTINELY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Where tasks, history and streak are persisted
    data_file: Path = Field(default_factory=_default_data_file)

    log_level: str = Field(default="INFO")
    log_file: Path | None = Field(default=None)

    # Upper bound on how far back the streak walk looks
    streak_lookback_days: int = Field(default=365, ge=1)
    heatmap_days: int = Field(default=14, ge=1, le=90)
    default_category: str = Field(default="Work", min_length=1)


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
