# feedcanon/core/config.py
from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from feedcanon.models.common import ParseMode


class Settings(BaseSettings):
    # ---- Parsing ----
    # Default strictness for a parse when the caller passes no ParseOptions.
    PARSE_MODE: ParseMode = ParseMode.COERCE

    # ---- Logging ----
    LOG_LEVEL: str = "INFO"
    SERVICE_NAME: str = "feedcanon"

    # ---- JSON Feed output ----
    JSON_FEED_VERSION: str = "https://jsonfeed.org/version/1.1"

    model_config = SettingsConfigDict(
        env_prefix="FEEDCANON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,   # tolerant of env var casing
        extra="ignore",         # ignore unrelated .env keys
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Reset the cached Settings (useful for tests)."""
    get_settings.cache_clear()
