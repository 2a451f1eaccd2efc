"""Runtime settings.

Read from ``IMS_*`` environment variables (or a local ``.env`` file).
Nothing here is persisted; the settings only tune one run of the console.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field("WARNING", alias="IMS_LOG_LEVEL")
    low_stock_threshold: int = Field(5, ge=0, alias="IMS_LOW_STOCK_THRESHOLD")
    max_input_attempts: int = Field(3, ge=1, alias="IMS_MAX_INPUT_ATTEMPTS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached Settings instance so the environment is parsed once per run."""
    return Settings()


__all__ = ["Settings", "get_settings"]
