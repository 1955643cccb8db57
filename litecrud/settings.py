"""Environment-driven settings for litecrud.

Every field can be overridden with a ``LITECRUD_``-prefixed environment
variable, e.g. ``LITECRUD_FILENAME=app.db`` or ``LITECRUD_LOG_LEVEL=DEBUG``.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide defaults used when callers omit explicit configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LITECRUD_",
        case_sensitive=False,
    )

    driver: str = Field(default="sqlite", description="Default driver name")
    filename: str | None = Field(
        default=None, description="Default store location for connect()"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(
        default="console", description="Log format"
    )


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
