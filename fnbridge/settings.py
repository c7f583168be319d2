"""
fnbridge.settings - Centralized Configuration

Single source of truth for fnbridge configuration.
Loads from .env files and environment variables using pydantic-settings.

Usage:
    >>> from fnbridge.settings import get_settings
    >>> settings = get_settings()
    >>> settings.warn_on_duplicate_settlement
    True
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FnbridgeSettings(BaseSettings):
    """fnbridge configuration loaded from .env / environment variables.

    All FNBRIDGE_* prefixed env vars are loaded automatically.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FNBRIDGE_",
        extra="ignore",
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"

    # -- Adapter ---------------------------------------------------------------
    # Legacy operations that call their handler more than once are tolerated
    # (first call wins). When enabled, the ignored calls are logged at WARNING
    # instead of DEBUG.
    warn_on_duplicate_settlement: bool = True

    # -- Validators ------------------------------------------------------------

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


# ---------------------------------------------------------------------------
# Singleton accessor
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_settings() -> FnbridgeSettings:
    """Return the cached FnbridgeSettings singleton."""
    return FnbridgeSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
