"""
Runtime settings.

Values come from the process environment. The first call to get_settings()
loads a .env file from the working directory, if there is one; variables
already set in the environment win.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Parser settings."""

    log_level: str = "WARNING"
    # epodoc and slug country codes pass through as written unless this is set
    uppercase_countries: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("PATCITE_LOG_LEVEL", "WARNING").upper(),
            uppercase_countries=os.getenv("PATCITE_UPPERCASE_COUNTRIES", "").strip().lower() in _TRUTHY,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    load_dotenv(find_dotenv(usecwd=True))
    return Settings.from_env()
