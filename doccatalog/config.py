"""
Configuration for the document catalog.

Settings are read from ``DOCCATALOG_*`` environment variables (or a local
``.env`` file) through pydantic's ``BaseSettings``. Library code reads the
shared instance returned by ``get_settings()``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, NonNegativeFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Library configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOCCATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: str = "INFO"

    # Borrowing
    LATE_FEE_PER_DAY: NonNegativeFloat = 0.50

    # Presentation
    PREMIUM_ANNOTATION: str = "[Premium feature!]"

    # Indexer
    INDEXER_TIMEOUT_SECONDS: Optional[float] = Field(default=None, gt=0)
    INDEXER_THREAD_NAME: str = "doccatalog-indexer"

    @field_validator("LOG_LEVEL", mode="before")
    def _normalize_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Set the level of the ``doccatalog`` logger hierarchy.

    Handlers are left to the host program; only the level is applied here.
    ``level`` overrides ``LOG_LEVEL`` from the settings.
    """
    logger = logging.getLogger("doccatalog")
    logger.setLevel(level.upper() if level else get_settings().LOG_LEVEL)
    return logger
