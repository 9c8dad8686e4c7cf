"""Centralized, typed configuration using pydantic-settings.

Provides a single ``Settings`` class backed by ``.env`` file and environment
variables, and a cached ``get_settings()`` accessor.

IMPORTANT: This module imports nothing from the ``seller_agent`` package
except ``seller_agent.domain.types`` (which has no package imports) to
prevent circular imports.
"""

from __future__ import annotations

import sys
from functools import lru_cache

import structlog
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from seller_agent.domain.types import DecayMode

logger = structlog.get_logger()


class Settings(BaseSettings):
    """Application settings loaded from environment variables and ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- General ---------------------------------------------------------------
    production: bool = False
    seller_name: str = "seller"

    # -- Pricing ---------------------------------------------------------------
    tick_interval_seconds: float = 60.0
    decay_mode: DecayMode = DecayMode.LINEAR

    @field_validator("tick_interval_seconds")
    @classmethod
    def interval_must_be_positive(cls, v: float) -> float:
        """Ensure the tick interval is a positive number of seconds."""
        if v <= 0:
            raise ValueError("tick_interval_seconds must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    The ``@lru_cache`` decorator ensures environment variables are parsed
    exactly once.  Call ``get_settings.cache_clear()`` in tests to reset.

    Returns:
        The application ``Settings``.
    """
    try:
        return Settings()
    except ValidationError as exc:
        logger.error("settings_validation_failed", errors=exc.errors())
        sys.exit(1)
