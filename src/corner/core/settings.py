"""Centralized dashboard configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the working directory: .env, .env.local, .env.dev/.env.test/.env.prod

Every tunable of the dashboard lives here: the civil timezone, the annual
anchor, the data directory of the local store, the quote source and the tick
intervals of the render loops.
"""

from __future__ import annotations

import calendar
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_QUOTE_URL = "https://api.quotable.io/random"
DEFAULT_PLAYLIST_ID = "PLoTn6R_eiyqdKUJDcZzNFGvaPPOw3QshW"


class Settings(BaseSettings):
    """Typed dashboard configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `CORNER_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    timezone : str
        IANA name of the civil timezone every "now" is expressed in; maps from
        `CORNER_TIMEZONE`. The host timezone is never consulted.
    anchor_month, anchor_day : int
        Month/day of the recurring annual countdown (civil midnight).
    data_dir : Path
        Directory holding one JSON file per store key.
    """

    environment: EnvName = Field(default="dev", alias="CORNER_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")

    timezone: str = Field(default="Asia/Kolkata", alias="CORNER_TIMEZONE")
    tz_label: str = Field(default="IST", alias="CORNER_TZ_LABEL")

    anchor_month: int = Field(default=11, ge=1, le=12, alias="CORNER_ANCHOR_MONTH")
    anchor_day: int = Field(default=10, ge=1, le=31, alias="CORNER_ANCHOR_DAY")
    anchor_label: str = Field(default="Birthday", alias="CORNER_ANCHOR_LABEL")

    data_dir: Path = Field(default=Path(".corner"), alias="CORNER_DATA_DIR")

    quote_url: str = Field(default=DEFAULT_QUOTE_URL, alias="CORNER_QUOTE_URL")
    quote_timeout_seconds: float = Field(default=5.0, gt=0, alias="CORNER_QUOTE_TIMEOUT")

    clock_interval: float = Field(default=15.0, gt=0, alias="CORNER_CLOCK_INTERVAL")
    anchor_interval: float = Field(default=1.0, gt=0, alias="CORNER_ANCHOR_INTERVAL")
    countdown_interval: float = Field(default=30.0, gt=0, alias="CORNER_COUNTDOWN_INTERVAL")

    party_a_label: str = Field(default="Kunjus", alias="CORNER_PARTY_A_LABEL")
    party_b_label: str = Field(default="Me", alias="CORNER_PARTY_B_LABEL")

    default_playlist_id: str = Field(default=DEFAULT_PLAYLIST_ID, alias="CORNER_DEFAULT_PLAYLIST")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _check_anchor_date(self) -> Settings:
        """Reject month/day pairs that never occur (Feb 29 is allowed)."""
        last_day = calendar.monthrange(2000, self.anchor_month)[1]
        if self.anchor_day > last_day:
            raise ValueError(
                f"CORNER_ANCHOR_DAY={self.anchor_day} does not exist in month "
                f"{self.anchor_month} (max {last_day})"
            )
        return self

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    We keep this behind an LRU cache so tests can force a rebuild via
    `load_settings.cache_clear()` after mutating `os.environ`.
    """
    os.environ.setdefault("CORNER_ENV", "dev")
    return Settings()


# Export a ready-to-use singleton (import-time read of env / .env files).
settings: Settings = load_settings()


def get_logger(name: str = "corner") -> logging.Logger:
    """Return a process-global logger configured to the current log level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
