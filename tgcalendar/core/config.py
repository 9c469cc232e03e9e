# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/core/config.py
"""
Centralised, type-safe application settings.

Reads variables from `.env.*` or the real environment and exposes them via the
`get_settings()` singleton.  Compatible with Pydantic-Settings >=2.1.
"""
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tgcalendar.core.logger import configure_logger

logger = configure_logger(prefix="CFG", color="yellow")

# --------------------------------------------------------------------------- #
# .env discovery                                                              #
# --------------------------------------------------------------------------- #
project_root = Path(__file__).resolve().parents[2]
env_dev = project_root / ".env.dev"
env_prod = project_root / ".env.prod"
env_file = env_dev if env_dev.exists() else env_prod if env_prod.exists() else project_root / ".env"

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def load_env() -> Path:
    """Load the discovered env file into ``os.environ`` (existing vars win)."""
    load_dotenv(env_file)
    logger.debug(f"Loaded environment variables from {env_file}")
    return env_file


# --------------------------------------------------------------------------- #
# Settings definition                                                         #
# --------------------------------------------------------------------------- #
class Settings(BaseSettings):
    """Project-wide strongly-typed config."""

    model_config = SettingsConfigDict(case_sensitive=True)

    # ---- Core ------------------------------------------------------------- #
    env: Literal["dev", "prod"] = Field("dev", alias="ENV")
    debug: bool = Field(False, alias="DEBUG")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # ---- Bot -------------------------------------------------------------- #
    bot_token: str = Field(..., alias="BOT_TOKEN")

    # ---- Calendar --------------------------------------------------------- #
    calendar_locale: Optional[str] = Field(None, alias="CALENDAR_LOCALE")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got: {v}")
        return level

    @field_validator("calendar_locale", mode="before")
    @classmethod
    def _empty_locale_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not str(v).strip():
            return None
        return str(v).strip()


# --------------------------------------------------------------------------- #
# Singleton accessor                                                         #
# --------------------------------------------------------------------------- #
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance."""
    load_env()
    try:
        settings = Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        logger.error(f"Invalid env config: {exc}")
        raise

    logger.info(
        f"env={settings.env} debug={settings.debug} "
        f"log_level={settings.log_level} locale={settings.calendar_locale or 'default'}"
    )
    return settings
