"""Configuration – reads collext settings from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_WAIT_INTERVAL = 0.1  # seconds
DEFAULT_WAIT_MAX = 10.0  # seconds
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """Runtime settings; populate ``os.environ`` (e.g. via ``load_dotenv()``) first."""

    wait_interval: float = DEFAULT_WAIT_INTERVAL
    wait_max: float = DEFAULT_WAIT_MAX
    log_level: str = DEFAULT_LOG_LEVEL


def _positive_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", name, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", name, raw)
        return default
    return value


def _log_level(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        logger.warning("Ignoring %s=%r: unknown log level", name, raw)
        return default
    return raw


def get_settings() -> Settings:
    """Build :class:`Settings` from ``COLLEXT_*`` environment variables."""
    return Settings(
        wait_interval=_positive_float("COLLEXT_WAIT_INTERVAL", DEFAULT_WAIT_INTERVAL),
        wait_max=_positive_float("COLLEXT_WAIT_MAX", DEFAULT_WAIT_MAX),
        log_level=_log_level("COLLEXT_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
