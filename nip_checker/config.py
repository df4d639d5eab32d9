"""
Configuration

Settings are read from the environment (and a local .env file, if present).
"""

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime, timezone
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://wl-api.mf.gov.pl"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "NIP-Checker-MCP/1.0"
DEFAULT_PORT = 8000

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {raw!r}, using {default}")
        return default


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    load_dotenv()
    return Settings(
        api_url=os.getenv("WHITELIST_API_URL", DEFAULT_API_URL).rstrip("/"),
        timeout=_env_number("WHITELIST_TIMEOUT", DEFAULT_TIMEOUT, float),
        user_agent=os.getenv("WHITELIST_USER_AGENT", DEFAULT_USER_AGENT),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_env_number("PORT", DEFAULT_PORT, int),
    )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once on first use."""
    return load_settings()


def configure_logging(level: str = None) -> None:
    # stderr only: stdout carries the stdio MCP transport
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
    )


def utc_today() -> date:
    """Default clock for the query date."""
    return datetime.now(timezone.utc).date()
