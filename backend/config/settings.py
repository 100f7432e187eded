"""
Runtime Configuration

Reads service configuration from environment variables once at import time.
Tests call load_settings() directly with a patched environment.
"""
import os
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = ('true', '1', 'yes')


def _env_bool(name: str, default: bool) -> bool:
    """Parse a boolean environment variable (true/1/yes, case-insensitive)."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}={raw!r}, using {default}")
        return default


@dataclass(frozen=True)
class Settings:
    """Service settings resolved from the environment."""

    database_url: str = 'sqlite:///./users.db'
    empty_list_is_error: bool = True
    log_level: str = 'INFO'
    log_dir: Optional[str] = None
    host: str = '0.0.0.0'
    port: int = 8080
    sql_echo: bool = False


def load_settings() -> Settings:
    """
    Build a Settings instance from USER_SERVICE_* environment variables.

    Returns:
        Settings with defaults applied for anything unset
    """
    defaults = Settings()
    return Settings(
        database_url=os.environ.get('USER_SERVICE_DATABASE_URL', defaults.database_url),
        empty_list_is_error=_env_bool('USER_SERVICE_EMPTY_LIST_IS_ERROR', defaults.empty_list_is_error),
        log_level=os.environ.get('USER_SERVICE_LOG_LEVEL', defaults.log_level).upper(),
        log_dir=os.environ.get('USER_SERVICE_LOG_DIR') or None,
        host=os.environ.get('USER_SERVICE_HOST', defaults.host),
        port=_env_int('USER_SERVICE_PORT', defaults.port),
        sql_echo=_env_bool('USER_SERVICE_SQL_ECHO', defaults.sql_echo),
    )


settings = load_settings()
