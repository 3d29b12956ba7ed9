"""Application settings, read from environment variables."""

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_DATABASE_URL = "sqlite:///./simple_chess.db"
DEFAULT_LOG_LEVEL = "INFO"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Central configuration for the database, logging and the HTTP server."""

    database_url: str = field(
        default_factory=lambda: os.getenv(
            "SIMPLE_CHESS_DATABASE_URL", DEFAULT_DATABASE_URL
        )
    )
    db_echo: bool = field(default_factory=lambda: _env_flag("SIMPLE_CHESS_DB_ECHO"))
    log_level: str = field(
        default_factory=lambda: os.getenv(
            "SIMPLE_CHESS_LOG_LEVEL", DEFAULT_LOG_LEVEL
        ).upper()
    )
    host: str = field(
        default_factory=lambda: os.getenv("SIMPLE_CHESS_HOST", "127.0.0.1")
    )
    port: int = field(
        default_factory=lambda: int(os.getenv("SIMPLE_CHESS_PORT", "8000"))
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings are read once per process. Call `get_settings.cache_clear()` to re-read the environment."""
    return Settings()
