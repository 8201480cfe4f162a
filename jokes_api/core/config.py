"""
Configuration helpers for the joke API.

Settings are read from environment variables once and cached so that routers
and services never touch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_JOKES_FILE = Path(__file__).resolve().parents[1] / "data" / "jokes.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    jokes_file: Path
    host: str
    port: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    jokes_file = (os.getenv("JOKES_FILE") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        jokes_file=Path(jokes_file) if jokes_file else DEFAULT_JOKES_FILE,
        host=os.getenv("JOKES_HOST", "127.0.0.1"),
        port=_int(os.getenv("JOKES_PORT", "8000"), 8000),
        log_level=(os.getenv("LOG_LEVEL") or "info").lower(),
    )
