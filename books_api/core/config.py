"""
Configuration helpers for the books service.

Settings are read once from the environment and passed explicitly to the
application factory, so routers/services never look at os.environ.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

STORAGE_BACKENDS = ("json", "sql")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    host: str = "0.0.0.0"
    port: int = 3000
    books_file: str = "books.json"
    storage_backend: str = "json"
    database_url: str = "sqlite:///books.db"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        host=os.getenv("HOST") or "0.0.0.0",
        port=_int(os.getenv("PORT"), 3000),
        books_file=os.getenv("BOOKS_FILE") or "books.json",
        storage_backend=(os.getenv("STORAGE_BACKEND") or "json").strip().lower(),
        database_url=os.getenv("DATABASE_URL") or "sqlite:///books.db",
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
