"""
Persistence adapters.

These modules encapsulate how the books collection is stored/retrieved (a JSON
file by default, a SQL table optionally). Services depend on the
BookRepository interface rather than touching the file directly.
"""

from __future__ import annotations

from books_api.core.config import STORAGE_BACKENDS, Settings
from books_api.repositories.base import BookRepository, StorageError
from books_api.repositories.json_storage import JSONBookStorage
from books_api.repositories.sql_repository import SQLBookRepository


def build_repository(settings: Settings) -> BookRepository:
    """Pick the storage backend named by the settings."""
    if settings.storage_backend == "json":
        return JSONBookStorage(settings.books_file)
    if settings.storage_backend == "sql":
        return SQLBookRepository(settings.database_url)
    raise ValueError(
        f"Unknown storage backend {settings.storage_backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}"
    )


__all__ = [
    "BookRepository",
    "JSONBookStorage",
    "SQLBookRepository",
    "StorageError",
    "build_repository",
]
