"""Storage interface shared by every books backend."""
from __future__ import annotations

from abc import ABC, abstractmethod

from books_api.domain.books import Book


class StorageError(Exception):
    """Raised when the store cannot be read, parsed or written."""


class BookRepository(ABC):
    """Full-collection persistence: no partial writes, no locking."""

    @abstractmethod
    def load(self) -> list[Book]:
        """Return the whole collection, initializing an empty store if absent."""

    @abstractmethod
    def save(self, books: list[Book]) -> None:
        """Overwrite the store with the complete collection."""
