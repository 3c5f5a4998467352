"""
JSON file persistence adapter.

The store is a single file holding a JSON array of book objects. Every load
reads the whole file and every save rewrites it in full.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging

from pydantic import ValidationError

from books_api.domain.books import Book
from books_api.repositories.base import BookRepository, StorageError

logger = logging.getLogger(__name__)


class JSONBookStorage(BookRepository):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[Book]:
        if not self.path.exists():
            logger.info("Store %s not found, creating an empty one", self.path)
            self._write("[]")
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Could not read {self.path}: {exc}") from exc
        if not isinstance(data, list):
            raise StorageError(f"{self.path} does not hold a JSON array")
        try:
            return [Book.model_validate(item) for item in data]
        except ValidationError as exc:
            raise StorageError(f"Malformed book record in {self.path}: {exc}") from exc

    def save(self, books: list[Book]) -> None:
        payload = [book.to_record() for book in books]
        self._write(json.dumps(payload, ensure_ascii=False, indent=2))

    def _write(self, text: str) -> None:
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not write {self.path}: {exc}") from exc
