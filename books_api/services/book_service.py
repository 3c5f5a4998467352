"""Book use cases: list, filter, create, update and delete over the store."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from books_api.domain.books import (
    Book,
    BookCreate,
    BookUpdate,
    available_books,
    find_book_index,
    next_book_id,
    parse_book_id,
)
from books_api.repositories.base import BookRepository

logger = logging.getLogger(__name__)


class BookError(Exception):
    """Base exception for book workflows."""


class InvalidBookError(BookError):
    """Raised when a request body does not satisfy the book schema."""


class InvalidBookIdError(BookError):
    """Raised when a path id is not an integer."""


class BookNotFoundError(BookError):
    """Raised when no book carries the requested id."""


class BookService:
    """Each call loads the whole collection and, when mutating, saves it back.

    Storage failures surface as StorageError from the repository.
    """

    def __init__(self, repository: BookRepository) -> None:
        self.repository = repository

    def list_books(self) -> list[Book]:
        return self.repository.load()

    def list_available(self) -> list[Book]:
        return available_books(self.repository.load())

    def create_book(self, payload: Any) -> Book:
        try:
            data = BookCreate.model_validate(payload)
        except ValidationError as exc:
            raise InvalidBookError("Title, author, and available (boolean) are required") from exc
        books = self.repository.load()
        book = Book(id=next_book_id(books), **data.model_dump())
        books.append(book)
        self.repository.save(books)
        logger.info("Created book %s", book.id)
        return book

    def update_book(self, raw_id: str, payload: Any) -> Book:
        book_id = self._parse_id(raw_id)
        try:
            data = BookUpdate.model_validate(payload if payload is not None else {})
        except ValidationError as exc:
            raise InvalidBookError("Invalid book data") from exc
        books = self.repository.load()
        index = find_book_index(books, book_id)
        if index is None:
            raise BookNotFoundError(f"Book {book_id} not found")
        updated = books[index].model_copy(update=data.changes())
        books[index] = updated
        self.repository.save(books)
        logger.info("Updated book %s (%s)", book_id, ", ".join(sorted(data.changes())) or "no fields")
        return updated

    def delete_book(self, raw_id: str) -> Book:
        book_id = self._parse_id(raw_id)
        books = self.repository.load()
        index = find_book_index(books, book_id)
        if index is None:
            raise BookNotFoundError(f"Book {book_id} not found")
        removed = books.pop(index)
        self.repository.save(books)
        logger.info("Deleted book %s", book_id)
        return removed

    @staticmethod
    def _parse_id(raw_id: str) -> int:
        book_id = parse_book_id(raw_id)
        if book_id is None:
            raise InvalidBookIdError("Invalid book ID")
        return book_id
