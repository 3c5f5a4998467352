"""Books collection stored in a SQL table through SQLAlchemy."""
from __future__ import annotations

from pydantic import ValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from books_api.db.models import BookRow
from books_api.db.session import Base, get_engine, get_session
from books_api.domain.books import Book
from books_api.repositories.base import BookRepository, StorageError


class SQLBookRepository(BookRepository):
    """Keeps the collection as rows ordered by insertion position."""

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url
        self._schema_ready = False

    def _ensure_schema(self) -> None:
        if self._schema_ready:
            return
        Base.metadata.create_all(bind=get_engine(self.database_url))
        self._schema_ready = True

    def load(self) -> list[Book]:
        try:
            self._ensure_schema()
            with get_session(self.database_url) as session:
                rows = session.execute(select(BookRow).order_by(BookRow.position)).scalars().all()
                return [Book.model_validate(row.record) for row in rows]
        except (SQLAlchemyError, ValidationError) as exc:
            raise StorageError(f"Could not read books table: {exc}") from exc

    def save(self, books: list[Book]) -> None:
        try:
            self._ensure_schema()
            with get_session(self.database_url) as session:
                session.execute(delete(BookRow))
                session.add_all(
                    BookRow(position=position, id=book.id, record=book.to_record())
                    for position, book in enumerate(books)
                )
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not write books table: {exc}") from exc
