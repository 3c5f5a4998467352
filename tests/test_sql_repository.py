"""
Smoke tests for the SQLBookRepository against a temporary SQLite database.
"""
from __future__ import annotations

import pytest
from sqlalchemy import text

from books_api.db import session as db_session
from books_api.domain.books import Book
from books_api.repositories import SQLBookRepository


@pytest.fixture()
def db_url(tmp_path):
    """Temporary SQLite file; engines are disposed so the file is not left locked."""
    url = f"sqlite:///{tmp_path / 'books.db'}"
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    yield url

    try:
        db_session.get_engine(url).dispose()
    except Exception:
        pass
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


def test_empty_database_loads_empty_collection(db_url):
    assert SQLBookRepository(db_url).load() == []


def test_save_replaces_whole_collection_and_keeps_order(db_url):
    repo = SQLBookRepository(db_url)
    repo.save([
        Book(id=1, title="Dune", author="Herbert", available=True),
        Book(id=2, title="Solaris", author="Lem", available=False),
    ])
    repo.save([
        Book(id=7, title="Ubik", author="Dick", available=True),
        Book(id=2, title="Solaris", author="Lem", available=True),
    ])

    books = SQLBookRepository(db_url).load()
    assert [b.id for b in books] == [7, 2]
    assert books[1].available is True


def test_duplicate_ids_from_hand_edited_store_survive(db_url):
    repo = SQLBookRepository(db_url)
    repo.save([
        Book(id=1, title="A", author="X", available=True),
        Book(id=1, title="B", author="Y", available=False),
    ])

    assert [b.title for b in repo.load()] == ["A", "B"]


def test_schema_is_created_on_first_access(db_url):
    SQLBookRepository(db_url).load()

    with db_session.get_engine(db_url).connect() as conn:
        count = conn.execute(text("SELECT COUNT(*) FROM books")).scalar_one()
    assert count == 0


def test_create_tables_utility(db_url):
    from books_api.db.create_tables import create_all

    create_all(db_url)
    with db_session.get_engine(db_url).connect() as conn:
        assert conn.execute(text("SELECT COUNT(*) FROM books")).scalar_one() == 0


def test_hand_edited_record_round_trips_unchanged(db_url):
    record = {"id": 4, "title": "A", "author": None, "available": "true", "year": 1965}
    repo = SQLBookRepository(db_url)
    repo.save([Book.model_validate(record)])

    assert [b.to_record() for b in repo.load()] == [record]
