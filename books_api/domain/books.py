"""Domain types for book records and the request payloads that touch them."""
from __future__ import annotations

import re
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

# leading integer of a path segment: "12", " 12", "12abc" and "1.5" all carry one
_ID_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


class Book(BaseModel):
    """One record of the collection, as stored and as returned by the API.

    Only ``id`` is checked when a record is read back. The other fields and
    any unknown keys are kept exactly as found in the store, so a record is
    rewritten unchanged by later saves.
    """

    model_config = ConfigDict(extra="allow")

    id: StrictInt
    title: Any = None
    author: Any = None
    available: Any = None

    def to_record(self) -> dict[str, Any]:
        """Keys present in the stored record (or set by the server), nothing more."""
        record = self.model_dump(exclude_unset=True)
        record.update(self.model_extra or {})
        return record


class BookCreate(BaseModel):
    """Body of POST /books. Every field is required."""

    title: StrictStr = Field(min_length=1)
    author: StrictStr = Field(min_length=1)
    available: StrictBool


class BookUpdate(BaseModel):
    """Body of PUT /books/{id}.

    Keys present in the payload are applied as given, null and falsy values
    included; absent keys leave the record alone.
    """

    title: Any = None
    author: Any = None
    available: Any = None

    def changes(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.model_fields_set}


def next_book_id(books: Iterable[Book]) -> int:
    """Return max(existing ids) + 1, or 1 for an empty collection."""
    return max((book.id for book in books), default=0) + 1


def available_books(books: Iterable[Book]) -> list[Book]:
    return [book for book in books if book.available is True]


def find_book_index(books: list[Book], book_id: int) -> int | None:
    for index, book in enumerate(books):
        if book.id == book_id:
            return index
    return None


def parse_book_id(value: str | None) -> int | None:
    """Read the leading integer of a path segment; None when there is none."""
    match = _ID_PREFIX.match(value or "")
    if not match:
        return None
    return int(match.group(1))
