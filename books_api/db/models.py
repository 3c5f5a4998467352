"""SQLAlchemy model mirroring the JSON store layout."""
from __future__ import annotations

from sqlalchemy import JSON, Column, Integer

from .session import Base


class BookRow(Base):
    __tablename__ = "books"

    # insertion order of the collection; book ids are not constrained here
    position = Column(Integer, primary_key=True, autoincrement=False)
    id = Column(Integer, nullable=False, index=True)
    # the record as it appears in the JSON store, unknown keys included
    record = Column(JSON, nullable=False)
