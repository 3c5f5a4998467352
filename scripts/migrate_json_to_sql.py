"""One-off migration script: JSON store (books.json) -> SQL backend."""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Make the books_api package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from books_api.core.config import get_settings
from books_api.core.logging import configure_logging
from books_api.repositories import JSONBookStorage, SQLBookRepository, StorageError


def migrate(source: Path, database_url: str) -> int:
    """Replace the SQL collection with the JSON one; returns the number of books."""
    if not source.exists():
        raise SystemExit(f"File not found: {source}")
    books = JSONBookStorage(source).load()
    SQLBookRepository(database_url).save(books)
    return len(books)


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy the JSON books store into the SQL backend")
    ap.add_argument("--source", default=settings.books_file, help="JSON store path (default: BOOKS_FILE)")
    ap.add_argument("--database-url", default=settings.database_url, help="SQLAlchemy URL (default: DATABASE_URL)")
    args = ap.parse_args()

    configure_logging(settings.log_level)
    try:
        count = migrate(Path(args.source), args.database_url)
    except StorageError as exc:
        raise SystemExit(f"Migration failed: {exc}") from exc
    print(f"{count} books migrated to {args.database_url}.")


if __name__ == "__main__":
    main()
