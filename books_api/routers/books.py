from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request

from books_api.repositories.base import StorageError
from books_api.services.book_service import (
    BookNotFoundError,
    BookService,
    InvalidBookError,
    InvalidBookIdError,
)

router = APIRouter(prefix="/books", tags=["books"])
logger = logging.getLogger(__name__)


def _get_book_service(request: Request) -> BookService:
    svc = getattr(getattr(request.app, "state", None), "book_service", None)
    if not svc:
        raise RuntimeError("BookService not configured")
    return svc


def _storage_failure(exc: StorageError, message: str) -> HTTPException:
    logger.error("%s: %s", message, exc, exc_info=exc)
    return HTTPException(500, message)


@router.get("")
def list_books(request: Request):
    svc = _get_book_service(request)
    try:
        return [book.to_record() for book in svc.list_books()]
    except StorageError as exc:
        raise _storage_failure(exc, "Failed to read books data")


@router.get("/available")
def list_available_books(request: Request):
    svc = _get_book_service(request)
    try:
        return [book.to_record() for book in svc.list_available()]
    except StorageError as exc:
        raise _storage_failure(exc, "Failed to read books data")


@router.post("", status_code=201)
def create_book(request: Request, payload: Any = Body(None)):
    svc = _get_book_service(request)
    try:
        return svc.create_book(payload).to_record()
    except InvalidBookError as exc:
        raise HTTPException(400, str(exc))
    except StorageError as exc:
        raise _storage_failure(exc, "Failed to create book")


@router.put("/{book_id}")
def update_book(book_id: str, request: Request, payload: Any = Body(None)):
    svc = _get_book_service(request)
    try:
        return svc.update_book(book_id, payload).to_record()
    except (InvalidBookIdError, InvalidBookError) as exc:
        raise HTTPException(400, str(exc))
    except BookNotFoundError:
        raise HTTPException(404, "Book not found")
    except StorageError as exc:
        raise _storage_failure(exc, "Failed to update book")


@router.delete("/{book_id}")
def delete_book(book_id: str, request: Request):
    svc = _get_book_service(request)
    try:
        removed = svc.delete_book(book_id)
    except InvalidBookIdError as exc:
        raise HTTPException(400, str(exc))
    except BookNotFoundError:
        raise HTTPException(404, "Book not found")
    except StorageError as exc:
        raise _storage_failure(exc, "Failed to delete book")
    return {"message": "Book deleted successfully", "book": removed.to_record()}
