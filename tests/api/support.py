# This file provides shared helpers for API endpoint tests.
# Tests either exercise the real SQLite-backed service or swap in a fake through dependency overrides.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from bookshelf.api.app import app
from bookshelf.api.dependencies import get_book_service
from bookshelf.api.error_handlers import StorageError
from bookshelf.api.schemas.book_schemas import Book

CORS_HEADERS = {
    "access-control-allow-origin": "*",
    "content-type": "application/json",
    "access-control-allow-methods": "POST, GET, OPTIONS, PUT, DELETE",
    "access-control-allow-headers": (
        "Accept, Content-Type, Content-Length, Accept-Encoding, Origin, X-Requested-With"
    ),
}


class FailingBookService:
    """Fake service whose every storage call fails."""

    def __init__(self, error: Exception | None = None) -> None:
        self._error = error or StorageError(message="database unavailable")

    def list_books(self) -> list[Book]:
        raise self._error

    def get_book(self, book_id: int) -> Book | None:
        raise self._error

    def create_book(self, book: Book) -> int:
        raise self._error

    def delete_book(self, book_id: int) -> None:
        raise self._error


def assert_cors_headers(response: Any) -> None:
    for name, value in CORS_HEADERS.items():
        assert response.headers.get(name) == value, name


@contextmanager
def api_test_client(
    *,
    book_service: Any | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient, optionally with the book service swapped out."""

    if book_service is not None:
        app.dependency_overrides[get_book_service] = lambda: book_service

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
