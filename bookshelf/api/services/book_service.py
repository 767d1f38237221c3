# This file implements the storage accessor for the books table.
# It exists so routers can stay transport-focused while SQL and row mapping live in one layer.
# Each method issues exactly one parameterized statement; failures are logged here and re-raised as StorageError.
# Statement deadlines come from the DatabaseClient pool and driver timeouts.

from __future__ import annotations

import logging

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from bookshelf.api.api_config import ApiConfig
from bookshelf.api.db_access import DatabaseClient
from bookshelf.api.error_handlers import DuplicateBookError, StorageError
from bookshelf.api.schemas.book_schemas import Book

LOGGER = logging.getLogger("books")


class BookService:
    """Data retrieval and persistence for the books routes."""

    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        self.config = config
        self.db = db
        self.books_table = self.config.books_table_name

    def get_book(self, book_id: int) -> Book | None:
        """Return the book with `book_id`, or None when no row matches."""

        query = f"""
        SELECT id, title, author
        FROM {self.books_table}
        WHERE id = :book_id
        """
        try:
            row = self.db.fetch_one(query, {"book_id": book_id})
        except SQLAlchemyError as exc:
            LOGGER.error("Fetching book id=%s failed: %s", book_id, exc)
            raise StorageError(message=f"Could not fetch book {book_id}.") from exc

        if row is None:
            return None
        return self._book_from_row(row)

    def list_books(self) -> list[Book]:
        """Return every stored book in the order the table scan yields them."""

        query = f"""
        SELECT id, title, author
        FROM {self.books_table}
        """
        try:
            rows = self.db.fetch_all(query)
        except SQLAlchemyError as exc:
            LOGGER.error("Listing books failed: %s", exc)
            raise StorageError(message="Could not list books.") from exc

        return [self._book_from_row(row) for row in rows]

    def create_book(self, book: Book) -> int:
        """Insert `book` and return its id.

        The id is supplied by the caller, so it is returned as given rather than
        read back from the driver's last-insert-id.
        """

        query = f"""
        INSERT INTO {self.books_table} (id, title, author)
        VALUES (:id, :title, :author)
        """
        try:
            self.db.execute(query, {"id": book.id, "title": book.title, "author": book.author})
        except IntegrityError as exc:
            LOGGER.error("Inserting book id=%s rejected: %s", book.id, exc)
            raise DuplicateBookError(book_id=book.id) from exc
        except SQLAlchemyError as exc:
            LOGGER.error("Inserting book id=%s failed: %s", book.id, exc)
            raise StorageError(message=f"Could not insert book {book.id}.") from exc

        return book.id

    def delete_book(self, book_id: int) -> None:
        """Delete the book with `book_id`; deleting a missing id is not an error."""

        query = f"""
        DELETE FROM {self.books_table}
        WHERE id = :book_id
        """
        try:
            deleted = self.db.execute(query, {"book_id": book_id})
        except SQLAlchemyError as exc:
            LOGGER.error("Deleting book id=%s failed: %s", book_id, exc)
            raise StorageError(message=f"Could not delete book {book_id}.") from exc

        LOGGER.debug("Deleted %s row(s) for book id=%s", deleted, book_id)

    def _book_from_row(self, row: dict[str, object]) -> Book:
        try:
            return Book.model_validate(row)
        except ValidationError as exc:
            LOGGER.error("Row could not be mapped to a book: %s", exc)
            raise StorageError(message="Stored row is not a valid book.") from exc
