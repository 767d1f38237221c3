# This file defines the books endpoints: the collection path and the item path.
# The collection handlers list and create books; the item handlers fetch and delete one book by id.
# Item ids arrive as raw path text and are parsed here, so a non-integer id reads as "no such book".
# Storage failures propagate as APIError subclasses and are turned into statuses by the error handlers.

from __future__ import annotations

import re
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError

from bookshelf.api.dependencies import get_book_service
from bookshelf.api.error_handlers import APIError, book_not_found
from bookshelf.api.schemas.book_schemas import MAX_BOOK_ID, MIN_BOOK_ID, Book, BookCreatedResponse
from bookshelf.api.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["books"])
BookServiceDep = Annotated[BookService, Depends(get_book_service)]

_BOOK_ID_RE = re.compile(r"^[+-]?[0-9]+$")
_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def parse_book_id(raw_id: str) -> int:
    """Parse a path segment into a 64-bit book id; anything else is a missing book."""

    if not _BOOK_ID_RE.match(raw_id):
        raise book_not_found(raw_id)
    book_id = int(raw_id)
    if not MIN_BOOK_ID <= book_id <= MAX_BOOK_ID:
        raise book_not_found(raw_id)
    return book_id


async def read_book_body(request: Request) -> Book:
    """Decode the raw body as a Book; the request Content-Type is not consulted."""

    body = await request.body()
    try:
        return Book.model_validate_json(body)
    except ValidationError as exc:
        raise APIError(
            status_code=400,
            error_code="INVALID_BOOK_PAYLOAD",
            message=f"Request body is not a book: {exc.errors(include_url=False)}",
        ) from exc


BookBodyDep = Annotated[Book, Depends(read_book_body)]


@router.get("", response_model=list[Book])
def list_books(service: BookServiceDep) -> list[Book]:
    return service.list_books()


@router.post("", status_code=201, response_model=BookCreatedResponse)
def create_book(book: BookBodyDep, service: BookServiceDep) -> dict[str, int]:
    return {"bookid": service.create_book(book)}


@router.options("", include_in_schema=False)
def books_preflight() -> Response:
    return Response(status_code=200)


@router.api_route("/", methods=_ALL_METHODS, include_in_schema=False)
def empty_book_id() -> Response:
    raise book_not_found("")


@router.get("/{book_id}", response_model=Book)
def get_book(book_id: str, service: BookServiceDep) -> Book:
    parsed_id = parse_book_id(book_id)
    book = service.get_book(parsed_id)
    if book is None:
        raise book_not_found(parsed_id)
    return book


@router.delete("/{book_id}")
def delete_book(book_id: str, service: BookServiceDep) -> Response:
    service.delete_book(parse_book_id(book_id))
    return Response(status_code=200)


@router.options("/{book_id}", include_in_schema=False)
def book_preflight(book_id: str) -> Response:
    return Response(status_code=200)


@router.api_route("/{book_id}/{remainder:path}", methods=_ALL_METHODS, include_in_schema=False)
def nested_book_path(book_id: str, remainder: str) -> Response:
    if not remainder.strip("/"):
        raise book_not_found(f"{book_id}/")
    raise APIError(
        status_code=400,
        error_code="INVALID_BOOK_PATH",
        message=f"Unexpected path below book {book_id!r}: {remainder!r}",
    )
