# This file defines the API error types and the exception handlers that translate them.
# Failure responses never carry a payload: clients get a status code and the CORS headers only.
# Every handler logs the error code and message so the body-less response can still be traced.
# Unhandled exceptions end up as a plain 500 instead of a stack trace.

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookshelf.api.cors import apply_cross_origin_headers

LOGGER = logging.getLogger("bookshelf.api")


class APIError(Exception):
    """Domain error carrying the status and error code to respond with."""

    def __init__(
        self,
        *,
        status_code: int,
        error_code: str,
        message: str,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        super().__init__(message)


class StorageError(APIError):
    """A database operation failed; the driver error is chained as `__cause__`."""

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 500,
        error_code: str = "STORAGE_ERROR",
    ) -> None:
        super().__init__(
            status_code=status_code,
            error_code=error_code,
            message=message,
        )


class DuplicateBookError(StorageError):
    """An insert was rejected because the book id already exists."""

    def __init__(self, *, book_id: int) -> None:
        super().__init__(
            message=f"Book with id {book_id} already exists.",
            status_code=400,
            error_code="DUPLICATE_BOOK",
        )
        self.book_id = book_id


def book_not_found(book_id: object) -> APIError:
    return APIError(status_code=404, error_code="BOOK_NOT_FOUND", message=f"No book with id {book_id!r}")


def _empty_response(status_code: int, headers: dict[str, str] | None = None) -> Response:
    return Response(status_code=status_code, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> Response:
        LOGGER.warning(
            "%s %s -> %s %s: %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.error_code,
            exc.message,
        )
        return _empty_response(exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
        LOGGER.warning(
            "%s %s -> 400 VALIDATION_ERROR: %s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        return _empty_response(400)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
        LOGGER.info(
            "%s %s -> %s HTTP_ERROR: %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.detail,
        )
        return _empty_response(exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
        LOGGER.error(
            "%s %s -> 500 INTERNAL_SERVER_ERROR",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        response = _empty_response(500)
        # Runs outside the middleware stack, so the headers are applied here.
        apply_cross_origin_headers(response, request.app.state.config)
        return response
