# This file tests that every books API response carries the cross-origin headers.
# Browsers drop responses without them, so failures need the headers as much as successes do.

from __future__ import annotations

import pytest
from fastapi import Response

from bookshelf.api.api_config import ApiConfig
from bookshelf.api.cors import apply_cross_origin_headers
from bookshelf.api.db_access import DatabaseClient
from tests.api.support import FailingBookService, api_test_client, assert_cors_headers


@pytest.mark.parametrize(
    ("method", "path", "expected_status"),
    [
        ("GET", "/api/books", 200),
        ("OPTIONS", "/api/books", 200),
        ("GET", "/api/books/3", 404),
        ("GET", "/api/books/abc", 404),
        ("DELETE", "/api/books/3", 200),
        ("OPTIONS", "/api/books/3", 200),
        ("PUT", "/api/books", 405),
        ("GET", "/api/books/3/4", 400),
        ("GET", "/nowhere", 404),
    ],
)
def test_headers_present_for_every_status(
    books_db: DatabaseClient,
    method: str,
    path: str,
    expected_status: int,
) -> None:
    with api_test_client() as client:
        response = client.request(method, path)

    assert response.status_code == expected_status
    assert_cors_headers(response)


def test_headers_present_on_created_and_bad_request(books_db: DatabaseClient) -> None:
    with api_test_client() as client:
        created = client.post("/api/books", json={"id": 9, "title": "Ubik", "author": "Dick"})
        rejected = client.post("/api/books", content=b"not json", headers={"Content-Type": "application/json"})

    assert created.status_code == 201
    assert rejected.status_code == 400
    assert_cors_headers(created)
    assert_cors_headers(rejected)


def test_headers_present_on_storage_failure() -> None:
    with api_test_client(book_service=FailingBookService()) as client:
        response = client.get("/api/books")

    assert response.status_code == 500
    assert_cors_headers(response)


def test_headers_present_on_unhandled_exception() -> None:
    service = FailingBookService(RuntimeError("boom"))
    with api_test_client(book_service=service, raise_server_exceptions=False) as client:
        response = client.delete("/api/books/1")

    assert response.status_code == 500
    assert_cors_headers(response)


def test_apply_cross_origin_headers_uses_configured_values() -> None:
    config = ApiConfig(
        cors_allow_origin="https://books.example",
        cors_allow_methods=["GET"],
        cors_allow_headers=["Accept"],
    )
    response = apply_cross_origin_headers(Response(status_code=204), config)

    assert response.headers["access-control-allow-origin"] == "https://books.example"
    assert response.headers["access-control-allow-methods"] == "GET"
    assert response.headers["access-control-allow-headers"] == "Accept"
    assert response.headers["content-type"] == "application/json"
