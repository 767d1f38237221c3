# This file provides dependency factories for FastAPI routes and the application lifespan.
# The database client and book service are created once per process and shared through injection.
# Every provider reads settings through get_config, so one cached ApiConfig drives the whole app.
# Tests override these providers instead of touching a real database.

from __future__ import annotations

from functools import lru_cache

from bookshelf.api.api_config import ApiConfig, get_api_config
from bookshelf.api.db_access import DatabaseClient
from bookshelf.api.services.book_service import BookService


def get_config() -> ApiConfig:
    return get_api_config()


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_config()
    return DatabaseClient(
        database_url=config.database_url,
        pool_size=config.db_pool_size,
        max_overflow=config.db_max_overflow,
        pool_recycle_seconds=config.db_pool_recycle_seconds,
        timeout_seconds=config.query_timeout_seconds,
    )


@lru_cache(maxsize=1)
def get_book_service() -> BookService:
    config = get_config()
    db_client = get_database_client()
    return BookService(config=config, db=db_client)


def reset_dependencies() -> None:
    """Drop cached providers so the next call rebuilds them from current settings."""

    get_book_service.cache_clear()
    get_database_client.cache_clear()
