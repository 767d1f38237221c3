"""
Shared test configuration.
Every test runs against its own SQLite file, so no MySQL server is needed unless an integration test asks for one.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from bookshelf.api.api_config import get_api_config  # noqa: E402
from bookshelf.api.db_access import DatabaseClient  # noqa: E402
from bookshelf.api.ddl import ensure_books_table  # noqa: E402
from bookshelf.api.dependencies import get_database_client, reset_dependencies  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Point the process configuration at a per-test SQLite database."""

    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'books.db'}")
    monkeypatch.setenv("ENV", "test")
    get_api_config.cache_clear()
    reset_dependencies()
    yield
    get_api_config.cache_clear()
    reset_dependencies()


@pytest.fixture
def books_db() -> DatabaseClient:
    """The shared database client with an empty books table."""

    db = get_database_client()
    ensure_books_table(db)
    return db
