# This file wraps database access so the book service can run parameterized SQL safely.
# It owns the SQLAlchemy engine and therefore the only process-wide state: the connection pool.
# Pool limits and per-statement timeouts are applied here, per backend, when the engine is built.
# Every call checks a connection out, runs one statement and returns it to the pool.

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError


def _timeout_connect_args(backend: str, timeout_seconds: float) -> dict[str, Any]:
    whole_seconds = max(1, math.ceil(timeout_seconds))
    if backend == "mysql":
        return {
            "connect_timeout": whole_seconds,
            "read_timeout": whole_seconds,
            "write_timeout": whole_seconds,
        }
    if backend == "postgresql":
        return {
            "connect_timeout": whole_seconds,
            "options": f"-c statement_timeout={int(timeout_seconds * 1000)}",
        }
    if backend == "sqlite":
        return {"timeout": timeout_seconds, "check_same_thread": False}
    return {}


def build_engine_options(
    database_url: str,
    *,
    pool_size: int,
    max_overflow: int,
    pool_recycle_seconds: int,
    timeout_seconds: float,
) -> dict[str, Any]:
    """Return `create_engine` keyword arguments for the given URL."""

    url = make_url(database_url)
    backend = url.get_backend_name()
    options: dict[str, Any] = {
        "pool_pre_ping": True,
        "future": True,
        "connect_args": _timeout_connect_args(backend, timeout_seconds),
    }

    # In-memory SQLite uses a per-thread singleton pool without size limits.
    if backend == "sqlite" and url.database in (None, "", ":memory:"):
        return options

    options.update(
        {
            "pool_size": pool_size,
            "max_overflow": max_overflow,
            "pool_recycle": pool_recycle_seconds,
            "pool_timeout": timeout_seconds,
        }
    )
    return options


class DatabaseClient:
    """Minimal SQLAlchemy wrapper for API read/write access."""

    def __init__(
        self,
        *,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 0,
        pool_recycle_seconds: int = 180,
        timeout_seconds: float = 3.0,
    ) -> None:
        options = build_engine_options(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_recycle_seconds=pool_recycle_seconds,
            timeout_seconds=timeout_seconds,
        )
        self._engine: Engine = create_engine(database_url, **options)
        self._timeout_seconds = timeout_seconds

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    def can_connect(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def fetch_all(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        with self._engine.connect() as connection:
            rows = connection.execute(text(query), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def fetch_one(self, query: str, params: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        with self._engine.connect() as connection:
            row = connection.execute(text(query), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def execute(self, query: str, params: Mapping[str, Any] | None = None) -> int:
        """Run a write statement in its own transaction and return the affected row count."""

        with self._engine.begin() as connection:
            result = connection.execute(text(query), dict(params or {}))
            return result.rowcount

    def dispose(self) -> None:
        self._engine.dispose()
