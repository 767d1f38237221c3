"""DDL helper for the books table, used by local setup scripts and tests."""

from __future__ import annotations

from bookshelf.api.api_config import validate_sql_identifier
from bookshelf.api.db_access import DatabaseClient

BOOKS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS {table_name} (
    id INTEGER PRIMARY KEY,
    title TEXT,
    author TEXT
)
"""


def ensure_books_table(db: DatabaseClient, table_name: str = "books") -> None:
    """Create the books table when it does not exist yet."""

    safe_table = validate_sql_identifier(table_name)
    with db.engine.begin() as connection:
        connection.exec_driver_sql(BOOKS_TABLE_DDL.format(table_name=safe_table))
