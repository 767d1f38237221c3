#!/usr/bin/env python3
"""
Create the books table for local development.
The API never creates schema on its own; run this once against a fresh database.
Exits non-zero when the database cannot be reached.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from bookshelf.api.api_config import get_api_config
from bookshelf.api.db_access import DatabaseClient
from bookshelf.api.ddl import ensure_books_table
from bookshelf.common.logging import configure_logging


def parse_args() -> argparse.Namespace:
    config = get_api_config()
    parser = argparse.ArgumentParser(description="Create the books table if it does not exist")
    parser.add_argument("--database-url", default=config.database_url)
    parser.add_argument("--table-name", default=config.books_table_name)
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    configure_logging(get_api_config().log_level)

    db = DatabaseClient(database_url=args.database_url)
    try:
        if not db.can_connect():
            print(json.dumps({"created": False, "reason": "database unreachable"}, indent=2))
            return 1
        ensure_books_table(db, args.table_name)
    finally:
        db.dispose()

    print(json.dumps({"created": True, "table_name": args.table_name}, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
