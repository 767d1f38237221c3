"""
Bookshelf: a small HTTP service for storing and retrieving book records.
The web layer lives in `bookshelf.api`; process-wide helpers live in `bookshelf.common`.
"""
