"""Database access layer for the books table."""

from .connection import (
    BOOKS_SCHEMA,
    DatabaseConfig,
    connect,
    create_schema,
    get_cursor,
    init_db,
    open_database,
    ping,
)
from .books_db import get_all_books, get_book_by_id, insert_book

__all__ = [
    "BOOKS_SCHEMA",
    "DatabaseConfig",
    "connect",
    "create_schema",
    "get_cursor",
    "init_db",
    "open_database",
    "ping",
    "get_all_books",
    "get_book_by_id",
    "insert_book",
]
