"""Minimal PostgreSQL-backed book repository."""

from .errors import (
    BookNotFoundError,
    BookRepositoryError,
    ConfigError,
    ConnectivityError,
    DatabaseConnectionError,
    DecodeError,
    InsertError,
    QueryError,
    SchemaError,
)
from .models import Book
from .database import (
    DatabaseConfig,
    get_all_books,
    get_book_by_id,
    init_db,
    insert_book,
    open_database,
)

__all__ = [
    "Book",
    "DatabaseConfig",
    "init_db",
    "open_database",
    "insert_book",
    "get_book_by_id",
    "get_all_books",
    "BookRepositoryError",
    "ConfigError",
    "DatabaseConnectionError",
    "ConnectivityError",
    "SchemaError",
    "InsertError",
    "QueryError",
    "BookNotFoundError",
    "DecodeError",
]
