"""Demo: insert a sample book and list everything in the books table.

    python -m bookshelf.demo [--host HOST] [--port PORT] ...

Connection settings come from DATABASE_URL / BOOKS_DB_* (see
``DatabaseConfig.from_env``); CLI flags override them. Any repository
failure is fatal.
"""

import argparse
import logging
import sys
from datetime import date
from typing import Optional

from .database.books_db import get_all_books, insert_book
from .database.connection import DatabaseConfig, open_database
from .errors import BookRepositoryError
from .log_config import setup_logging
from .models import Book

logger = logging.getLogger("bookshelf.demo")

SAMPLE_BOOK = Book(
    title="The Go Programming Language",
    author="Alan A. A. Donovan and Brian W. Kernighan",
    published=date(2015, 11, 1),
)


def run_demo(config: DatabaseConfig, book: Optional[Book] = None) -> list[Book]:
    """Insert ``book`` (the sample by default), print and return all books."""
    book = book or SAMPLE_BOOK
    with open_database(config) as conn:
        insert_book(conn, book)
        print("Successfully inserted new book")

        books = get_all_books(conn)

    print("\nAll books in database:")
    for stored in books:
        print(stored.format())
    return books


def main(argv=None):
    parser = argparse.ArgumentParser(description="Insert a sample book and list all books")
    parser.add_argument("--host")
    parser.add_argument("--port", type=int)
    parser.add_argument("--user")
    parser.add_argument("--dbname")
    parser.add_argument("--log-dir", default="logs")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    args = parser.parse_args(argv)
    setup_logging(level=args.log_level, log_dir=args.log_dir)

    try:
        config = DatabaseConfig.from_env().with_overrides(
            host=args.host, port=args.port, user=args.user, dbname=args.dbname,
        )
        run_demo(config)
    except BookRepositoryError as e:
        logger.error("Demo failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
