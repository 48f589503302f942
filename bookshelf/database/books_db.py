"""Books table CRUD operations.

Each function takes an open connection (see ``connection.init_db``) and
runs a single statement. Driver errors are wrapped in the matching
``bookshelf.errors`` kind; nothing is retried.
"""

import logging
from datetime import date, datetime

import psycopg2

from ..errors import BookNotFoundError, DecodeError, InsertError, QueryError
from ..models import Book
from .connection import get_cursor

logger = logging.getLogger("bookshelf.database")


def _row_to_book(row) -> Book:
    try:
        book_id = row["id"]
        title = row["title"]
        author = row["author"]
        published = row["published"]
    except (KeyError, TypeError) as e:
        raise DecodeError(f"error scanning book: {e!r}") from e

    if not isinstance(book_id, int) or isinstance(book_id, bool):
        raise DecodeError(f"error scanning book: bad id {book_id!r}")
    if not isinstance(title, str) or not isinstance(author, str):
        raise DecodeError(f"error scanning book {book_id}: title/author must be text")
    if isinstance(published, datetime):
        published = published.date()
    elif not isinstance(published, date):
        raise DecodeError(f"error scanning book {book_id}: bad published value {published!r}")

    return Book(id=book_id, title=title, author=author, published=published)


def insert_book(conn, book: Book) -> int:
    """Insert a book and return the id assigned by the database.

    ``book.id`` is ignored and ``book`` itself is left untouched.
    """
    for field_name in ("title", "author"):
        value = getattr(book, field_name)
        if not value:
            raise InsertError(f"error inserting book: {field_name} is required")

    try:
        with get_cursor(conn) as cur:
            cur.execute("""
                INSERT INTO books (title, author, published)
                VALUES (%s, %s, %s)
                RETURNING id
            """, (book.title, book.author, book.published))
            book_id = cur.fetchone()["id"]
    except psycopg2.Error as e:
        raise InsertError(f"error inserting book: {e}") from e

    logger.info("Inserted book %d: %s", book_id, book.title)
    return book_id


def get_book_by_id(conn, book_id: int) -> Book:
    try:
        with get_cursor(conn) as cur:
            cur.execute("""
                SELECT id, title, author, published
                FROM books
                WHERE id = %s
            """, (book_id,))
            row = cur.fetchone()
    except psycopg2.Error as e:
        raise QueryError(f"error getting book: {e}") from e

    if row is None:
        raise BookNotFoundError(book_id)
    return _row_to_book(row)


def get_all_books(conn) -> list[Book]:
    """Return every stored book in the order the database yields them."""
    try:
        with get_cursor(conn) as cur:
            cur.execute("""
                SELECT id, title, author, published
                FROM books
            """)
            rows = cur.fetchall()
    except psycopg2.Error as e:
        raise QueryError(f"error querying books: {e}") from e

    return [_row_to_book(row) for row in rows]
