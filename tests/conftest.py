"""Shared test fixtures and factory functions."""

import os
from datetime import date
from unittest.mock import MagicMock

import pytest


# --- Core DB Fixtures ---

@pytest.fixture
def mock_cursor():
    """Create a mock database cursor."""
    cursor = MagicMock()
    cursor.fetchone.return_value = None
    cursor.fetchall.return_value = []
    cursor.rowcount = 0
    return cursor


@pytest.fixture
def mock_conn(mock_cursor):
    """Mock connection whose cursor() context manager yields mock_cursor."""
    conn = MagicMock()
    conn.cursor.return_value.__enter__ = MagicMock(return_value=mock_cursor)
    conn.cursor.return_value.__exit__ = MagicMock(return_value=False)
    return conn


# --- Live database ---

@pytest.fixture
def live_config():
    """DatabaseConfig for a real Postgres, skipped unless TEST_DATABASE_URL is set."""
    url = os.environ.get("TEST_DATABASE_URL")
    if not url:
        pytest.skip("TEST_DATABASE_URL not set")
    from bookshelf.database.connection import DatabaseConfig
    return DatabaseConfig(url=url)


@pytest.fixture
def live_conn(live_config):
    """Connection to a freshly created, empty books table."""
    import psycopg2
    from bookshelf.database.connection import init_db

    setup = psycopg2.connect(live_config.url)
    with setup.cursor() as cur:
        cur.execute("DROP TABLE IF EXISTS books")
    setup.commit()
    setup.close()

    conn = init_db(live_config)
    yield conn
    conn.close()


# --- Factory Functions ---

def make_book(**kwargs):
    from bookshelf.models import Book
    defaults = {"title": "T", "author": "A", "published": date(2020, 1, 15)}
    defaults.update(kwargs)
    return Book(**defaults)


def make_book_row(**kwargs):
    """Create a books row dict like what RealDictCursor returns."""
    defaults = {"id": 1, "title": "T", "author": "A", "published": date(2020, 1, 15)}
    defaults.update(kwargs)
    return defaults
