"""Connection setup and schema preparation for the books store."""

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Optional

import psycopg2
from psycopg2.extras import RealDictCursor

from ..errors import ConfigError, ConnectivityError, DatabaseConnectionError, SchemaError

logger = logging.getLogger("bookshelf.database")

BOOKS_SCHEMA = """
    CREATE TABLE IF NOT EXISTS books (
        id SERIAL PRIMARY KEY,
        title VARCHAR(100) NOT NULL,
        author VARCHAR(100) NOT NULL,
        published DATE NOT NULL
    )
"""


@dataclass
class DatabaseConfig:
    """Connection parameters.

    When ``url`` is set it is passed to psycopg2 as a DSN and the individual
    fields are ignored.
    """
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "password"
    dbname: str = "testdb"
    sslmode: str = "disable"
    url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Build a config from DATABASE_URL / BOOKS_DB_* environment variables."""
        defaults = cls()
        raw_port = os.environ.get("BOOKS_DB_PORT", defaults.port)
        try:
            port = int(raw_port)
        except ValueError as e:
            raise ConfigError(f"BOOKS_DB_PORT must be an integer, got {raw_port!r}") from e
        return cls(
            host=os.environ.get("BOOKS_DB_HOST", defaults.host),
            port=port,
            user=os.environ.get("BOOKS_DB_USER", defaults.user),
            password=os.environ.get("BOOKS_DB_PASSWORD", defaults.password),
            dbname=os.environ.get("BOOKS_DB_NAME", defaults.dbname),
            sslmode=os.environ.get("BOOKS_DB_SSLMODE", defaults.sslmode),
            url=os.environ.get("DATABASE_URL") or None,
        )

    def with_overrides(self, **overrides) -> "DatabaseConfig":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def connect_kwargs(self) -> dict:
        if self.url:
            return {"dsn": self.url}
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": self.password,
            "dbname": self.dbname,
            "sslmode": self.sslmode,
        }

    def __repr__(self) -> str:
        target = "url=<set>" if self.url else (
            f"host={self.host!r}, port={self.port}, user={self.user!r}, dbname={self.dbname!r}"
        )
        return f"DatabaseConfig({target})"


def connect(config: DatabaseConfig):
    """Open a connection to the configured database."""
    try:
        return psycopg2.connect(**config.connect_kwargs())
    except psycopg2.Error as e:
        raise DatabaseConnectionError(f"error opening database: {e}") from e


@contextmanager
def get_cursor(conn):
    """Context manager for a dict cursor on ``conn`` with commit/rollback.

    The cursor is closed on every exit path; the connection stays open.
    """
    try:
        with conn.cursor(cursor_factory=RealDictCursor) as cur:
            yield cur
        conn.commit()
    except Exception:
        # a lost connection makes rollback fail too; keep the original error
        try:
            conn.rollback()
        except psycopg2.Error as rollback_error:
            logger.warning("Rollback failed: %s", rollback_error)
        raise


def ping(conn) -> None:
    """Liveness probe."""
    try:
        with get_cursor(conn) as cur:
            cur.execute("SELECT 1")
    except psycopg2.Error as e:
        raise ConnectivityError(f"error connecting to database: {e}") from e


def create_schema(conn) -> None:
    """Create the books table if it does not exist yet."""
    try:
        with get_cursor(conn) as cur:
            cur.execute(BOOKS_SCHEMA)
    except psycopg2.Error as e:
        raise SchemaError(f"error creating table: {e}") from e
    logger.info("books table ready")


def init_db(config: Optional[DatabaseConfig] = None):
    """Open a verified connection and make sure the books table exists.

    Safe to call on every process start. On a ping or schema failure the
    connection is closed before the error propagates.
    """
    config = config or DatabaseConfig()
    logger.debug("Connecting to %r", config)
    conn = connect(config)
    try:
        ping(conn)
        create_schema(conn)
    except Exception:
        conn.close()
        raise
    return conn


@contextmanager
def open_database(config: Optional[DatabaseConfig] = None):
    """``init_db`` as a context manager; closes the connection on exit."""
    conn = init_db(config)
    try:
        yield conn
    finally:
        conn.close()
