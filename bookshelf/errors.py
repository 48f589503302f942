"""Error kinds raised by the book repository.

Every error wraps the driver exception that caused it (``__cause__``).
"""


class BookRepositoryError(Exception):
    """Base class for all repository failures."""


class ConfigError(BookRepositoryError):
    """Connection settings from the environment are invalid."""


class DatabaseConnectionError(BookRepositoryError):
    """Transport or authentication failure while opening the connection."""


class ConnectivityError(BookRepositoryError):
    """Liveness probe failed on a freshly opened connection."""


class SchemaError(BookRepositoryError):
    """The books table could not be created."""


class InsertError(BookRepositoryError):
    """A book could not be written."""


class QueryError(BookRepositoryError):
    """A read statement failed."""


class BookNotFoundError(QueryError):
    """No book has the requested id."""

    def __init__(self, book_id: int):
        super().__init__(f"No book with id {book_id}")
        self.book_id = book_id


class DecodeError(BookRepositoryError):
    """A stored row could not be mapped to a Book."""
