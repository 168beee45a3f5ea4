"""
Exception types raised while serving table data.

Public messages never include driver error text; the original exception is
kept on ``cause`` (and chained) for server-side logging.
"""

from typing import Optional


class TableViewError(Exception):
    """Base class for tableview errors."""


class UnknownTableError(TableViewError):
    """Requested table is not on the allow-list."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown table: {name}")


class FetchError(TableViewError):
    """Reading a table failed."""

    def __init__(self, table: str, cause: Optional[BaseException] = None):
        self.table = str(getattr(table, "value", table))
        self.cause = cause
        super().__init__(f"Failed to fetch data from {self.table}.")


class DatabaseConnectionError(FetchError):
    """No connection could be checked out of the pool."""


class QueryError(FetchError):
    """The SELECT itself failed (missing table, permissions, ...)."""
