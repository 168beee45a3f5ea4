"""
Table Fetcher Service
=====================

Reads every row of one allow-listed table.

Each fetch checks out exactly one pooled connection and returns it before
the call finishes, whether the query succeeded or not. Values are
normalized to JSON-friendly scalars on the way out (timestamps become
ISO-8601 strings), so the renderers never see driver types.
"""

import logging
import math
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from tableview.core.constants import TableName, resolve_table
from tableview.core.exceptions import DatabaseConnectionError, QueryError, UnknownTableError
from tableview.database.session import connection_scope

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


def normalize_value(value: Any) -> Any:
    """
    Convert a driver value to a str/int/float/bool/None (or a list of them).

    NaN and infinities have no JSON form and become None. A Decimal becomes
    a float only when the float prints back to the same number; otherwise
    its exact text is kept.

    Example:
        normalize_value(datetime(2013, 5, 26, 14, 47, 57))
        # '2013-05-26T14:47:57'
    """
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
        as_float = float(value)
        if Decimal(repr(as_float)) == value:
            return as_float
        return str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    if isinstance(value, (list, tuple)):
        return [normalize_value(item) for item in value]
    return str(value)


class TableFetcher:
    """
    Runs ``SELECT *`` against allow-listed tables.

    Example:
        fetcher = TableFetcher(engine)
        rows = fetcher.fetch(TableName.ACTOR)
        print(rows[0]["first_name"])
    """

    def __init__(self, engine: Engine):
        """
        Args:
            engine: SQLAlchemy engine whose pool connections are borrowed
        """
        self.engine = engine

    def fetch(self, table) -> List[Row]:
        """
        Fetch all rows of a table.

        Args:
            table: TableName member (or its string value)

        Returns:
            List of rows; each row is a dict in the database's column order

        Raises:
            UnknownTableError: table is not on the allow-list
            DatabaseConnectionError: no connection could be checked out
            QueryError: the SELECT failed
        """
        resolved = resolve_table(table)
        if resolved is None:
            raise UnknownTableError(table)

        # Only enum values reach the SQL text.
        statement = text(f"SELECT * FROM {resolved.value}")

        try:
            with connection_scope(self.engine) as conn:
                try:
                    result = conn.execute(statement)
                    rows = [
                        {column: normalize_value(value) for column, value in mapping.items()}
                        for mapping in result.mappings()
                    ]
                except SQLAlchemyError as exc:
                    logger.error("Error fetching data from %s", resolved.value, exc_info=True)
                    raise QueryError(resolved, exc) from exc
        except SQLAlchemyError as exc:
            # Only checkout failures reach here.
            logger.error("Could not get a connection for %s", resolved.value, exc_info=True)
            raise DatabaseConnectionError(resolved, exc) from exc

        logger.info("Fetched %d rows from %s.", len(rows), resolved.value)
        return rows


def check_connection(engine: Engine) -> bool:
    """
    Probe the database once (used at startup).

    Logs the outcome and never raises.

    Returns:
        True if ``SELECT 1`` succeeded
    """
    try:
        with connection_scope(engine) as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.error("Database connection failed!", exc_info=True)
        return False
    logger.info("Database connection successful!")
    return True


def get_table_fetcher(engine: Engine) -> TableFetcher:
    """Factory function to create a TableFetcher."""
    return TableFetcher(engine)
