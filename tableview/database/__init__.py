"""Database package."""

from tableview.database.session import (
    create_db_engine,
    connection_scope,
    dispose_engine,
)

__all__ = [
    "create_db_engine",
    "connection_scope",
    "dispose_engine",
]
