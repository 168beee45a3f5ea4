"""
Database Engine Management
==========================

Creates the SQLAlchemy engine (and with it the connection pool) and hands
out scoped connections.

The engine is not a module global: the application creates one at startup,
stores it on ``app.state.engine`` and disposes it on shutdown.
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.pool import StaticPool

from tableview.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_db_engine(url: Optional[str] = None,
                     settings: Optional[Settings] = None) -> Engine:
    """
    Create and configure the database engine.

    Args:
        url: Database URL. Defaults to ``settings.sqlalchemy_url``.
        settings: Settings to read pool options from. Defaults to the
            global settings.

    Returns:
        A new Engine. Its pool is safe for concurrent checkout.
    """
    settings = settings or get_settings()
    database_url = url or settings.sqlalchemy_url

    # SQLite-specific configuration (local development and tests)
    if database_url.startswith("sqlite"):
        in_memory = ":memory:" in database_url or database_url.rstrip("/") == "sqlite:"
        if ":///" in database_url and not in_memory:
            db_dir = os.path.dirname(database_url.split(":///")[1])
            if db_dir and not os.path.exists(db_dir):
                os.makedirs(db_dir, exist_ok=True)

        if in_memory:
            engine = create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                echo=settings.app_debug
            )
        else:
            engine = create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                pool_size=settings.pool_size,
                max_overflow=settings.max_overflow,
                pool_timeout=settings.pool_timeout,
                echo=settings.app_debug
            )

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    else:
        engine = create_engine(
            database_url,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_timeout=settings.pool_timeout,
            pool_pre_ping=True,
            echo=settings.app_debug
        )

    logger.debug("Created engine for %s", engine.url.render_as_string(hide_password=True))
    return engine


@contextmanager
def connection_scope(engine: Engine) -> Generator[Connection, None, None]:
    """
    Check out one pooled connection and always give it back.

    Usage:
        with connection_scope(engine) as conn:
            conn.execute(text("SELECT 1"))
    """
    conn = engine.connect()
    try:
        yield conn
    finally:
        conn.close()


def dispose_engine(engine: Engine) -> None:
    """Close every pooled connection. Called on application shutdown."""
    engine.dispose()
    logger.info("Database engine disposed")
