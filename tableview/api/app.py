"""
Application factory.

The engine (and its connection pool) is created when the app starts, kept
on ``app.state.engine`` and disposed when the app shuts down. Tests pass
their own engine in; it is then left for the caller to dispose.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.engine import Engine

from tableview import __version__
from tableview.api.routes import router
from tableview.config import Settings, get_settings
from tableview.core.exceptions import FetchError, UnknownTableError
from tableview.core.logging_config import configure_logging
from tableview.database.session import create_db_engine, dispose_engine
from tableview.services.fetcher import check_connection

logger = logging.getLogger(__name__)


async def unknown_table_handler(request: Request, exc: UnknownTableError):
    logger.warning("Rejected request for unknown table %r", exc.name)
    return PlainTextResponse(str(exc), status_code=404)


async def fetch_error_handler(request: Request, exc: FetchError):
    logger.error("Error in %s route: %s (%r)", request.url.path, exc, exc.cause)
    return PlainTextResponse(f"Error retrieving {exc.table} data: {exc}", status_code=500)


def create_app(settings: Optional[Settings] = None,
               engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to the global settings)
        engine: Pre-built engine; when omitted one is created at startup
            from the settings and disposed at shutdown
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_engine = engine is None
        app.state.engine = create_db_engine(settings=settings) if owns_engine else engine
        await run_in_threadpool(check_connection, app.state.engine)
        try:
            yield
        finally:
            if owns_engine:
                dispose_engine(app.state.engine)

    app = FastAPI(
        title="tableview",
        description="Rows of the dvdrental tables as JSON or HTML",
        version=__version__,
        debug=settings.app_debug,
        lifespan=lifespan,
    )
    if engine is not None:
        app.state.engine = engine

    app.add_exception_handler(UnknownTableError, unknown_table_handler)
    app.add_exception_handler(FetchError, fetch_error_handler)
    app.include_router(router)
    return app
