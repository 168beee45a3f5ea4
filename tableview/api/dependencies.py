from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from tableview.core.constants import TABLE_ROUTES, TableName
from tableview.core.exceptions import UnknownTableError
from tableview.services.fetcher import TableFetcher, get_table_fetcher


def get_engine(request: Request) -> Engine:
    """Engine created by the application lifespan."""
    return request.app.state.engine


def get_fetcher(engine: Engine = Depends(get_engine)) -> TableFetcher:
    return get_table_fetcher(engine)


def get_table(table_name: str) -> TableName:
    """Resolve the path segment through the route map or reject it."""
    table = TABLE_ROUTES.get(table_name)
    if table is None:
        raise UnknownTableError(table_name)
    return table
