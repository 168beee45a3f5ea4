"""
HTTP routes.

GET /{table_name} serves one allow-listed table as JSON, or as an HTML page
with ?format=html. Failures are turned into responses by the exception
handlers registered in ``tableview.api.app``.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse, Response

from tableview.api.dependencies import get_fetcher, get_table
from tableview.core.constants import GREETING_TEXT, POST_ACK_TEXT, TableName
from tableview.services.fetcher import TableFetcher
from tableview.services.renderer import render

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def read_root():
    return GREETING_TEXT


@router.post("/", response_class=PlainTextResponse)
def post_root():
    return POST_ACK_TEXT


@router.get("/{table_name}")
def read_table(
    table: TableName = Depends(get_table),
    output: Optional[str] = Query(default=None, alias="format"),
    fetcher: TableFetcher = Depends(get_fetcher),
):
    """Return every row of the table in the requested format."""
    rows = fetcher.fetch(table)
    body = render(rows, output, title=table.value)
    return Response(content=body.content, status_code=200, media_type=body.media_type)
