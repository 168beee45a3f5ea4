"""
Services Package
================

Business logic layer for tableview.

Available services:
- TableFetcher: reads allow-listed tables through the connection pool
- render: turns a result set into a JSON or HTML body
"""

from tableview.services.fetcher import TableFetcher, check_connection, get_table_fetcher
from tableview.services.renderer import RenderedBody, render

__all__ = [
    "TableFetcher",
    "check_connection",
    "get_table_fetcher",
    "RenderedBody",
    "render",
]
