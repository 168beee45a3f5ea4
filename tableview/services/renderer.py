"""
Response Renderer
=================

Turns a fetched result set into a response body.

Two formats exist:
- JSON: an array of objects, keys in column order
- HTML: a standalone document with one table (Jinja2 template, autoescaped)

Rendering is pure: no database or filesystem access besides loading the
packaged template.
"""

import json
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from jinja2 import Environment, PackageLoader, select_autoescape

from tableview.core.constants import MEDIA_TYPE_HTML, MEDIA_TYPE_JSON, OutputFormat

_env = Environment(
    loader=PackageLoader("tableview", "templates"),
    autoescape=select_autoescape(["html"]),
)

DEFAULT_TITLE = "Table"


@dataclass(frozen=True)
class RenderedBody:
    """A response body plus the content type it must be sent with."""

    content: str
    media_type: str


def cell_text(value: Any) -> str:
    """Text shown in an HTML cell; None, NaN and infinities become an empty cell."""
    if value is None or (isinstance(value, float) and not math.isfinite(value)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ", ".join(cell_text(item) for item in value)
    return str(value)


def _json_safe(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


def render_json(rows: Sequence[Dict[str, Any]]) -> str:
    """Serialize rows as a JSON array ("[]" when empty); NaN/Infinity become null."""
    safe = [{column: _json_safe(value) for column, value in row.items()} for row in rows]
    return json.dumps(safe, ensure_ascii=False, allow_nan=False, default=str)


def render_html(rows: Sequence[Dict[str, Any]], title: Optional[str] = None) -> str:
    """
    Render rows as a complete HTML document.

    The header comes from the first row's column names, uppercased. An empty
    result gives a table with neither header cells nor body rows.
    """
    columns: List[str] = [str(name).upper() for name in rows[0].keys()] if rows else []
    body = [[cell_text(value) for value in row.values()] for row in rows]
    template = _env.get_template("table.html")
    return template.render(
        title=str(getattr(title, "value", title) or DEFAULT_TITLE),
        columns=columns,
        rows=body,
    )


def render(rows: Sequence[Dict[str, Any]], mode=OutputFormat.JSON,
           title: Optional[str] = None) -> RenderedBody:
    """
    Render rows in the requested format.

    Args:
        rows: Result set from the fetcher
        mode: OutputFormat or raw ?format= string; anything unrecognized
            falls back to JSON
        title: Heading for the HTML document (usually the table name)

    Returns:
        RenderedBody with content and media type

    Example:
        body = render(rows, "html", title="ACTOR")
        body.media_type  # 'text/html'
    """
    if not isinstance(mode, OutputFormat):
        mode = OutputFormat.parse(mode)

    if mode is OutputFormat.HTML:
        return RenderedBody(render_html(rows, title), MEDIA_TYPE_HTML)
    return RenderedBody(render_json(rows), MEDIA_TYPE_JSON)
