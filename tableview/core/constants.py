"""
Application-wide constants.

The allow-list of exposed tables and the supported output formats live here.
Nothing outside these enums is ever interpolated into SQL.
"""

from enum import Enum
from typing import Dict, Optional


# ========================================
# Exposed Tables
# ========================================

class TableName(str, Enum):
    """
    Tables that may be read through the API.

    Inherits from str, so a member can be used wherever the table name
    string is expected:

        TableName.ACTOR == "ACTOR"  # True
    """

    ACTOR = "ACTOR"
    FILM = "FILM"
    STAFF = "STAFF"
    CUSTOMER = "CUSTOMER"


# URL path segment -> table. Built once; matching is exact.
TABLE_ROUTES: Dict[str, TableName] = {
    table.value.lower(): table for table in TableName
}


def resolve_table(name) -> Optional[TableName]:
    """
    Look up an allow-listed table.

    Accepts a TableName member, a table value ("ACTOR") or a route segment
    ("actor"). Returns None for anything else.
    """
    if isinstance(name, TableName):
        return name
    if not isinstance(name, str):
        return None
    if name in TABLE_ROUTES:
        return TABLE_ROUTES[name]
    try:
        return TableName(name)
    except ValueError:
        return None


# ========================================
# Output Formats
# ========================================

class OutputFormat(str, Enum):
    """Response body formats understood by the renderer."""

    JSON = "json"
    HTML = "html"

    @classmethod
    def parse(cls, value: Optional[str]) -> "OutputFormat":
        """Map a ?format= value to a format; unknown or missing means JSON."""
        if value and value.strip().lower() == cls.HTML.value:
            return cls.HTML
        return cls.JSON


MEDIA_TYPE_JSON = "application/json"
MEDIA_TYPE_HTML = "text/html"


# ========================================
# Fixed Responses
# ========================================

GREETING_TEXT = "Hello from tableview!"
POST_ACK_TEXT = (
    "POST request received. No database interaction is configured "
    "for this route."
)
