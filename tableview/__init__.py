"""tableview: serve rows of a few fixed tables as JSON or HTML."""

__version__ = "1.0.0"
