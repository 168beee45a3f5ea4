"""HTTP layer: app factory and routes."""

from tableview.api.app import create_app

__all__ = ["create_app"]
