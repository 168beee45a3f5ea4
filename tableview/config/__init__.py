"""
Configuration package.

Exports the singleton settings instance for easy importing.

Usage:
    from tableview.config import settings

    print(settings.sqlalchemy_url)
"""

from tableview.config.settings import Settings, settings, get_settings

__all__ = [
    "Settings",
    "settings",
    "get_settings",
]
