"""Constants, exceptions and logging setup shared across the app."""
