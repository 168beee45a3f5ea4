"""
Configuration Settings
======================

Centralized configuration using Pydantic V2 Settings.

Database connection values use the PG_* environment variables of the
dvdrental docker setup. DATABASE_URL, when set, wins over them.
"""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_env: str = Field(default="development")
    app_debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    http_host: str = Field(default="0.0.0.0")
    http_port: int = Field(default=8000, gt=0, lt=65536)

    pg_host: str = Field(default="localhost")
    pg_port: int = Field(default=5432, gt=0, lt=65536)
    pg_database: str = Field(default="dvdrental")
    pg_user: str = Field(default="postgres")
    pg_password: str = Field(default="postgres")
    database_url: Optional[str] = Field(default=None)

    pool_size: int = Field(default=5, ge=1)
    max_overflow: int = Field(default=10, ge=0)
    pool_timeout: float = Field(default=30.0, gt=0.0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept only the standard logging level names."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return level

    @property
    def sqlalchemy_url(self) -> str:
        """URL handed to create_engine()."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+psycopg2",
            username=self.pg_user,
            password=self.pg_password,
            host=self.pg_host,
            port=self.pg_port,
            database=self.pg_database,
        ).render_as_string(hide_password=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
