"""
Base Model
==========

Declarative base for the local copies of the exposed tables.

The API never queries through these models (it runs plain ``SELECT *``);
they exist so a development or test database can be created with the same
column layout as the dvdrental schema.
"""

from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def create_all_tables(engine: Engine) -> None:
    """Create all tables in the database."""
    Base.metadata.create_all(bind=engine)


def drop_all_tables(engine: Engine) -> None:
    """Drop all tables in the database."""
    Base.metadata.drop_all(bind=engine)
