"""
Database models package.

SQLAlchemy models for the four exposed dvdrental tables.
"""

from tableview.models.base import Base, create_all_tables, drop_all_tables
from tableview.models.actor import Actor
from tableview.models.film import Film
from tableview.models.staff import Staff
from tableview.models.customer import Customer

__all__ = [
    "Base",
    "Actor",
    "Film",
    "Staff",
    "Customer",
    "create_all_tables",
    "drop_all_tables",
]
