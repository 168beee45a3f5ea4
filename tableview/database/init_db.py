"""
Database initialization and seeding.

Builds a local copy of the exposed tables for development when no dvdrental
instance is at hand.

This script:
- Creates the actor, film, staff and customer tables
- Optionally adds a handful of sample rows
- Can reset the database (drop and recreate)

Usage:
    # Create tables in the configured database
    python -m tableview.database.init_db

    # Reset database (drops all tables and recreates)
    python -m tableview.database.init_db --reset

    # Add sample data
    python -m tableview.database.init_db --sample-data

    # Point at another database
    python -m tableview.database.init_db --url sqlite:///./data/dev.db --sample-data
"""

import argparse
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from tableview.config import settings
from tableview.core.logging_config import configure_logging
from tableview.database.session import create_db_engine
from tableview.models import Actor, Customer, Film, Staff, create_all_tables, drop_all_tables

logger = logging.getLogger(__name__)


def create_tables(engine: Engine, reset: bool = False) -> None:
    """
    Create all database tables.

    Args:
        engine: Target engine
        reset: If True, drop existing tables first
    """
    if reset:
        logger.info("Dropping existing tables...")
        drop_all_tables(engine)

    logger.info("Creating database tables...")
    create_all_tables(engine)


def seed_sample_data(engine: Engine) -> int:
    """
    Insert a few rows into every table.

    Rows are only added to empty tables, so running this twice is harmless.

    Returns:
        Number of rows inserted
    """
    stamp = datetime(2013, 5, 26, 14, 47, 57, 620000)
    samples = {
        Actor: [
            Actor(first_name="Penelope", last_name="Guiness", last_update=stamp),
            Actor(first_name="Nick", last_name="Wahlberg", last_update=stamp),
            Actor(first_name="Ed", last_name="Chase", last_update=stamp),
        ],
        Film: [
            Film(
                title="Academy Dinosaur",
                description="A Epic Drama of a Feminist And a Mad Scientist",
                release_year=2006,
                language_id=1,
                rental_duration=6,
                rental_rate=Decimal("0.99"),
                length=86,
                replacement_cost=Decimal("20.99"),
                rating="PG",
                last_update=stamp,
            ),
            Film(
                title="Ace Goldfinger",
                description=None,
                release_year=2006,
                language_id=1,
                rental_duration=3,
                rental_rate=Decimal("4.99"),
                length=48,
                replacement_cost=Decimal("12.99"),
                rating="G",
                last_update=stamp,
            ),
        ],
        Staff: [
            Staff(
                first_name="Mike",
                last_name="Hillyer",
                address_id=3,
                email="Mike.Hillyer@sakilastaff.com",
                store_id=1,
                active=True,
                username="Mike",
                password=None,
                last_update=stamp,
            ),
            Staff(
                first_name="Jon",
                last_name="Stephens",
                address_id=4,
                email=None,
                store_id=2,
                active=True,
                username="Jon",
                password=None,
                last_update=stamp,
            ),
        ],
        Customer: [
            Customer(
                store_id=1,
                first_name="Mary",
                last_name="Smith",
                email="mary.smith@sakilacustomer.org",
                address_id=5,
                activebool=True,
                create_date=date(2006, 2, 14),
                last_update=stamp,
                active=1,
            ),
            Customer(
                store_id=2,
                first_name="Patricia",
                last_name="Johnson",
                email=None,
                address_id=6,
                activebool=True,
                create_date=date(2006, 2, 14),
                last_update=None,
                active=None,
            ),
        ],
    }

    inserted = 0
    with Session(engine) as db, db.begin():
        for model, rows in samples.items():
            if db.query(model).first() is not None:
                logger.info("Table '%s' already has rows (skipping)", model.__tablename__)
                continue
            db.add_all(rows)
            inserted += len(rows)
            logger.info("Seeded %d rows into '%s'", len(rows), model.__tablename__)
    return inserted


def init_database(url: Optional[str] = None, reset: bool = False,
                  sample_data: bool = False) -> None:
    """
    Initialize the database.

    Args:
        url: Database URL (defaults to settings)
        reset: If True, drop and recreate all tables
        sample_data: If True, add sample rows
    """
    engine = create_db_engine(url)
    try:
        create_tables(engine, reset=reset)
        if sample_data:
            seed_sample_data(engine)
    finally:
        engine.dispose()
    logger.info("Database initialization complete")


def main():
    """Command-line interface for database initialization."""
    parser = argparse.ArgumentParser(
        description="Create (and optionally seed) the tableview tables"
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop all tables and recreate (WARNING: deletes all data!)"
    )
    parser.add_argument(
        "--sample-data",
        action="store_true",
        help="Add sample rows"
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Database URL (defaults to DATABASE_URL / PG_* settings)"
    )

    args = parser.parse_args()
    configure_logging(settings.log_level)
    init_database(url=args.url, reset=args.reset, sample_data=args.sample_data)


if __name__ == "__main__":
    main()
