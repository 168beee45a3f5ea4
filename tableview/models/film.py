"""
Film model.

Mirrors the dvdrental ``film`` table minus the ``special_features`` array
and the ``fulltext`` search vector, which have no portable column type.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, Integer, Numeric, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from tableview.models.base import Base


class Film(Base):
    """
    Row of the ``film`` table.

    Attributes:
        film_id: Primary key
        title: Film title
        description: Free-text blurb (nullable)
        release_year: Year of release (nullable)
        language_id: Language reference
        rental_duration: Rental period in days
        rental_rate: Price per rental period
        length: Running time in minutes (nullable)
        replacement_cost: Charge for a lost copy
        rating: MPAA rating (G, PG, PG-13, R, NC-17)
        last_update: Last modification time
    """

    __tablename__ = "film"

    film_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    release_year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    language_id: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=1)
    rental_duration: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=3)
    rental_rate: Mapped[Decimal] = mapped_column(
        Numeric(4, 2),
        nullable=False,
        default=Decimal("4.99")
    )
    length: Mapped[Optional[int]] = mapped_column(SmallInteger, nullable=True)
    replacement_cost: Mapped[Decimal] = mapped_column(
        Numeric(5, 2),
        nullable=False,
        default=Decimal("19.99")
    )
    rating: Mapped[Optional[str]] = mapped_column(String(10), nullable=True, default="G")
    last_update: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<Film(id={self.film_id}, title='{self.title}', rating={self.rating})>"
