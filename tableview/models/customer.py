from datetime import date, datetime
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from tableview.models.base import Base


class Customer(Base):
    """
    Row of the ``customer`` table.

    ``activebool`` and ``active`` both exist in dvdrental; ``active`` is a
    legacy integer flag and may be NULL.
    """

    __tablename__ = "customer"

    customer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    store_id: Mapped[int] = mapped_column(SmallInteger, nullable=False, index=True)
    first_name: Mapped[str] = mapped_column(String(45), nullable=False)
    last_name: Mapped[str] = mapped_column(String(45), nullable=False, index=True)
    email: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    address_id: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    activebool: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    create_date: Mapped[date] = mapped_column(
        Date,
        server_default=func.current_date(),
        nullable=False
    )
    last_update: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=True
    )
    active: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Customer(id={self.customer_id}, name='{self.first_name} {self.last_name}', "
            f"store={self.store_id})>"
        )
