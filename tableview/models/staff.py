from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from tableview.models.base import Base


class Staff(Base):
    """Row of the ``staff`` table (without the ``picture`` blob)."""

    __tablename__ = "staff"

    staff_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(45), nullable=False)
    last_name: Mapped[str] = mapped_column(String(45), nullable=False)
    address_id: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    store_id: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    username: Mapped[str] = mapped_column(String(16), nullable=False)
    password: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)
    last_update: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<Staff(id={self.staff_id}, username='{self.username}', store={self.store_id})>"
