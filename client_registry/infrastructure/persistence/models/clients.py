"""Client ORM model."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Date, Integer, Text, true
from sqlalchemy.orm import Mapped, mapped_column

from client_registry.infrastructure.database import Base


class Client(Base):
    """Registered client.  active=false marks a logically deleted row."""

    __tablename__ = "clients"

    client_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )
    username: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    pwd: Mapped[str] = mapped_column(Text, nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
