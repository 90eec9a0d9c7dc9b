"""
SQLAlchemy ORM models.

These are purely infrastructure concerns; domain entities are mapped to/from
these models inside the repository implementations.
"""
from datetime import datetime
from decimal import Decimal

from sqlalchemy import BigInteger, DateTime, Numeric, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database.connection import Base


class TokenModel(Base):
    __tablename__ = "tokens"

    token: Mapped[str] = mapped_column(String(512), primary_key=True)
    username: Mapped[str] = mapped_column(String(256), nullable=False)
    expiry: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class ItemModel(Base):
    __tablename__ = "items"

    # Generated by the application, never by the database
    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    type: Mapped[int] = mapped_column(SmallInteger, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(512), nullable=False)
    seller: Mapped[str] = mapped_column(String(256), nullable=False)
    image: Mapped[str] = mapped_column(String(2048), nullable=False)
    condition: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
