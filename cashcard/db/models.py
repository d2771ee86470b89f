"""SQLAlchemy models for cash cards and their owners."""
from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    Float,
    Integer,
    String,
    Text,
    func,
)

from .session import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(255), primary_key=True)
    password_hash = Column(Text, nullable=False)
    role = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class CashCard(Base):
    __tablename__ = "cash_card"

    id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(Float, nullable=False)
    owner = Column(String(255), nullable=False, index=True)
