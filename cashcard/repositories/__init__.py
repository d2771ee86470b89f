"""
Persistence adapters.

Services depend on the ``CashCardStore`` protocol; the SQL implementation is
passed in at construction time.
"""

from .base import CashCardStore
from .sql_repository import SQLCashCardRepository, SQLUserRepository

__all__ = ["CashCardStore", "SQLCashCardRepository", "SQLUserRepository"]
