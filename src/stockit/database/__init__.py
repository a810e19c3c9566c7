"""Database layer for stockit application."""

from stockit.database.base import Database
from stockit.database.factories import create_sqlite_database, create_memory_database

__all__ = ["Database", "create_sqlite_database", "create_memory_database"]
