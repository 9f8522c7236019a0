"""Database layer for the enuves application."""

from enuves.database.base import Database
from enuves.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
