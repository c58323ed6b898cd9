"""Database layer for sitebook application."""

from sitebook.database.base import Database
from sitebook.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
