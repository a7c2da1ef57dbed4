"""
SQLite Database Adapter

This module implements the DatabaseAdapter interface for SQLite.
All SQLite-specific configuration and behavior is encapsulated here.

SQLite is a file-based database that's perfect for:
- Local development
- Testing
- Single-instance deployments

Key characteristics:
- File-based (single .db file)
- No server required
- Single writer at a time (file locking)
"""

from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.pool import NullPool

from shortlinks.db.interface import DatabaseAdapter


class SQLiteAdapter(DatabaseAdapter):
    """
    SQLite database adapter implementation.

    SQLite reports unique violations as sqlite3.IntegrityError with the
    message "UNIQUE constraint failed: <table>.<column>".
    """

    def get_pool_class(self) -> type[NullPool]:
        """
        Get the connection pool class for SQLite.

        SQLite uses NullPool because the file-based database doesn't benefit
        from connection pooling and handles one writer at a time.

        Returns:
            NullPool class
        """
        return NullPool

    def get_connect_args(self) -> dict[str, Any]:
        """
        Get SQLite-specific connection arguments.

        Returns:
            Dictionary with SQLite connection arguments
        """
        return {
            "check_same_thread": False,
            "timeout": 30,  # seconds to wait on a locked database file
        }

    def get_engine_kwargs(self) -> dict[str, Any]:
        return {"echo": False}

    def is_duplicate_key_error(self, error: IntegrityError) -> bool:
        return "UNIQUE constraint failed" in str(error.orig)

    def get_dialect_name(self) -> str:
        return "sqlite"
