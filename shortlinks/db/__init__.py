"""
Database module with abstraction layer.

This module provides:
- DatabaseAdapter interface: Abstract base class for database implementations
- SQLiteAdapter / PostgreSQLAdapter: Engine-specific implementations
- LinkStore: Repository for Link records
- Session management: Database session creation and management

To add a new database backend:
1. Create a new adapter class inheriting from DatabaseAdapter
2. Implement all abstract methods
3. Register it in get_database_adapter() in session.py
"""

from shortlinks.db.interface import DatabaseAdapter
from shortlinks.db.link_store import LinkStore
from shortlinks.db.session import get_session, get_database_adapter, async_session_maker, engine

__all__ = [
    "DatabaseAdapter",
    "LinkStore",
    "get_session",
    "get_database_adapter",
    "async_session_maker",
    "engine",
]
