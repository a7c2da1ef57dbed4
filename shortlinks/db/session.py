"""
Database Session Management with Connection Pooling

This module handles async database connections using SQLAlchemy's async engine.
Uses a database abstraction layer to support different database backends.

Key Features:
- Database abstraction: SQLite or PostgreSQL chosen from DATABASE_URL
- Connection pooling: Configured per database type
- Async session management: Proper async context management
- Error handling: Automatic rollback on exceptions
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from shortlinks.core.setting import settings
from shortlinks.db.interface import DatabaseAdapter
from shortlinks.db.postgres_adapter import PostgreSQLAdapter
from shortlinks.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)

_ADAPTERS: dict[str, type[DatabaseAdapter]] = {
    "sqlite": SQLiteAdapter,
    "postgresql": PostgreSQLAdapter,
}


def get_database_adapter(database_url: str) -> DatabaseAdapter:
    """
    Factory function to get the database adapter for a connection string.

    Args:
        database_url: SQLAlchemy URL, e.g. sqlite+aiosqlite:///./shortlinks.db

    Returns:
        DatabaseAdapter instance matching the URL's backend

    Raises:
        ValueError: If no adapter exists for the backend
    """
    backend = make_url(database_url).get_backend_name()
    try:
        return _ADAPTERS[backend]()
    except KeyError:
        raise ValueError(f"Unsupported database backend: {backend}") from None


db_adapter = get_database_adapter(settings.DATABASE_URL)

# The adapter handles all database-specific configuration
engine = db_adapter.create_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

async_session_maker = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,  # Prevents SQLAlchemy from expiring objects after commit
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function for FastAPI to get database session.

    This function:
    - Creates a new async session from the pool
    - Yields it to the endpoint
    - Automatically commits on success
    - Rolls back on exception
    - Closes session automatically (context manager handles it)
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_db_adapter() -> DatabaseAdapter:
    """Dependency returning the adapter the engine was built with."""
    return db_adapter


async def create_tables(bind: AsyncEngine = engine) -> None:
    """
    Create any missing tables for the registered SQLModel models.

    Used on startup for local development; production deployments run
    Alembic migrations instead (CREATE_TABLES_ON_STARTUP=false).
    """
    # Registers the Link table on SQLModel.metadata
    from shortlinks.db import models  # noqa: F401

    async with bind.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)
    logger.info(f"Database tables ensured on {bind.url.render_as_string(hide_password=True)}")
