"""
Shared test fixtures.

Every test gets its own SQLite database file under tmp_path, with the links
table created from the SQLModel metadata. API tests talk to the app through
httpx's ASGI transport with get_session overridden to use that database.
"""

import os

# Settings are read at import time, so these must be set before shortlinks loads
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from shortlinks.core.exceptions import StoreUnavailableError
from shortlinks.db.link_store import LinkStore
from shortlinks.db.session import create_tables, get_session
from shortlinks.db.sqlite_adapter import SQLiteAdapter
from shortlinks.main import create_app
from shortlinks.services.link_service import LinkService


@pytest.fixture
def adapter():
    return SQLiteAdapter()


@pytest_asyncio.fixture
async def db_engine(tmp_path, adapter):
    engine = adapter.create_engine(f"sqlite+aiosqlite:///{tmp_path / 'links.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    return async_sessionmaker(
        db_engine,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def store(session, adapter):
    return LinkStore(session, adapter)


@pytest.fixture
def service(store):
    return LinkService(store)


class UnavailableStore:
    """Store whose every operation fails like a dropped database connection."""

    def __getattr__(self, item):
        async def fail(*args, **kwargs):
            raise StoreUnavailableError("connection refused")
        return fail


@pytest.fixture
def unavailable_store():
    return UnavailableStore()


@pytest.fixture
def stored_links(session_maker, adapter):
    """Read the links table through a fresh session (what other requests would see)."""
    async def _stored_links():
        async with session_maker() as session:
            return await LinkStore(session, adapter).list_all()
    return _stored_links


@pytest.fixture
def app(session_maker):
    app = create_app()

    async def override_get_session():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def create_link(client):
    """Create a link through the API and return its JSON body."""
    async def _create_link(name: str, url: str) -> dict:
        response = await client.post("/links", json={"name": name, "url": url})
        assert response.status_code == 201, response.text
        return response.json()
    return _create_link
