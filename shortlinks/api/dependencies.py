"""
Dependency wiring for the API layer.

The service graph is built per request through FastAPI dependencies:

    get_session -> get_link_store -> get_link_service -> endpoint

Tests replace get_session (and get_db_adapter when needed) through
app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shortlinks.db.interface import DatabaseAdapter
from shortlinks.db.link_store import LinkStore
from shortlinks.db.session import get_db_adapter, get_session
from shortlinks.services.link_service import LinkService


def get_link_store(
    session: AsyncSession = Depends(get_session),
    adapter: DatabaseAdapter = Depends(get_db_adapter),
) -> LinkStore:
    return LinkStore(session, adapter)


def get_link_service(store: LinkStore = Depends(get_link_store)) -> LinkService:
    return LinkService(store)
