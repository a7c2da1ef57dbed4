"""
Link Store

Persistence of Link records on top of an async SQLAlchemy session.

Design Decisions:
- Name uniqueness is enforced by the unique index on links.name; the store
  never checks for an existing name before writing, so two concurrent
  creates cannot both succeed
- Writes commit inside the store so constraint violations surface here and
  can be classified through the database adapter
- Every SQLAlchemy failure leaves the store as a StoreError subclass
"""

import logging
import uuid

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shortlinks.core.exceptions import DuplicateNameError, RecordNotFoundError, StoreUnavailableError
from shortlinks.db.interface import DatabaseAdapter
from shortlinks.db.models import Link

logger = logging.getLogger(__name__)


class LinkStore:
    """
    Repository for Link records.

    One store wraps one session, so it lives for a single request.
    """

    def __init__(self, session: AsyncSession, adapter: DatabaseAdapter):
        """
        Args:
            session: Database session for this unit of work
            adapter: Adapter of the engine behind the session, used to
                recognise duplicate-key errors
        """
        self.session = session
        self.adapter = adapter

    async def create(self, name: str, url: str) -> Link:
        """
        Insert a new link.

        Raises:
            DuplicateNameError: If a link with this name already exists
            StoreUnavailableError: If the insert fails for any other reason
        """
        link = Link(name=name, url=url)
        self.session.add(link)
        await self._commit(name)
        return link

    async def find_by_id(self, link_id: uuid.UUID) -> Link:
        """
        Raises:
            RecordNotFoundError: If no link has this id
        """
        return await self._find_one("id", link_id)

    async def find_by_name(self, name: str) -> Link:
        """
        Raises:
            RecordNotFoundError: If no link has this name
        """
        return await self._find_one("name", name)

    async def list_all(self) -> list[Link]:
        try:
            result = await self.session.execute(select(Link))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise StoreUnavailableError("Failed to list links", original_error=e) from e

    async def update(self, link_id: uuid.UUID, name: str, url: str) -> Link:
        """
        Replace name and url of an existing link.

        Raises:
            RecordNotFoundError: If no link has this id
            DuplicateNameError: If another link already uses the new name
            StoreUnavailableError: If the update fails for any other reason
        """
        link = await self.find_by_id(link_id)
        link.name = name
        link.url = url
        self.session.add(link)
        await self._commit(name)
        return link

    async def delete_by_id(self, link_id: uuid.UUID) -> None:
        """
        Delete a link by id.

        Raises:
            RecordNotFoundError: If the delete affected no rows
        """
        try:
            result = await self.session.execute(delete(Link).where(Link.id == link_id))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreUnavailableError("Failed to delete link", original_error=e) from e

        if result.rowcount == 0:
            raise RecordNotFoundError("id", link_id)

    async def _find_one(self, field: str, value: object) -> Link:
        statement = select(Link).where(getattr(Link, field) == value)
        try:
            result = await self.session.execute(statement)
            link = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to look up link by {field}", original_error=e) from e

        if link is None:
            raise RecordNotFoundError(field, value)
        return link

    async def _commit(self, name: str) -> None:
        try:
            await self.session.flush()
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            if self.adapter.is_duplicate_key_error(e):
                raise DuplicateNameError(name) from e
            raise StoreUnavailableError("Constraint violation while saving link", original_error=e) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to save link '{name}': {str(e)}", exc_info=True)
            raise StoreUnavailableError(f"Failed to save link: {str(e)}", original_error=e) from e
