"""
Link Service

This service holds the business rules for short links:
- Creating, replacing and deleting links
- Looking links up by id or by short name

It is the only place where store errors are translated. Every StoreError
raised by the LinkStore is caught here and re-raised as the ServiceError the
API layer knows how to render:

    DuplicateNameError     -> ConflictError ("Short name already exists")
    RecordNotFoundError    -> NotFoundError
    StoreUnavailableError  -> InternalError
"""

import logging
import uuid

from shortlinks.core.exceptions import (
    ConflictError,
    DuplicateNameError,
    InternalError,
    NotFoundError,
    RecordNotFoundError,
    StoreUnavailableError,
)
from shortlinks.db.link_store import LinkStore
from shortlinks.db.models import Link

logger = logging.getLogger(__name__)


class LinkService:
    """
    Core business logic for short links.

    Separated from the API layer for testability; receives its store through
    the constructor.
    """

    def __init__(self, store: LinkStore):
        self.store = store

    async def list_all(self) -> list[Link]:
        try:
            return await self.store.list_all()
        except StoreUnavailableError as e:
            raise self._internal(e) from e

    async def create(self, name: str, url: str) -> Link:
        """
        Create a new link.

        Raises:
            ConflictError: If the short name is already taken
            InternalError: If the database fails
        """
        try:
            link = await self.store.create(name, url)
        except DuplicateNameError:
            logger.info(f"Rejected duplicate short name '{name}'")
            raise ConflictError()
        except StoreUnavailableError as e:
            raise self._internal(e) from e

        logger.info(f"Created link {link.id} '{link.name}' -> {link.url}")
        return link

    async def get_by_name(self, name: str) -> Link:
        """
        Resolve a short name.

        Raises:
            NotFoundError: If no link uses this name
        """
        try:
            return await self.store.find_by_name(name)
        except RecordNotFoundError:
            raise NotFoundError()
        except StoreUnavailableError as e:
            raise self._internal(e) from e

    async def get_by_id(self, link_id: uuid.UUID) -> Link:
        try:
            return await self.store.find_by_id(link_id)
        except RecordNotFoundError:
            raise NotFoundError()
        except StoreUnavailableError as e:
            raise self._internal(e) from e

    async def update(self, link_id: uuid.UUID, name: str, url: str) -> Link:
        """
        Replace name and url of an existing link.

        The link is fetched first, so an unknown id fails before any write.

        Raises:
            NotFoundError: If no link has this id
            ConflictError: If another link already uses the new name
            InternalError: If the database fails
        """
        await self.get_by_id(link_id)

        try:
            link = await self.store.update(link_id, name, url)
        except RecordNotFoundError:
            # Deleted between the fetch and the write
            raise NotFoundError()
        except DuplicateNameError:
            logger.info(f"Rejected rename of {link_id} to duplicate short name '{name}'")
            raise ConflictError()
        except StoreUnavailableError as e:
            raise self._internal(e) from e

        logger.info(f"Updated link {link.id} '{link.name}' -> {link.url}")
        return link

    async def delete(self, link_id: uuid.UUID) -> None:
        """
        Delete a link.

        A delete that removes no rows counts as not found.

        Raises:
            NotFoundError: With the id in the message, if nothing was deleted
        """
        try:
            await self.store.delete_by_id(link_id)
        except RecordNotFoundError:
            raise NotFoundError(f'Link with ID: "{link_id}" not found')
        except StoreUnavailableError as e:
            raise self._internal(e) from e

        logger.info(f"Deleted link {link_id}")

    @staticmethod
    def _internal(error: StoreUnavailableError) -> InternalError:
        logger.error(f"Link store failure: {str(error)}", exc_info=error)
        return InternalError()
