"""
Shared repository behaviour: id lookup and save over an AsyncSession.
"""

import logging
from typing import Generic, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import EntityNotFoundException
from ..models import BaseEntity

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseEntity)


class Repository(Generic[E]):
    """
    Base repository bound to one entity class and one session.

    Repositories never commit; the transaction is owned by the caller
    (one transaction per web request).
    """

    model: Type[E]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, entity_id: int) -> E:
        """
        Retrieve an entity by id.

        Args:
            entity_id: Identifier to search for

        Returns:
            The entity

        Raises:
            EntityNotFoundException: If no row has that id
        """
        entity = await self.session.get(self.model, entity_id)
        if entity is None:
            logger.debug(f"{self.model.__name__} {entity_id} not found")
            raise EntityNotFoundException(self.model.__name__, entity_id)
        return entity

    async def save(self, entity: E) -> E:
        """
        Insert or update an entity.

        The session is flushed so a generated id is assigned immediately.

        Args:
            entity: Entity to persist

        Returns:
            The same entity, now carrying its id
        """
        was_new = entity.is_new
        self.session.add(entity)
        await self.session.flush()
        logger.info(
            f"{'Inserted' if was_new else 'Updated'} {self.model.__name__} {entity.id}"
        )
        return entity
