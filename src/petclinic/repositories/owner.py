"""
Owner repository.
"""

import logging
from typing import List

from sqlalchemy import select

from ..models import Owner
from .base import Repository

logger = logging.getLogger(__name__)


class OwnerRepository(Repository[Owner]):
    """Data access for owners (pets and their visits are loaded eagerly)."""

    model = Owner

    async def find_by_last_name(self, last_name: str) -> List[Owner]:
        """
        Retrieve owners whose last name starts with the given value.

        Args:
            last_name: Last-name prefix, matched literally; an empty string
                matches every owner

        Returns:
            Matching owners ordered by id, possibly empty
        """
        stmt = (
            select(Owner)
            .where(Owner.last_name.startswith(last_name, autoescape=True))
            .order_by(Owner.id)
        )
        result = await self.session.execute(stmt)
        owners = list(result.scalars().all())
        logger.debug(f"Found {len(owners)} owners for last name '{last_name}'")
        return owners
