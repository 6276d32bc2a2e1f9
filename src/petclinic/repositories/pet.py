"""
Pet repository.
"""

from typing import List

from sqlalchemy import select

from ..exceptions import EntityNotFoundException
from ..models import Pet, PetType
from .base import Repository


class PetRepository(Repository[Pet]):
    """Data access for pets and the pet type lookup table."""

    model = Pet

    async def find_pet_types(self) -> List[PetType]:
        """Retrieve all pet types ordered by name."""
        result = await self.session.execute(select(PetType).order_by(PetType.name))
        return list(result.scalars().all())

    async def find_pet_type(self, type_id: int) -> PetType:
        """
        Retrieve one pet type in the current session.

        Raises:
            EntityNotFoundException: If no pet type has that id
        """
        pet_type = await self.session.get(PetType, type_id)
        if pet_type is None:
            raise EntityNotFoundException(PetType.__name__, type_id)
        return pet_type
