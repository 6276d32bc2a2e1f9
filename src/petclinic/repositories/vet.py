"""
Vet repository.
"""

from typing import List

from sqlalchemy import select

from ..models import Specialty, Vet
from .base import Repository


class VetRepository(Repository[Vet]):
    """Data access for vets; specialties are loaded with each vet."""

    model = Vet

    async def find_all(self) -> List[Vet]:
        """Retrieve all vets ordered by id."""
        result = await self.session.execute(select(Vet).order_by(Vet.id))
        return list(result.scalars().all())

    async def find_specialties(self) -> List[Specialty]:
        """Retrieve all specialties ordered by name."""
        result = await self.session.execute(
            select(Specialty).order_by(Specialty.name)
        )
        return list(result.scalars().all())
