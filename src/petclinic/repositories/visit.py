"""
Visit repository.
"""

from typing import List

from sqlalchemy import select

from ..models import Visit
from .base import Repository


class VisitRepository(Repository[Visit]):
    """Data access for visits."""

    model = Visit

    async def find_by_pet_id(self, pet_id: int) -> List[Visit]:
        """Retrieve the visits of one pet, oldest first."""
        stmt = (
            select(Visit)
            .where(Visit.pet_id == pet_id)
            .order_by(Visit.visit_date, Visit.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
