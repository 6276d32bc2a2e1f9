"""
Immutable snapshot of the clinic's lookup tables.

Pet types and specialties are shared by every request and never edited by
the application, so they are read once at startup and kept as frozen value
objects indexed by id. ORM instances are not shared across sessions; callers
that need a mapped ``PetType`` resolve the id in their own session.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import EntityNotFoundException
from .pet import PetRepository
from .vet import VetRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupItem:
    """One row of a lookup table."""

    id: int
    name: str


@dataclass(frozen=True)
class ReferenceData:
    """Pet types and specialties keyed by id."""

    pet_types: Mapping[int, LookupItem] = field(
        default_factory=lambda: MappingProxyType({})
    )
    specialties: Mapping[int, LookupItem] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_items(
        cls,
        pet_types: List[LookupItem],
        specialties: List[LookupItem],
    ) -> "ReferenceData":
        """Build a snapshot from plain lookup items."""
        return cls(
            pet_types=MappingProxyType({item.id: item for item in pet_types}),
            specialties=MappingProxyType({item.id: item for item in specialties}),
        )

    def pet_type(self, type_id: int) -> LookupItem:
        """
        Return the pet type with the given id.

        Raises:
            EntityNotFoundException: If the id is unknown
        """
        try:
            return self.pet_types[type_id]
        except KeyError:
            raise EntityNotFoundException("PetType", type_id) from None

    def specialty(self, specialty_id: int) -> LookupItem:
        """
        Return the specialty with the given id.

        Raises:
            EntityNotFoundException: If the id is unknown
        """
        try:
            return self.specialties[specialty_id]
        except KeyError:
            raise EntityNotFoundException("Specialty", specialty_id) from None

    def pet_type_by_name(self, name: str) -> Optional[LookupItem]:
        """Return the pet type with the given name, or None."""
        for item in self.pet_types.values():
            if item.name == name:
                return item
        return None

    @property
    def sorted_pet_types(self) -> Tuple[LookupItem, ...]:
        """Pet types ordered by name, as offered on the pet form."""
        return tuple(sorted(self.pet_types.values(), key=lambda item: item.name))


async def load_reference_data(session: AsyncSession) -> ReferenceData:
    """
    Read the lookup tables into an immutable snapshot.

    Args:
        session: Any open session

    Returns:
        The reference data snapshot
    """
    pet_types = await PetRepository(session).find_pet_types()
    specialties = await VetRepository(session).find_specialties()
    data = ReferenceData.from_items(
        [LookupItem(id=t.id, name=t.name) for t in pet_types],
        [LookupItem(id=s.id, name=s.name) for s in specialties],
    )
    logger.info(
        f"Loaded reference data: {len(data.pet_types)} pet types, "
        f"{len(data.specialties)} specialties"
    )
    return data
