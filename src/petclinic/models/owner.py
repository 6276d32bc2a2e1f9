"""
Owner model for the petclinic package.

This module contains the Owner SQLAlchemy model and the owner side of the
owner/pet association: adding pets, case-insensitive lookup by name and the
name-ordered view used by the owner details page.
"""

from typing import Any, List, Optional, Set

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Person
from .pet import Pet


class Owner(Person):
    """
    Clinic customer owning zero or more pets.

    The owner exclusively owns its pets: deleting an owner deletes them.
    """

    __tablename__ = "owners"

    def __init__(self, **kwargs: Any) -> None:
        """Initialize Owner with an empty, loaded pet collection."""
        if "pets" not in kwargs:
            kwargs["pets"] = set()
        super().__init__(**kwargs)

    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(80), nullable=False)
    telephone: Mapped[str] = mapped_column(String(20), nullable=False)

    pets: Mapped[Set[Pet]] = relationship(
        collection_class=set,
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        overlaps="owner",
    )

    def __repr__(self) -> str:
        """String representation of the Owner model."""
        return f"<Owner(id={self.id}, name='{self.first_name} {self.last_name}')>"

    @property
    def sorted_pets(self) -> List[Pet]:
        """Pets ordered by name using plain string ordering."""
        return sorted(self.pets, key=lambda pet: pet.name or "")

    def add_pet(self, pet: Pet) -> None:
        """
        Attach a pet to this owner.

        New pets join the owner's pet collection; the pet's owner reference
        is always pointed at this owner, so the foreign key is written on
        flush even when the owner itself has not been inserted yet. Adding
        the same pet twice leaves a single entry in the collection.

        Args:
            pet: Pet to attach
        """
        if pet.is_new:
            self.pets.add(pet)
        pet.owner = self
        if self.id is not None:
            pet.owner_id = self.id

    def get_pet(self, name: str, ignore_new: bool = False) -> Optional[Pet]:
        """
        Return the pet with the given name, ignoring case.

        Args:
            name: Pet name to look for
            ignore_new: Skip pets that have not been persisted yet

        Returns:
            The matching pet, or None if the owner has no pet of that name
        """
        wanted = name.lower()
        for pet in self.pets:
            if ignore_new and pet.is_new:
                continue
            if pet.name is not None and pet.name.lower() == wanted:
                return pet
        return None
