"""
Pet and PetType models for the petclinic package.

A pet belongs to exactly one owner. The owner side holds the pet collection.
The pet keeps a many-to-one ``owner`` reference that is never lazy loaded;
it lets the flush fill in ``owner_id`` for an owner that has no id yet.
"""

from datetime import date
from typing import TYPE_CHECKING, Any, List, Optional, Set

from sqlalchemy import Date, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import NamedEntity

if TYPE_CHECKING:
    from .owner import Owner
    from .visit import Visit


class PetType(NamedEntity):
    """Kind of animal (cat, dog, lizard, ...). Shared reference data."""

    __tablename__ = "types"


class Pet(NamedEntity):
    """
    Pet model with birth date, type and visit history.

    Attributes:
        birth_date: Pet's birth date
        type_id: Foreign key to the pet's type
        owner_id: Foreign key to the owning owner (pet-id -> owner-id index)
        owner: Owner the pet was added to; set by Owner.add_pet, never loaded
        type: The loaded PetType
        visits: Visits recorded for this pet, deleted with the pet
    """

    __tablename__ = "pets"

    def __init__(self, **kwargs: Any) -> None:
        """Initialize Pet with an empty, loaded visit collection."""
        if "visits" not in kwargs:
            kwargs["visits"] = set()
        super().__init__(**kwargs)

    birth_date: Mapped[Optional[date]] = mapped_column(
        Date, nullable=True, comment="Pet's birth date"
    )

    type_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("types.id"), nullable=True, comment="Id of the pet's type"
    )

    owner_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("owners.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
        comment="Id of the pet's owner",
    )

    __table_args__ = (Index("idx_pets_owner_name", "owner_id", "name"),)

    # Relationships
    type: Mapped[Optional[PetType]] = relationship(lazy="joined")
    owner: Mapped[Optional["Owner"]] = relationship(lazy="raise", overlaps="pets")
    visits: Mapped[Set["Visit"]] = relationship(
        collection_class=set,
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation of the Pet model."""
        return f"<Pet(id={self.id}, name='{self.name}', owner_id={self.owner_id})>"

    def add_visit(self, visit: "Visit") -> None:
        """
        Record a visit for this pet.

        Args:
            visit: Visit to attach; its ``pet_id`` is pointed at this pet
        """
        self.visits.add(visit)
        visit.pet_id = self.id

    @property
    def sorted_visits(self) -> List["Visit"]:
        """Visits ordered by date, oldest first."""
        return sorted(self.visits, key=lambda v: (v.visit_date, v.id or 0))
