"""
Veterinarian and Specialty models for the petclinic package.
"""

from typing import Any, List

from sqlalchemy import Column, ForeignKey, Table
from sqlalchemy.orm import Mapped, relationship

from .base import Base, NamedEntity, Person


class Specialty(NamedEntity):
    """Veterinary specialty (radiology, surgery, ...). Shared reference data."""

    __tablename__ = "specialties"


vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column(
        "vet_id", ForeignKey("vets.id", ondelete="CASCADE"), primary_key=True
    ),
    Column("specialty_id", ForeignKey("specialties.id"), primary_key=True),
)


class Vet(Person):
    """
    Veterinarian with a set of specialties.

    Specialties are loaded in name order.
    """

    __tablename__ = "vets"

    def __init__(self, **kwargs: Any) -> None:
        """Initialize Vet with an empty, loaded specialty list."""
        if "specialties" not in kwargs:
            kwargs["specialties"] = []
        super().__init__(**kwargs)

    specialties: Mapped[List[Specialty]] = relationship(
        secondary=vet_specialties,
        order_by=Specialty.name,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation of the Vet model."""
        return f"<Vet(id={self.id}, name='{self.first_name} {self.last_name}')>"

    @property
    def sorted_specialties(self) -> List[Specialty]:
        """Specialties ordered by name."""
        return sorted(self.specialties, key=lambda s: s.name or "")

    @property
    def nr_of_specialties(self) -> int:
        """Number of specialties the vet holds."""
        return len(self.specialties)

    def add_specialty(self, specialty: Specialty) -> None:
        """Add a specialty unless the vet already has it."""
        if specialty not in self.specialties:
            self.specialties.append(specialty)
