"""
Database models for the petclinic package.

This module contains SQLAlchemy models for all clinic entities.
"""

# Base model will be imported by all other models
from .base import Base, BaseEntity, NamedEntity, Person

# Core entity models
from .owner import Owner
from .pet import Pet, PetType
from .vet import Specialty, Vet, vet_specialties
from .visit import Visit

__all__ = [
    "Base",
    "BaseEntity",
    "NamedEntity",
    "Person",
    "Owner",
    "Pet",
    "PetType",
    "Visit",
    "Vet",
    "Specialty",
    "vet_specialties",
]
