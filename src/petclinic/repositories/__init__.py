"""
Repositories: async data access over an AsyncSession.

Each repository wraps one session; the transaction boundary belongs to the
caller.
"""

from .base import Repository
from .owner import OwnerRepository
from .pet import PetRepository
from .reference import LookupItem, ReferenceData, load_reference_data
from .vet import VetRepository
from .visit import VisitRepository

__all__ = [
    "Repository",
    "OwnerRepository",
    "PetRepository",
    "VisitRepository",
    "VetRepository",
    "LookupItem",
    "ReferenceData",
    "load_reference_data",
]
