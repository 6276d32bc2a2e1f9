"""
Pydantic schemas for form binding and API serialization.
"""

from .owner import OwnerForm, OwnerSearchForm
from .pet import PetForm
from .vet import SpecialtyResponse, VetListResponse, VetResponse
from .visit import VisitForm

__all__ = [
    "OwnerForm",
    "OwnerSearchForm",
    "PetForm",
    "VisitForm",
    "SpecialtyResponse",
    "VetResponse",
    "VetListResponse",
]
