"""
Vet Pydantic schemas for API serialization.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SpecialtyResponse(BaseModel):
    """Schema for a specialty in vet listings."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class VetResponse(BaseModel):
    """Schema for a vet with its specialties in name order."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    specialties: List[SpecialtyResponse] = Field(default_factory=list)


class VetListResponse(BaseModel):
    """Wrapper matching the ``{"vet_list": [...]}`` JSON shape."""

    vet_list: List[VetResponse]
