"""
Pet Pydantic schemas for form binding.

The pet type is submitted by name and resolved to a ``PetType`` by the web
layer through the reference data.
"""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import Pet


class PetForm(BaseModel):
    """Submitted pet fields."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field("", max_length=80, description="Pet's name")
    birth_date: Optional[date] = Field(None, description="Birth date (YYYY-MM-DD)")
    type: Optional[str] = Field(None, description="Name of the pet type")

    @field_validator("birth_date", "type", mode="before")
    @classmethod
    def blank_as_none(cls, v: Any) -> Any:
        """Treat an empty input as no value."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @classmethod
    def from_model(cls, pet: Pet) -> "PetForm":
        """Pre-fill the form from an existing pet."""
        return cls(
            name=pet.name or "",
            birth_date=pet.birth_date,
            type=pet.type.name if pet.type is not None else None,
        )
