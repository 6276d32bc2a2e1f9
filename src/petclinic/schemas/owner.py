"""
Owner Pydantic schemas for form binding.

The owner form never carries an id; the id always comes from the URL.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..models import Owner


class OwnerForm(BaseModel):
    """Submitted owner fields."""

    model_config = ConfigDict(str_strip_whitespace=True, from_attributes=True)

    first_name: str = Field("", max_length=30, description="Owner's first name")
    last_name: str = Field("", max_length=30, description="Owner's last name")
    address: str = Field("", max_length=255, description="Street address")
    city: str = Field("", max_length=80, description="City")
    telephone: str = Field("", description="Telephone, up to ten digits")

    def to_model(self) -> Owner:
        """Create a new, unsaved owner from the form."""
        return Owner(**self.model_dump())

    def apply_to(self, owner: Owner) -> Owner:
        """Copy the form values onto an existing owner."""
        owner.update_fields(**self.model_dump())
        return owner


class OwnerSearchForm(BaseModel):
    """Query parameters of the find-owners page."""

    model_config = ConfigDict(str_strip_whitespace=True)

    last_name: str = Field("", description="Last name prefix; empty finds all")
