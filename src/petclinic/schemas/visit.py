"""
Visit Pydantic schemas for form binding.
"""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import Visit


class VisitForm(BaseModel):
    """Submitted visit fields. A missing date means today."""

    model_config = ConfigDict(str_strip_whitespace=True)

    visit_date: Optional[date] = Field(None, description="Date of the visit")
    description: str = Field("", max_length=255, description="What was done")

    @field_validator("visit_date", mode="before")
    @classmethod
    def blank_as_none(cls, v: Any) -> Any:
        """Treat an empty input as no value."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_model(self) -> Visit:
        """Create a new, unsaved visit from the form."""
        return Visit(visit_date=self.visit_date, description=self.description)
