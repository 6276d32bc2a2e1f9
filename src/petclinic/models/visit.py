"""
Visit model for the petclinic package.
"""

from datetime import date
from typing import Any

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseEntity


class Visit(BaseEntity):
    """A dated record of a veterinary encounter for a pet."""

    __tablename__ = "visits"

    def __init__(self, **kwargs: Any) -> None:
        """Initialize Visit dated today unless a date is given."""
        if kwargs.get("visit_date") is None:
            kwargs["visit_date"] = date.today()
        super().__init__(**kwargs)

    visit_date: Mapped[date] = mapped_column(
        Date, nullable=False, default=date.today, comment="Date of the visit"
    )

    description: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="What happened during the visit"
    )

    pet_id: Mapped[int] = mapped_column(
        ForeignKey("pets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Id of the visited pet",
    )

    def __repr__(self) -> str:
        """String representation of the Visit model."""
        return f"<Visit(id={self.id}, pet_id={self.pet_id}, date={self.visit_date})>"
