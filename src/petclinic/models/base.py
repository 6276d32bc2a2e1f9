"""
Base model classes for all SQLAlchemy models in the petclinic package.

This module provides the declarative base and the abstract entity classes
every clinic record inherits from:

- ``BaseEntity``: integer primary key and the ``is_new`` check
- ``NamedEntity``: adds a ``name`` column (pet types, specialties, pets)
- ``Person``: adds first and last name (owners, vets)

Example:
    >>> from petclinic.models.base import NamedEntity

    >>> class Breed(NamedEntity):
    ...     __tablename__ = "breeds"

    >>> breed = Breed(name="beagle")
    >>> breed.is_new  # no id has been assigned yet
    True
    >>> str(breed)
    'beagle'
"""

from datetime import date, datetime
from typing import Any, Dict

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base declarative class for all SQLAlchemy models."""


class BaseEntity(Base):
    """
    Abstract base model with an integer identity.

    The identifier is generated by the database on first insert; until then
    the entity is considered new.

    Attributes:
        id (int, optional): Primary key, ``None`` until the entity is persisted
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    @property
    def is_new(self) -> bool:
        """True while the entity has no persisted identifier."""
        return self.id is None

    def __repr__(self) -> str:
        """
        Return string representation of the model instance.

        Returns:
            String in format: <ModelName(id=...)>
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert model instance to dictionary representation.

        Dates and datetimes are converted to ISO format strings, every other
        column value is returned unchanged.

        Returns:
            Dictionary with column names as keys and serialized values.
        """
        result = {}
        for column in self.__table__.columns:
            value = getattr(self, column.key)
            if isinstance(value, (date, datetime)):
                result[column.key] = value.isoformat()
            else:
                result[column.key] = value
        return result

    @classmethod
    def get_table_name(cls) -> str:
        """
        Get the database table name for this model.

        Returns:
            The table name as defined in __tablename__.
        """
        return cls.__tablename__

    def update_fields(self, **kwargs: Any) -> None:
        """
        Update multiple fields on the model instance in a single operation.

        Args:
            **kwargs: Field names as keys and new values as values.
                     Only existing model attributes can be updated.

        Raises:
            AttributeError: If any field name doesn't exist on the model.

        Note:
            This method only modifies the instance. The surrounding
            transaction persists the change.
        """
        for field, value in kwargs.items():
            if field == "id":
                raise AttributeError(
                    f"'{self.__class__.__name__}' id cannot be updated"
                )
            if hasattr(self, field):
                setattr(self, field, value)
            else:
                raise AttributeError(
                    f"'{self.__class__.__name__}' has no attribute '{field}'"
                )


class NamedEntity(BaseEntity):
    """Abstract base for entities identified to users by a name."""

    __abstract__ = True

    name: Mapped[str] = mapped_column(String(80), nullable=False)

    def __str__(self) -> str:
        return self.name or ""


class Person(BaseEntity):
    """Abstract base for people known to the clinic."""

    __abstract__ = True

    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}"

