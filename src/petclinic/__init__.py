"""
PetClinic

A veterinary clinic records application: owners and their pets, the visits
each pet has had, and the clinic's veterinarians with their specialties.

The package includes:

- SQLAlchemy models for the clinic entities (Owner, Pet, PetType, Visit, Vet, Specialty)
- Async repositories, one transaction per web request
- Pydantic form schemas with explicit field validators
- Database connection utilities with async SQLAlchemy engine configuration
- A FastAPI front end rendering Jinja2 templates
- Migration support through Alembic integration

Quick Start:
    >>> from petclinic.database import SessionManager, create_engine
    >>> from petclinic.repositories import OwnerRepository

    >>> manager = SessionManager(create_engine("sqlite+aiosqlite:///./petclinic.db"))
    >>> async with manager.get_transaction() as session:
    ...     owners = await OwnerRepository(session).find_by_last_name("Davis")

Run the web application with ``python -m petclinic serve``.
"""

__version__ = "0.1.0"

# Import implemented modules
from . import database
from . import exceptions
from . import models
from . import repositories
from . import schemas
from . import utils

# Convenience imports for common usage patterns
from .database import SessionManager, create_engine
from .exceptions import EntityNotFoundException, PetClinicException
from .models import Owner, Pet, PetType, Specialty, Vet, Visit

__all__ = [
    "__version__",
    # Core modules
    "database",
    "exceptions",
    "models",
    "repositories",
    "schemas",
    "utils",
    # Convenience imports
    "SessionManager",
    "create_engine",
    "PetClinicException",
    "EntityNotFoundException",
    "Owner",
    "Pet",
    "PetType",
    "Specialty",
    "Vet",
    "Visit",
]
