"""
Request-scoped dependencies for the web layer.

Every request that touches the database runs in one transaction: it is
committed when the endpoint returns and rolled back if it raises.
Repositories requested by the same endpoint share that session.
"""

from pathlib import Path
from typing import AsyncGenerator

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import SessionManager
from ..repositories import (
    OwnerRepository,
    PetRepository,
    ReferenceData,
    VetRepository,
    VisitRepository,
)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


async def get_db_session(
    manager: SessionManager = Depends(get_session_manager),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session inside a transaction for the duration of the request."""
    async with manager.get_transaction() as session:
        yield session


def get_reference_data(request: Request) -> ReferenceData:
    return request.app.state.reference_data


def get_owner_repository(
    session: AsyncSession = Depends(get_db_session),
) -> OwnerRepository:
    return OwnerRepository(session)


def get_pet_repository(session: AsyncSession = Depends(get_db_session)) -> PetRepository:
    return PetRepository(session)


def get_visit_repository(
    session: AsyncSession = Depends(get_db_session),
) -> VisitRepository:
    return VisitRepository(session)


def get_vet_repository(session: AsyncSession = Depends(get_db_session)) -> VetRepository:
    return VetRepository(session)
