"""
Pytest configuration and fixtures for petclinic tests.

This module provides common fixtures for all tests in the petclinic
package: a file-backed SQLite database per test, sessions that are rolled
back after each test, the sample data set, factory classes and an HTTP
client for the web application.
"""

from datetime import date
from typing import AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from petclinic.database import SessionManager, create_engine, seed_sample_data
from petclinic.models import Owner, Pet, PetType, Specialty, Vet, Visit
from petclinic.utils import AppSettings
from petclinic.web import create_app


@pytest.fixture
def database_url(tmp_path) -> str:
    """SQLite database file private to one test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'petclinic_test.db'}"


@pytest_asyncio.fixture
async def test_engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine with foreign keys enforced."""
    engine = create_engine(database_url, echo=False)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_manager(
    test_engine: AsyncEngine,
) -> AsyncGenerator[SessionManager, None]:
    """Create a session manager over a freshly created schema."""
    session_manager = SessionManager(test_engine)
    await session_manager.create_schema()
    yield session_manager
    await session_manager.close()


@pytest_asyncio.fixture
async def async_session(
    test_session_manager: SessionManager,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Provide an async database session for testing with automatic cleanup.

    The session runs in one transaction that is rolled back after the test.
    """
    async with test_session_manager.get_session() as session:
        transaction = await session.begin()
        try:
            yield session
        finally:
            await transaction.rollback()


@pytest_asyncio.fixture
async def seeded_session(async_session: AsyncSession) -> AsyncSession:
    """
    Session holding the sample data set (owner 1 is George Franklin, ...).

    The seeded objects are expunged so every lookup reads from the database.
    """
    await seed_sample_data(async_session)
    async_session.expunge_all()
    return async_session


@pytest.fixture
def app_settings(database_url: str) -> AppSettings:
    return AppSettings(
        database_url=database_url, create_schema=True, load_sample_data=True
    )


@pytest_asyncio.fixture
async def client(app_settings: AppSettings) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client for the web application running on the sample data.

    ASGITransport does not send lifespan events, so the lifespan is entered
    explicitly around the client.
    """
    app = create_app(app_settings)
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            yield c


# Factory classes for creating test entities
class OwnerFactory:
    """Factory for creating test Owner instances."""

    @staticmethod
    def build(**kwargs) -> Owner:
        """Build an Owner instance without saving to database."""
        defaults = {
            "first_name": "Sam",
            "last_name": "Schultz",
            "address": "4, Evans Street",
            "city": "Wollongong",
            "telephone": "4444444444",
        }
        defaults.update(kwargs)
        return Owner(**defaults)

    @staticmethod
    async def create(session: AsyncSession, **kwargs) -> Owner:
        """Create and flush an Owner instance."""
        owner = OwnerFactory.build(**kwargs)
        session.add(owner)
        await session.flush()
        return owner


class PetTypeFactory:
    """Factory for creating test PetType instances."""

    @staticmethod
    async def create(session: AsyncSession, name: str = "dog") -> PetType:
        pet_type = PetType(name=name)
        session.add(pet_type)
        await session.flush()
        return pet_type


class PetFactory:
    """Factory for creating test Pet instances."""

    @staticmethod
    def build(pet_type: Optional[PetType] = None, **kwargs) -> Pet:
        """Build a Pet instance without saving to database."""
        defaults = {
            "name": "Leo",
            "birth_date": date(2010, 9, 7),
        }
        defaults.update(kwargs)
        pet = Pet(**defaults)
        if pet_type is not None:
            pet.type = pet_type
        return pet

    @staticmethod
    async def create(
        session: AsyncSession,
        owner: Owner,
        pet_type: Optional[PetType] = None,
        **kwargs,
    ) -> Pet:
        """Create a pet for ``owner`` and flush it."""
        pet = PetFactory.build(pet_type=pet_type, **kwargs)
        owner.add_pet(pet)
        session.add(pet)
        await session.flush()
        return pet


class VisitFactory:
    """Factory for creating test Visit instances."""

    @staticmethod
    def build(**kwargs) -> Visit:
        defaults = {"visit_date": date(2013, 1, 1), "description": "rabies shot"}
        defaults.update(kwargs)
        return Visit(**defaults)

    @staticmethod
    async def create(session: AsyncSession, pet: Pet, **kwargs) -> Visit:
        """Record a visit for ``pet`` and flush it."""
        visit = VisitFactory.build(**kwargs)
        pet.add_visit(visit)
        session.add(visit)
        await session.flush()
        return visit


class VetFactory:
    """Factory for creating test Vet instances."""

    @staticmethod
    def build(*specialty_names: str, **kwargs) -> Vet:
        defaults = {"first_name": "James", "last_name": "Carter"}
        defaults.update(kwargs)
        vet = Vet(**defaults)
        for name in specialty_names:
            vet.add_specialty(Specialty(name=name))
        return vet


@pytest.fixture
def owner_factory():
    """Provide OwnerFactory for tests."""
    return OwnerFactory


@pytest.fixture
def pet_factory():
    """Provide PetFactory for tests."""
    return PetFactory


@pytest.fixture
def pet_type_factory():
    """Provide PetTypeFactory for tests."""
    return PetTypeFactory


@pytest.fixture
def visit_factory():
    """Provide VisitFactory for tests."""
    return VisitFactory


@pytest.fixture
def vet_factory():
    """Provide VetFactory for tests."""
    return VetFactory
