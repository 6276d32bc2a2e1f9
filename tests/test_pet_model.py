"""
Tests for the Pet, PetType and Visit models.
"""

from datetime import date

import pytest

from petclinic.models import Pet, PetType, Visit


class TestPetModel:
    """Test cases for the Pet model."""

    def test_pet_creation(self):
        pet = Pet(name="Leo", birth_date=date(2010, 9, 7))

        assert pet.is_new
        assert pet.name == "Leo"
        assert pet.owner_id is None
        assert pet.visits == set()
        assert str(pet) == "Leo"

    def test_add_visit_points_visit_at_pet(self):
        pet = Pet(id=7, name="Samantha")
        visit = Visit(visit_date=date(2013, 1, 1), description="rabies shot")

        pet.add_visit(visit)

        assert visit in pet.visits
        assert visit.pet_id == 7

    def test_sorted_visits_oldest_first(self):
        pet = Pet(id=7, name="Samantha")
        pet.add_visit(Visit(visit_date=date(2013, 1, 4), description="spayed"))
        pet.add_visit(Visit(visit_date=date(2013, 1, 1), description="rabies shot"))

        assert [v.description for v in pet.sorted_visits] == ["rabies shot", "spayed"]

    def test_to_dict_formats_dates(self):
        pet = Pet(id=1, name="Leo", birth_date=date(2010, 9, 7), owner_id=1)

        data = pet.to_dict()

        assert data["birth_date"] == "2010-09-07"
        assert data["name"] == "Leo"
        assert data["owner_id"] == 1

    def test_update_fields_rejects_id(self):
        pet = Pet(id=1, name="Leo")

        with pytest.raises(AttributeError):
            pet.update_fields(id=2)

    def test_update_fields_rejects_unknown_attribute(self):
        pet = Pet(name="Leo")

        with pytest.raises(AttributeError):
            pet.update_fields(species="cat")

    def test_table_names(self):
        assert Pet.get_table_name() == "pets"
        assert PetType.get_table_name() == "types"
        assert Visit.get_table_name() == "visits"


class TestVisitModel:
    """Test cases for the Visit model."""

    def test_visit_defaults_to_today(self):
        visit = Visit(description="check-up")

        assert visit.visit_date == date.today()

    def test_explicit_visit_date_is_kept(self):
        visit = Visit(visit_date=date(2013, 1, 2), description="rabies shot")

        assert visit.visit_date == date(2013, 1, 2)


class TestPetDatabase:
    """Pet persistence."""

    @pytest.mark.asyncio
    async def test_pet_type_and_visits_persist(
        self,
        async_session,
        owner_factory,
        pet_factory,
        pet_type_factory,
        visit_factory,
    ):
        owner = await owner_factory.create(async_session)
        dog = await pet_type_factory.create(async_session, "dog")
        pet = await pet_factory.create(async_session, owner, dog, name="Rosy")
        await visit_factory.create(async_session, pet, description="neutered")

        assert pet.id is not None
        assert pet.type_id == dog.id
        assert pet.type.name == "dog"
        assert [v.description for v in pet.sorted_visits] == ["neutered"]
