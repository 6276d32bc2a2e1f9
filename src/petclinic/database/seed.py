"""
Sample data for the petclinic database.

Loads the classic clinic data set: six vets with their specialties, six pet
types, ten owners with thirteen pets and four visits. Rows are inserted in a
fixed order on an empty database so the generated ids are stable (owner 1 is
George Franklin, pet 7 is Samantha, vet 3 is Linda Douglas, ...).
"""

import logging
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Owner, Pet, PetType, Specialty, Vet, Visit

logger = logging.getLogger(__name__)

SPECIALTIES = ("radiology", "surgery", "dentistry")

PET_TYPES = ("cat", "dog", "lizard", "snake", "bird", "hamster")

# (first name, last name, specialty names)
VETS = (
    ("James", "Carter", ()),
    ("Helen", "Leary", ("radiology",)),
    ("Linda", "Douglas", ("surgery", "dentistry")),
    ("Rafael", "Ortega", ("surgery",)),
    ("Henry", "Stevens", ("radiology",)),
    ("Sharon", "Jenkins", ()),
)

# (first name, last name, address, city, telephone)
OWNERS = (
    ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023"),
    ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749"),
    ("Eduardo", "Rodriquez", "2693 Commerce St.", "McFarland", "6085558763"),
    ("Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198"),
    ("Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765"),
    ("Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654"),
    ("Jeff", "Black", "1450 Oak Blvd.", "Monona", "6085555387"),
    ("Maria", "Escobito", "345 Maple St.", "Madison", "6085557683"),
    ("David", "Schroeder", "2749 Blackhawk Trail", "Madison", "6085559435"),
    ("Carlos", "Estaban", "2335 Independence La.", "Waunakee", "6085555487"),
)

# (name, birth date, pet type, owner position in OWNERS starting at 1)
PETS = (
    ("Leo", date(2010, 9, 7), "cat", 1),
    ("Basil", date(2012, 8, 6), "hamster", 2),
    ("Rosy", date(2011, 4, 17), "dog", 3),
    ("Jewel", date(2010, 3, 7), "dog", 3),
    ("Iggy", date(2010, 11, 30), "lizard", 4),
    ("George", date(2010, 1, 20), "snake", 5),
    ("Samantha", date(2012, 9, 4), "cat", 6),
    ("Max", date(2012, 9, 4), "cat", 6),
    ("Lucky", date(2011, 8, 6), "bird", 7),
    ("Mulligan", date(2007, 2, 24), "dog", 8),
    ("Freddy", date(2010, 3, 9), "bird", 9),
    ("Lucky", date(2010, 6, 24), "dog", 10),
    ("Sly", date(2012, 6, 8), "cat", 10),
)

# (pet position in PETS starting at 1, visit date, description)
VISITS = (
    (7, date(2013, 1, 1), "rabies shot"),
    (8, date(2013, 1, 2), "rabies shot"),
    (8, date(2013, 1, 3), "neutered"),
    (7, date(2013, 1, 4), "spayed"),
)


async def seed_sample_data(session: AsyncSession) -> bool:
    """
    Insert the sample data set unless the database already holds owners.

    Args:
        session: Session inside an open transaction

    Returns:
        True if data was inserted, False if the database was not empty
    """
    existing = await session.scalar(select(func.count()).select_from(Owner))
    if existing:
        logger.info(f"Skipping sample data, {existing} owners already present")
        return False

    specialties = {name: Specialty(name=name) for name in SPECIALTIES}
    pet_types = {name: PetType(name=name) for name in PET_TYPES}
    session.add_all(list(specialties.values()))
    session.add_all(list(pet_types.values()))
    await session.flush()

    session.add_all(
        [
            Vet(
                first_name=first_name,
                last_name=last_name,
                specialties=[specialties[name] for name in specialty_names],
            )
            for first_name, last_name, specialty_names in VETS
        ]
    )

    owners = [
        Owner(
            first_name=first_name,
            last_name=last_name,
            address=address,
            city=city,
            telephone=telephone,
        )
        for first_name, last_name, address, city, telephone in OWNERS
    ]
    session.add_all(owners)
    await session.flush()

    pets = []
    for name, birth_date, type_name, owner_position in PETS:
        pet = Pet(name=name, birth_date=birth_date, type=pet_types[type_name])
        owners[owner_position - 1].add_pet(pet)
        pets.append(pet)
    await session.flush()

    for pet_position, visit_date, description in VISITS:
        pets[pet_position - 1].add_visit(
            Visit(visit_date=visit_date, description=description)
        )
    await session.flush()

    logger.info(
        f"Loaded sample data: {len(owners)} owners, {len(pets)} pets, "
        f"{len(VETS)} vets, {len(VISITS)} visits"
    )
    return True
