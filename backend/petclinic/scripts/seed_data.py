"""Module: seed_data."""

import argparse
import random
import string
from datetime import date, timedelta

from faker import Faker
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from petclinic.db.models.owner import Owner
from petclinic.db.models.pet import Pet
from petclinic.db.models.pet_type import PetType
from petclinic.db.models.specialty import Specialty
from petclinic.db.models.vet import Vet
from petclinic.db.models.visit import Visit

SPECIALTIES = ["radiology", "surgery", "dentistry"]

# (first name, last name, specialties)
VETS = [
    ("James", "Carter", []),
    ("Helen", "Leary", ["radiology"]),
    ("Linda", "Douglas", ["surgery", "dentistry"]),
    ("Rafael", "Ortega", ["surgery"]),
    ("Henry", "Stevens", ["radiology"]),
    ("Sharon", "Jenkins", []),
]

PET_TYPES = ["cat", "dog", "lizard", "snake", "bird", "hamster"]

# (first name, last name, address, city, telephone)
OWNERS = [
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
]

# (name, birth date, type, owner index into OWNERS)
PETS = [
    ("Leo", date(2010, 9, 7), "cat", 0),
    ("Basil", date(2012, 8, 6), "hamster", 1),
    ("Rosy", date(2011, 4, 17), "dog", 2),
    ("Jewel", date(2010, 3, 7), "dog", 2),
    ("Iggy", date(2010, 11, 30), "lizard", 3),
    ("George", date(2010, 1, 20), "snake", 4),
    ("Samantha", date(2012, 9, 4), "cat", 5),
    ("Max", date(2012, 9, 4), "cat", 5),
    ("Lucky", date(2011, 8, 6), "bird", 6),
    ("Mulligan", date(2007, 2, 24), "dog", 7),
    ("Freddy", date(2010, 3, 9), "bird", 8),
    ("Lucky", date(2010, 6, 24), "dog", 9),
    ("Sly", date(2012, 6, 8), "cat", 9),
]

# (pet index into PETS, date, description)
VISITS = [
    (6, date(2013, 1, 1), "rabies shot"),
    (7, date(2013, 1, 2), "rabies shot"),
    (7, date(2013, 1, 3), "neutered"),
    (6, date(2013, 1, 4), "spayed"),
]


def generate_telephone() -> str:
    # Ten digits in the local exchange used by the reference owners.
    return "608555" + "".join(random.choice(string.digits) for _ in range(4))


def seed_reference_data(session: Session) -> bool:
    """
    Load the standard clinic dataset.

    Skipped when vets already exist, so running it twice is harmless.
    Returns True when rows were inserted.
    """
    if session.execute(select(func.count(Vet.id))).scalar_one():
        return False

    specialties = {name: Specialty(name=name) for name in SPECIALTIES}
    for first_name, last_name, names in VETS:
        session.add(
            Vet(
                first_name=first_name,
                last_name=last_name,
                specialties=[specialties[n] for n in names],
            )
        )

    types = {name: PetType(name=name) for name in PET_TYPES}
    session.add_all(types.values())

    owners = [
        Owner(first_name=f, last_name=l, address=a, city=c, telephone=t)
        for f, l, a, c, t in OWNERS
    ]
    session.add_all(owners)

    pets = []
    for name, birth_date, type_name, owner_index in PETS:
        pet = Pet(name=name, birth_date=birth_date, type=types[type_name])
        owners[owner_index].pets.append(pet)
        pets.append(pet)

    for pet_index, visit_date, description in VISITS:
        pets[pet_index].visits.append(Visit(visit_date=visit_date, description=description))

    session.commit()
    return True


def seed_fake_owners(session: Session, count: int, seed: int | None = None) -> list[Owner]:
    # Demo owners with one to three pets each; requires the pet types to exist.
    fake = Faker()
    if seed is not None:
        Faker.seed(seed)
        random.seed(seed)

    types = list(session.execute(select(PetType)).scalars())
    if not types:
        raise RuntimeError("Pet types missing; load the reference dataset first")

    owners = []
    for _ in range(count):
        owner = Owner(
            first_name=fake.first_name(),
            last_name=fake.last_name(),
            address=fake.street_address(),
            city=fake.city(),
            telephone=generate_telephone(),
        )
        used_names: set[str] = set()
        for _ in range(random.randint(1, 3)):
            name = fake.first_name()
            if name.lower() in used_names:
                continue
            used_names.add(name.lower())
            pet = Pet(
                name=name,
                birth_date=fake.date_between(start_date="-15y", end_date="today"),
                type=random.choice(types),
            )
            if random.random() < 0.5:
                pet.visits.append(
                    Visit(
                        visit_date=date.today() - timedelta(days=random.randint(0, 720)),
                        description=random.choice(["annual checkup", "vaccination", "dental cleaning"]),
                    )
                )
            owner.pets.append(pet)
        owners.append(owner)

    session.add_all(owners)
    session.commit()
    return owners


if __name__ == "__main__":
    from petclinic.db.init_db import init_db
    from petclinic.db.session import SessionLocal, engine

    parser = argparse.ArgumentParser(description="Load the pet clinic dataset.")
    parser.add_argument("--fake-owners", type=int, default=0, help="also generate N demo owners")
    parser.add_argument("--seed", type=int, default=None, help="random seed for generated owners")
    args = parser.parse_args()

    init_db(engine)
    session = SessionLocal()
    try:
        if args.fake_owners:
            created = seed_fake_owners(session, args.fake_owners, seed=args.seed)
            print(f"Generated {len(created)} demo owners.")
    finally:
        session.close()
