"""Module: pets."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from petclinic.core.outcomes import Found, Lookup, NotFound
from petclinic.db.models.pet import Pet
from petclinic.db.models.pet_type import PetType

logger = logging.getLogger(__name__)


class PetRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_for_owner(self, owner_id: int, pet_id: int) -> Lookup[Pet]:
        # Scoped to the owner so a pet id from another owner is not found.
        pet = self.db.execute(
            select(Pet)
            .where(Pet.id == pet_id, Pet.owner_id == owner_id)
            .options(selectinload(Pet.visits))
        ).scalar_one_or_none()
        if pet is None:
            logger.warning("Pet %s not found for owner %s", pet_id, owner_id)
            return NotFound("pet", pet_id)
        return Found(pet)

    def save(self, pet: Pet) -> Pet:
        self.db.add(pet)
        self.db.commit()
        self.db.refresh(pet)
        return pet


class PetTypeRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[PetType]:
        return list(self.db.execute(select(PetType).order_by(PetType.name)).scalars())
