# backend/petclinic/db/models/__init__.py

from petclinic.db.models.owner import Owner
from petclinic.db.models.pet_type import PetType
from petclinic.db.models.pet import Pet
from petclinic.db.models.visit import Visit
from petclinic.db.models.specialty import Specialty, vet_specialties
from petclinic.db.models.vet import Vet

__all__ = ["Owner", "Pet", "PetType", "Specialty", "Vet", "Visit", "vet_specialties"]
